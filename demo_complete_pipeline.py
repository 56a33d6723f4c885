#!/usr/bin/env python3
"""
Complete Pipeline Demo: Token files → CTM → Preview → Variable store

Shows the full workflow:
1. Queue token documents in an import session
2. Parse them into Canonical Token Models
3. Preview the parsed tokens
4. Apply the model to an in-memory variable store
"""

import logging

from tokenimport.analyzer import analyze_model
from tokenimport.backends import InMemoryVariableStore
from tokenimport.examples import EXAMPLE_CSV, EXAMPLE_DTCG_JSON, EXAMPLE_SIMPLE_JSON
from tokenimport.importer import ImportSession
from tokenimport.serialization import model_to_yaml


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: Tokens → CTM → Preview → Store")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Queue files
    # =========================================================================
    print("\n1. QUEUEING FILES...")
    session = ImportSession()
    result = session.add_files([
        ("tokens.csv", EXAMPLE_CSV),
        ("dtcg.json", EXAMPLE_DTCG_JSON),
        ("simple.json", EXAMPLE_SIMPLE_JSON),
        ("notes.txt", "not a token file"),
    ])
    print(f"   ✓ Added: {result.added}")
    print(f"   ✓ Rejected: {result.rejected}")

    # =========================================================================
    # STEP 2: Parse
    # =========================================================================
    print("\n2. PARSING...")
    model = session.parse_all()
    print(f"   ✓ Collections: {model.collection_names()}")
    print(f"   ✓ Tokens: {model.token_count}")

    # =========================================================================
    # STEP 3: Preview
    # =========================================================================
    print("\n3. PREVIEW:")
    report = analyze_model(model, preview_limit=3)
    for preview in report.collections:
        print(f"   {preview.name} ({preview.token_count} tokens)")
        for name, value in preview.entries:
            print(f"      {name}: {value}")
        if preview.more_label:
            print(f"      {preview.more_label}")
    for warning in report.warnings:
        print(f"   ! {warning}")

    # =========================================================================
    # STEP 4: Apply
    # =========================================================================
    print("\n4. APPLYING TO STORE...")
    store = InMemoryVariableStore()
    count = session.apply(store)
    print(f"   ✓ {count} tokens imported into {store.list_collections()}")

    print("\n5. SERIALIZED MODEL (YAML):")
    print("-" * 80)
    lines = model_to_yaml(model).split("\n")
    for line in lines[:20]:
        print(f"   {line}")
    if len(lines) > 20:
        print(f"   ... ({len(lines) - 20} more lines)")

    print("\n" + "=" * 80)
    print("PIPELINE COMPLETE!")
    print("=" * 80)


if __name__ == "__main__":
    main()
