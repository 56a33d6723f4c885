"""
Test the example token documents.

Validates that every example parses and that the CSV example yields the
expected model.
"""

from tokenimport.examples import (
    EXAMPLE_DTCG_JSON,
    EXAMPLE_SIMPLE_JSON,
    build_example_csv_model,
    example_documents,
)
from tokenimport.importer import parse_document
from tokenimport.json_parser import Dialect, detect_dialect, load_json
from tokenimport.values import ColorValue, NumberValue, StringValue


def test_example_csv_model():
    csv_doc = example_documents()[0]
    assert parse_document(csv_doc) == build_example_csv_model()


def test_example_dialects():
    assert detect_dialect(load_json(EXAMPLE_SIMPLE_JSON)) == Dialect.SIMPLE
    assert detect_dialect(load_json(EXAMPLE_DTCG_JSON)) == Dialect.DTCG


def test_example_dtcg_structure():
    model = parse_document(example_documents()[2])

    assert model.collection_names() == ["Colors", "Spacing"]
    assert model.get("Colors", "brand/primary") == ColorValue(0.0, 0.4, 1.0, 1.0)
    assert model.get("Colors", "brand/overlay").a == 0x80 / 255.0
    assert model.get("Spacing", "small") == StringValue("8px")
    assert model.get("Spacing", "scale") == NumberValue(1.5)


def test_example_simple_structure():
    model = parse_document(example_documents()[1])

    assert model.collection_names() == ["Colors", "Typography", "Default"]
    assert model.get("Typography", "heading/size") == NumberValue(32.0)
    assert model.get("Colors", "primary") == StringValue("#0066FF")
