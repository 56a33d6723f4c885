"""
Model Analyzer — preview and diagnostics of parsed CTM models.

This module provides lightweight analysis of CanonicalModel objects:
    - Per-collection token counts
    - Per-type inventory
    - A truncated preview of each collection
    - Warning flags before anything is applied to a store

IMPORTANT: This is read-only. It does NOT modify the model.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from tokenimport.colors import is_color
from tokenimport.model import CanonicalModel
from tokenimport.values import TokenValue, StringValue


DEFAULT_PREVIEW_LIMIT = 10


@dataclass
class CollectionPreview:
    """First few tokens of one collection."""
    name: str
    token_count: int = 0
    entries: List[Tuple[str, TokenValue]] = field(default_factory=list)
    hidden_count: int = 0

    @property
    def more_label(self) -> str:
        """Text shown after a truncated preview, "" when nothing is hidden."""
        if self.hidden_count <= 0:
            return ""
        return f"...and {self.hidden_count} more"


@dataclass
class ModelReport:
    """Summary report for a parsed model."""

    total_collections: int = 0
    total_tokens: int = 0
    tokens_by_type: Dict[str, int] = field(default_factory=dict)
    collections: List[CollectionPreview] = field(default_factory=list)

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_model(model: CanonicalModel, preview_limit: int = DEFAULT_PREVIEW_LIMIT) -> ModelReport:
    """
    Summarize a CanonicalModel for preview.

    Args:
        model: Model to summarize
        preview_limit: Maximum entries listed per collection

    Returns:
        ModelReport with counts, previews and warnings.
    """
    report = ModelReport()
    type_counts: Counter = Counter()
    color_like_strings: List[str] = []

    for collection, variables in model.items():
        entries = list(variables.items())
        shown = entries[: max(preview_limit, 0)]
        report.collections.append(
            CollectionPreview(
                name=collection,
                token_count=len(entries),
                entries=shown,
                hidden_count=len(entries) - len(shown),
            )
        )

        if not entries:
            report.add_warning(f"Empty collection: {collection}")

        for name, value in entries:
            type_counts[value.type.value] += 1
            if isinstance(value, StringValue) and is_color(value.value):
                color_like_strings.append(f"{collection}/{name}")

    report.total_collections = len(report.collections)
    report.total_tokens = sum(c.token_count for c in report.collections)
    report.tokens_by_type = dict(type_counts)

    if report.total_tokens == 0:
        report.add_warning("No tokens found")

    if color_like_strings:
        # The store still writes these as colors
        report.add_warning(
            f"String values applied as colors: {', '.join(color_like_strings)}"
        )

    return report


__all__ = ["CollectionPreview", "ModelReport", "analyze_model", "DEFAULT_PREVIEW_LIMIT"]
