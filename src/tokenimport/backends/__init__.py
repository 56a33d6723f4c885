"""Backends that consume CTM models (variable stores)."""

from .variable_store import (
    VariableStore,
    InMemoryVariableStore,
    apply_model,
    resolve_variable_type,
    to_store_value,
)

__all__ = [
    "VariableStore",
    "InMemoryVariableStore",
    "apply_model",
    "resolve_variable_type",
    "to_store_value",
]
