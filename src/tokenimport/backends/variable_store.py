"""
Variable store backend for CTM models.

Writes a CanonicalModel into a design tool's variable collections.

The host store is abstracted by VariableStore. For each collection in the
model a store collection is found or created; for each token a variable of
the resolved type is found or created and its value set for the
collection's default mode.

Colors are written in the store's native form, four independent channel
fields {"r", "g", "b", "a"} in [0, 1], never as strings.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from tokenimport.colors import is_color, to_rgba
from tokenimport.errors import VariableStoreError
from tokenimport.model import CanonicalModel
from tokenimport.values import (
    TokenValue,
    TokenType,
    BooleanValue,
    NumberValue,
    ColorValue,
    StringValue,
)


logger = logging.getLogger(__name__)


def resolve_variable_type(value: TokenValue) -> TokenType:
    """
    Variable type to create for a token value.

    StringValue text that reads as a color resolves to COLOR: the simple
    JSON dialect keeps string leaves uncoerced.
    """
    if isinstance(value, StringValue) and is_color(value.value):
        return TokenType.COLOR
    return value.type


def to_store_value(value: TokenValue) -> Any:
    """Convert a TokenValue to the store's native representation."""
    if isinstance(value, StringValue) and is_color(value.value):
        value = to_rgba(value.value)

    if isinstance(value, ColorValue):
        return {"r": value.r, "g": value.g, "b": value.b, "a": value.a}
    if isinstance(value, (BooleanValue, NumberValue, StringValue)):
        return value.value
    raise TypeError(f"Unsupported TokenValue type: {type(value)}")


class VariableStore(ABC):
    """
    Abstract shape of a host variable store.

    Collections and variables are opaque handles owned by the store.
    Implementations raise VariableStoreError for values they refuse.
    """

    @abstractmethod
    def list_collections(self) -> List[str]:
        ...

    @abstractmethod
    def find_collection(self, name: str) -> Optional[Any]:
        ...

    @abstractmethod
    def create_collection(self, name: str) -> Any:
        ...

    @abstractmethod
    def find_variable(self, collection: Any, name: str) -> Optional[Any]:
        ...

    @abstractmethod
    def create_variable(self, collection: Any, name: str, variable_type: TokenType) -> Any:
        ...

    @abstractmethod
    def set_value(self, collection: Any, variable: Any, value: Any) -> None:
        """Set variable's value for the collection's default mode."""
        ...


@dataclass
class StoredVariable:
    name: str
    variable_type: TokenType
    values_by_mode: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StoredCollection:
    name: str
    default_mode_id: str = "default"
    variables: Dict[str, StoredVariable] = field(default_factory=dict)


_NATIVE_TYPES = {
    TokenType.BOOLEAN: (bool,),
    TokenType.FLOAT: (int, float),
    TokenType.STRING: (str,),
    TokenType.COLOR: (dict,),
}


class InMemoryVariableStore(VariableStore):
    """
    Dictionary-backed VariableStore.

    Rejects values whose native type does not match the variable type,
    like a host store does.
    """

    def __init__(self):
        self.collections: Dict[str, StoredCollection] = {}

    def list_collections(self) -> List[str]:
        return list(self.collections.keys())

    def find_collection(self, name: str) -> Optional[StoredCollection]:
        return self.collections.get(name)

    def create_collection(self, name: str) -> StoredCollection:
        collection = StoredCollection(name=name)
        self.collections[name] = collection
        return collection

    def find_variable(self, collection: StoredCollection, name: str) -> Optional[StoredVariable]:
        return collection.variables.get(name)

    def create_variable(
        self, collection: StoredCollection, name: str, variable_type: TokenType
    ) -> StoredVariable:
        variable = StoredVariable(name=name, variable_type=variable_type)
        collection.variables[name] = variable
        return variable

    def set_value(self, collection: StoredCollection, variable: StoredVariable, value: Any) -> None:
        expected = _NATIVE_TYPES[variable.variable_type]
        is_bool = isinstance(value, bool)
        if not isinstance(value, expected) or (is_bool and variable.variable_type != TokenType.BOOLEAN):
            raise VariableStoreError(
                f"Cannot set {type(value).__name__} on {variable.variable_type.value} variable '{variable.name}'"
            )
        variable.values_by_mode[collection.default_mode_id] = value

    def get_value(self, collection_name: str, variable_name: str) -> Any:
        """Default-mode value of a variable, or None."""
        collection = self.collections.get(collection_name)
        if collection is None:
            return None
        variable = collection.variables.get(variable_name)
        if variable is None:
            return None
        return variable.values_by_mode.get(collection.default_mode_id)


def apply_model(
    model: CanonicalModel,
    store: VariableStore,
    preferred_collection_name: Optional[str] = None,
) -> int:
    """
    Create or update store variables from a model.

    Args:
        model: Parsed CanonicalModel
        store: Target VariableStore
        preferred_collection_name:
            Replaces the parsed collection name, but only when the model
            holds exactly one collection

    Returns:
        Number of values set. Values the store refuses are logged and
        skipped; they do not abort the import.
    """
    target = model.with_collection_name(preferred_collection_name)
    total = 0

    for collection_name, variables in target.items():
        collection = store.find_collection(collection_name)
        if collection is None:
            logger.debug("Creating collection %s", collection_name)
            collection = store.create_collection(collection_name)

        for name, value in variables.items():
            variable = store.find_variable(collection, name)
            if variable is None:
                variable = store.create_variable(collection, name, resolve_variable_type(value))

            try:
                store.set_value(collection, variable, to_store_value(value))
                total += 1
            except VariableStoreError as e:
                logger.warning("Failed to set value for %s: %s", name, e)

    logger.info("%d tokens imported", total)
    return total


__all__ = [
    "VariableStore",
    "InMemoryVariableStore",
    "StoredCollection",
    "StoredVariable",
    "resolve_variable_type",
    "to_store_value",
    "apply_model",
]
