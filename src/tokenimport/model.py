"""
Core Token Model Objects

Defines the data structures of the Canonical Token Model.

These are pure data classes representing:
    - Raw documents (input text plus format tag)
    - The canonical model (collection -> variable -> typed value)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about JSON dialects or CSV layout
        - Know nothing about the host variable store
        - Are replaced, never edited, once a parse has finished
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from tokenimport.errors import ParseError, ParseErrorKind
from tokenimport.values import TokenValue


DEFAULT_COLLECTION = "Default"


class DocumentFormat(Enum):
    """Input formats, chosen by the caller from the file extension."""

    JSON = "json"
    CSV = "csv"


@dataclass(frozen=True)
class RawDocument:
    """
    Opaque document text plus its declared format.

    Properties:
        text: Full document text
        format: DocumentFormat
        name: Originating file name (optional, for messages only)
    """

    text: str
    format: DocumentFormat
    name: Optional[str] = None


@dataclass
class CanonicalModel:
    """
    Root container for parsed tokens.

    Maps collection name -> variable name -> TokenValue.

    Everything the applier writes into a variable store
    MUST be derivable from this object alone.

    INVARIANTS:
        - Collection names are unique and non-empty
        - Variable names are unique and non-empty within a collection
        - On duplicate names during parse, the last write wins
        - Order is first-seen order; it is for display only and
          does not take part in equality

    Once a parser has returned the model, treat it as read-only.
    merge() and with_collection_name() build new models.
    """

    collections: Dict[str, Dict[str, TokenValue]] = field(default_factory=dict)

    def add_token(self, collection: str, name: str, value: TokenValue) -> None:
        """Insert or overwrite one token, creating the collection on first use."""
        self.collections.setdefault(collection, {})[name] = value

    def ensure_collection(self, collection: str) -> Dict[str, TokenValue]:
        return self.collections.setdefault(collection, {})

    def replace_collection(self, collection: str, variables: Dict[str, TokenValue]) -> None:
        """Replace a whole collection with a copy of variables."""
        self.collections[collection] = dict(variables)

    def get(self, collection: str, name: str) -> Optional[TokenValue]:
        """
        Retrieve a token value.

        Returns:
            TokenValue or None if either name is unknown
        """
        variables = self.collections.get(collection)
        if variables is None:
            return None
        return variables.get(name)

    def get_collection(self, collection: str) -> Optional[Dict[str, TokenValue]]:
        return self.collections.get(collection)

    def collection_names(self) -> List[str]:
        return list(self.collections.keys())

    def items(self) -> Iterator[Tuple[str, Dict[str, TokenValue]]]:
        return iter(self.collections.items())

    @property
    def token_count(self) -> int:
        return sum(len(variables) for variables in self.collections.values())

    def is_empty(self) -> bool:
        return self.token_count == 0

    def merge(self, other: "CanonicalModel") -> "CanonicalModel":
        """
        Combine two models into a new one.

        Collections present in both are merged variable by variable;
        other wins on conflicting names. Neither input is modified.
        """
        merged = CanonicalModel()
        for source in (self, other):
            for collection, variables in source.items():
                merged.collections.setdefault(collection, {}).update(variables)
        return merged

    def with_collection_name(self, name: Optional[str]) -> "CanonicalModel":
        """
        Return a copy whose only collection is renamed to name.

        Models with zero or several collections, and an empty name,
        are returned as an unchanged copy.
        """
        if not name or len(self.collections) != 1:
            return CanonicalModel({c: dict(v) for c, v in self.collections.items()})

        (variables,) = self.collections.values()
        return CanonicalModel({name: dict(variables)})


__all__ = [
    "DEFAULT_COLLECTION",
    "DocumentFormat",
    "RawDocument",
    "CanonicalModel",
    "ParseError",
    "ParseErrorKind",
]
