"""
Typed Token Values for CTM

Every token value in a Canonical Token Model is one of four tagged
variants, mirroring the variable types a design tool can hold:

    - BooleanValue
    - NumberValue
    - ColorValue
    - StringValue

ARCHITECTURAL RULE:
    Values are structure only.
    Parsing raw strings into values belongs in the coercion layer.
    Writing values into a variable store belongs in the backends.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum


class TokenValue(ABC):
    """
    Base class for all token values.

    Exists to give the value hierarchy a single type.

    DO NOT:
        - Add coercion logic here (belongs in coercion)
        - Add store conversion here (belongs in backends)
    """
    pass


class TokenType(Enum):
    """
    Variable types understood by a variable store.

    The names match the resolved types of the host store:
    numbers are always floats.
    """

    BOOLEAN = "BOOLEAN"
    FLOAT = "FLOAT"
    COLOR = "COLOR"
    STRING = "STRING"


@dataclass(frozen=True)
class BooleanValue(TokenValue):
    """A true/false flag token."""

    value: bool

    @property
    def type(self) -> TokenType:
        return TokenType.BOOLEAN


@dataclass(frozen=True)
class NumberValue(TokenValue):
    """
    A unitless numeric token.

    Always stored as float. Dimensioned values such as "8px"
    are never numbers; they stay StringValue to keep their unit.
    """

    value: float

    @property
    def type(self) -> TokenType:
        return TokenType.FLOAT


@dataclass(frozen=True)
class ColorValue(TokenValue):
    """
    An RGBA color with every channel in [0, 1].

    Example:
        #0066FF

    Becomes:
        ColorValue(r=0.0, g=0.4, b=1.0, a=1.0)

    IMPORTANT:
        This object is immutable (frozen=True).
        Channel range is guaranteed by the color layer, not checked here.
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    @property
    def type(self) -> TokenType:
        return TokenType.COLOR

    def as_tuple(self) -> tuple:
        return (self.r, self.g, self.b, self.a)


@dataclass(frozen=True)
class StringValue(TokenValue):
    """
    Any token value that is not a boolean, color or number.

    Examples:
        - "8px"
        - "1.5em"
        - "Inter"
    """

    value: str

    @property
    def type(self) -> TokenType:
        return TokenType.STRING
