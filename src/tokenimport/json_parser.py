"""
JSON Parser for CTM (Layer 1: Raw Input -> Canonical Token Model).

Converts JSON token documents to CanonicalModel objects.

Dialects:
    SIMPLE  { "Collection": { "name": value, "group": { "name": value } } }
            Top-level primitives go to the "Default" collection.
    DTCG    { "Collection": { "group": { "name": { "$value": ..., "$type": ... } } } }
            Design Tokens Community Group format.

Dialect detection is document-wide: a single "$value" anywhere makes the
whole document DTCG. Mixed documents are not supported.
"""

import json
import logging
import math
import warnings
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from tokenimport.coercion import coerce_value
from tokenimport.errors import ParseError, ParseErrorKind
from tokenimport.flatten import flatten_tokens, join_path
from tokenimport.model import CanonicalModel, DEFAULT_COLLECTION
from tokenimport.values import (
    TokenValue,
    BooleanValue,
    NumberValue,
    StringValue,
)


logger = logging.getLogger(__name__)

# Parsed JSON tree: object / array / string / number / boolean / null
JsonValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]

TOKEN_VALUE_KEY = "$value"
METADATA_PREFIX = "$"

_TOO_DEEP = "JSON document is nested too deeply"


class Dialect(Enum):
    """JSON token dialects."""
    SIMPLE = "simple"
    DTCG = "dtcg"


def _reject_constant(name: str):
    raise ParseError(f"Unexpected token {name} in JSON", kind=ParseErrorKind.INVALID_SYNTAX)


def load_json(text: str) -> JsonValue:
    """
    Parse JSON text into a tree.

    Raises:
        ParseError: On any syntax error, including NaN/Infinity literals,
            integers too long to convert, and nesting too deep to decode
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(e.msg, kind=ParseErrorKind.INVALID_SYNTAX, line=e.lineno) from e
    except ValueError as e:
        raise ParseError(str(e), kind=ParseErrorKind.INVALID_SYNTAX) from e
    except RecursionError as e:
        raise ParseError(_TOO_DEEP, kind=ParseErrorKind.INVALID_SYNTAX) from e


def contains_dtcg_tokens(tree: JsonValue) -> bool:
    """Return True if any object in the tree carries a "$value" key."""
    stack = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            if TOKEN_VALUE_KEY in node:
                return True
            stack.extend(node.values())
        elif isinstance(node, list):
            stack.extend(node)
    return False


def detect_dialect(tree: JsonValue) -> Dialect:
    return Dialect.DTCG if contains_dtcg_tokens(tree) else Dialect.SIMPLE


def json_to_token_value(value: JsonValue) -> TokenValue:
    """
    Convert a JSON-native leaf to a TokenValue without string coercion.

    bool -> BooleanValue, int/float -> NumberValue, str -> StringValue.
    null, arrays, objects and numbers with no finite float form are kept
    as their compact JSON text.
    """
    if isinstance(value, bool):
        return BooleanValue(value)
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return StringValue(str(value))
        if math.isfinite(number):
            return NumberValue(number)
        return StringValue(json.dumps(value))
    if isinstance(value, str):
        return StringValue(value)
    return StringValue(json.dumps(value, separators=(",", ":")))


def _is_primitive(value: JsonValue) -> bool:
    return not isinstance(value, (dict, list))


def _put(model: CanonicalModel, collection: str, name: str, value: TokenValue) -> None:
    if not collection or not name:
        logger.debug("Skipping token with empty name: collection=%r name=%r", collection, name)
        return
    model.add_token(collection, name, value)


def _children(node: JsonValue) -> List[Tuple[str, JsonValue]]:
    if isinstance(node, dict):
        return list(node.items())
    if isinstance(node, list):
        return [(str(index), value) for index, value in enumerate(node)]
    return []


def _parse_dtcg(tree: Dict[str, Any], model: CanonicalModel, default_collection: str) -> None:
    """
    Depth-first walk of a DTCG document.

    Each stack entry carries (node, collection, path). collection is None
    while still at the root; path holds the keys below the collection.
    """
    stack: List[Tuple[JsonValue, Optional[str], List[str]]] = [(tree, None, [])]

    while stack:
        node, collection, path = stack.pop()

        if isinstance(node, dict) and TOKEN_VALUE_KEY in node:
            target = collection if collection is not None else default_collection
            if not path:
                warnings.warn(
                    f"Token without a name directly under collection '{target}' was skipped",
                    UserWarning,
                )
                continue
            raw = node[TOKEN_VALUE_KEY]
            value = coerce_value(raw) if isinstance(raw, str) else json_to_token_value(raw)
            _put(model, target, join_path(path), value)
            continue

        # reversed so siblings pop in document order
        for key, child in reversed(_children(node)):
            if key.startswith(METADATA_PREFIX):
                continue
            if collection is None:
                stack.append((child, key, []))
            else:
                stack.append((child, collection, path + [key]))


def _parse_simple(tree: Dict[str, Any], model: CanonicalModel, default_collection: str) -> None:
    for key, value in tree.items():
        if not isinstance(value, dict):
            _put(model, default_collection, key, json_to_token_value(value))
            continue

        if not key:
            logger.debug("Skipping collection with empty name")
            continue

        if all(_is_primitive(member) for member in value.values()):
            model.replace_collection(
                key,
                {name: json_to_token_value(member) for name, member in value.items() if name},
            )
        else:
            model.ensure_collection(key)
            for name, leaf in flatten_tokens(value).items():
                _put(model, key, name, json_to_token_value(leaf))


def parse_json_tree(tree: JsonValue, default_collection: str = DEFAULT_COLLECTION) -> CanonicalModel:
    """
    Convert an already-parsed JSON tree into a CanonicalModel.

    A root that is not an object yields an empty model.
    """
    model = CanonicalModel()

    if not isinstance(tree, dict):
        logger.debug("JSON root is %s, not an object; no tokens", type(tree).__name__)
        return model

    dialect = detect_dialect(tree)
    logger.debug("Detected %s dialect", dialect.value)

    if dialect == Dialect.DTCG:
        _parse_dtcg(tree, model, default_collection)
    else:
        _parse_simple(tree, model, default_collection)

    return model


def parse_json_string(text: str, default_collection: str = DEFAULT_COLLECTION) -> CanonicalModel:
    """
    Parse JSON token text into a CanonicalModel.

    Args:
        text: JSON document text (simple or DTCG dialect)
        default_collection: Collection for top-level primitives

    Returns:
        CanonicalModel in first-seen order

    Raises:
        ParseError: If the text is not valid JSON
    """
    tree = load_json(text)
    try:
        return parse_json_tree(tree, default_collection=default_collection)
    except RecursionError as e:
        # json.dumps of a deeply nested leaf
        raise ParseError(_TOO_DEEP, kind=ParseErrorKind.INVALID_SYNTAX) from e


__all__ = [
    "Dialect",
    "JsonValue",
    "load_json",
    "contains_dtcg_tokens",
    "detect_dialect",
    "json_to_token_value",
    "parse_json_tree",
    "parse_json_string",
]
