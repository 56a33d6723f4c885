"""
Serialization helpers for CTM objects (CanonicalModel, TokenValue).

Provides lossless JSON/YAML round-trip via intermediate dict representation.
Collection and variable order is kept, so the dict form can be handed to a
host process and rebuilt into an equal model.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from tokenimport.model import CanonicalModel
from tokenimport.values import (
    TokenValue,
    TokenType,
    BooleanValue,
    NumberValue,
    ColorValue,
    StringValue,
)


def value_to_dict(value: TokenValue) -> Dict[str, Any]:
    if isinstance(value, ColorValue):
        return {
            "type": TokenType.COLOR.value,
            "value": {"r": value.r, "g": value.g, "b": value.b, "a": value.a},
        }
    if isinstance(value, BooleanValue):
        return {"type": TokenType.BOOLEAN.value, "value": value.value}
    if isinstance(value, NumberValue):
        return {"type": TokenType.FLOAT.value, "value": value.value}
    if isinstance(value, StringValue):
        return {"type": TokenType.STRING.value, "value": value.value}
    raise TypeError(f"Unsupported TokenValue type: {type(value)}")


def value_from_dict(d: Dict[str, Any]) -> TokenValue:
    t = TokenType(d.get("type"))
    if t == TokenType.COLOR:
        channels = d["value"]
        return ColorValue(
            r=float(channels["r"]),
            g=float(channels["g"]),
            b=float(channels["b"]),
            a=float(channels.get("a", 1.0)),
        )
    if t == TokenType.BOOLEAN:
        return BooleanValue(bool(d["value"]))
    if t == TokenType.FLOAT:
        return NumberValue(float(d["value"]))
    return StringValue(str(d["value"]))


def model_to_dict(m: CanonicalModel) -> Dict[str, Any]:
    return {
        "collections": [
            {
                "name": collection,
                "variables": [
                    {"name": name, **value_to_dict(value)}
                    for name, value in variables.items()
                ],
            }
            for collection, variables in m.items()
        ]
    }


def model_from_dict(d: Dict[str, Any]) -> CanonicalModel:
    m = CanonicalModel()
    for collection in d.get("collections", []):
        m.ensure_collection(collection["name"])
        for variable in collection.get("variables", []):
            m.add_token(collection["name"], variable["name"], value_from_dict(variable))
    return m


def model_to_json(m: CanonicalModel) -> str:
    return json.dumps(model_to_dict(m))


def model_from_json(s: str) -> CanonicalModel:
    d = json.loads(s)
    return model_from_dict(d)


def model_to_yaml(m: CanonicalModel) -> str:
    return yaml.safe_dump(model_to_dict(m), sort_keys=False)


def model_from_yaml(s: str) -> CanonicalModel:
    d = yaml.safe_load(s)
    return model_from_dict(d or {})
