"""Flattening of nested token objects into slash-joined variable names."""

from typing import Any, Dict, Iterator, List, Optional, Tuple


PATH_SEPARATOR = "/"


def join_path(segments) -> str:
    """Join path segments into a variable name."""
    return PATH_SEPARATOR.join(segments)


def flatten_tokens(
    obj: Dict[str, Any],
    prefix: str = "",
    result: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Collapse a nested dict into {"a/b/c": leaf} pairs.

    Lists are leaves, not containers. Applying this to an already-flat
    dict returns an equal dict.

    Args:
        obj: Parsed JSON object
        prefix: Name of the enclosing path ("" at the top)
        result: Optional dict to merge into (created if omitted)

    Returns:
        The flat mapping, in first-seen order
    """
    if result is None:
        result = {}

    # (prefix, remaining items) for each open dict
    stack: List[Tuple[str, Iterator[Tuple[str, Any]]]] = [(prefix, iter(obj.items()))]

    while stack:
        parent, items = stack[-1]
        for key, value in items:
            name = f"{parent}{PATH_SEPARATOR}{key}" if parent else key
            if isinstance(value, dict):
                stack.append((name, iter(value.items())))
                break
            result[name] = value
        else:
            stack.pop()

    return result


__all__ = ["PATH_SEPARATOR", "join_path", "flatten_tokens"]
