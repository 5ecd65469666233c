"""Path expressions over nested structured data.

A path is a dot-separated list of field names. A field suffixed with ``[*]``
flattens every element of the sequence stored under it::

    extract_values(data, "endpoints[*].responseSchema[*].status")

Extraction never raises: missing fields, ``None`` and non-mapping items just
contribute nothing, so a malformed expression yields an empty list.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, NamedTuple

from pydantic import BaseModel

_WILDCARD = re.compile(r"^(.+)\[\*\]$")


class PathSegment(NamedTuple):
    name: str
    wildcard: bool


@lru_cache(maxsize=256)
def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Split a path expression into segments."""
    segments: list[PathSegment] = []
    for part in path.split("."):
        match = _WILDCARD.match(part)
        if match:
            segments.append(PathSegment(match.group(1), True))
        else:
            segments.append(PathSegment(part, False))
    return tuple(segments)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def extract_values(root: Any, path: str) -> list[Any]:
    """Return every value matched by ``path`` in document order.

    Duplicates are kept. ``None`` is treated as absent.

    Args:
        root: The tree to query (mappings, sequences, scalars).
        path: The path expression.

    Returns:
        The matched values, possibly empty.
    """
    frontier: list[Any] = [root]

    for segment in parse_path(path):
        next_frontier: list[Any] = []
        for item in frontier:
            if not isinstance(item, Mapping):
                continue
            value = item.get(segment.name)
            if value is None:
                continue
            if segment.wildcard:
                if _is_sequence(value):
                    next_frontier.extend(v for v in value if v is not None)
            else:
                next_frontier.append(value)
        frontier = next_frontier

    return frontier


def as_tree(output: Any) -> Any:
    """Return the plain tree path expressions run against.

    Pydantic models are dumped by alias so paths use the wire field names;
    anything else is returned as is.
    """
    if hasattr(output, "to_tree"):
        return output.to_tree()
    if isinstance(output, BaseModel):
        return output.model_dump(by_alias=True, mode="json")
    return output
