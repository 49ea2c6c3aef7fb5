"""JSON round-trip for parsed commits.

Nodes become plain dicts tagged with a ``_type`` field, so a cached
``Commit`` can be rebuilt exactly (locations included) or handed to
tooling outside Python. JSON output uses sorted keys, which keeps it
stable enough to use as a cache key.

Example:
    from convcommit import parse
    from convcommit.serialization import to_json, from_json

    commit = parse("feat(api): add search\\n\\nRefs: #12")
    assert from_json(to_json(commit)) == commit

"""

import json
from dataclasses import fields
from enum import Enum
from typing import Any

from convcommit.location import SourceLocation
from convcommit.nodes import Commit, Footer, Node, SeparatorKind

_NODE_TYPES: dict[str, type[Node]] = {
    "Commit": Commit,
    "Footer": Footer,
}

# Fields stored as their enum value
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "separator_kind": SeparatorKind,
}

_LOCATION_TAG = "SourceLocation"


def to_dict(node: Node) -> dict[str, Any]:
    """Convert a Commit or Footer to a JSON-compatible dict."""
    data: dict[str, Any] = {"_type": type(node).__name__}
    for f in fields(node):
        data[f.name] = _dump(getattr(node, f.name))
    return data


def _dump(value: Any) -> Any:
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {"_type": _LOCATION_TAG, **{f.name: getattr(value, f.name) for f in fields(value)}}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return [_dump(item) for item in value]
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a node from ``to_dict()`` output.

    Fields missing from ``data`` take the node's defaults.

    Raises:
        ValueError: If ``_type`` is missing or unknown, or an enum field
            holds an unrecognized value.
    """
    if "_type" not in data:
        raise ValueError("Missing '_type' field in serialized node")
    node_cls = _NODE_TYPES.get(data["_type"])
    if node_cls is None:
        raise ValueError(f"Unknown node type: {data['_type']!r}")

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name in data:
            enum_cls = _ENUM_FIELDS.get(f.name)
            raw = data[f.name]
            kwargs[f.name] = enum_cls(raw) if enum_cls else _load(raw)
    return node_cls(**kwargs)


def _load(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_load(item) for item in value)
    if not isinstance(value, dict) or "_type" not in value:
        return value
    if value["_type"] == _LOCATION_TAG:
        return SourceLocation(**{k: v for k, v in value.items() if k != "_type"})
    return from_dict(value)


def to_json(commit: Commit, *, indent: int | None = None) -> str:
    """Serialize a Commit to a JSON string with sorted keys."""
    return json.dumps(to_dict(commit), sort_keys=True, indent=indent)


def from_json(data: str) -> Commit:
    """Deserialize a Commit from ``to_json()`` output.

    Raises:
        ValueError: If the JSON is malformed or holds something other than
            a Commit.
    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Commit):
        raise ValueError(f"Expected Commit, got {type(node).__name__}")
    return node
