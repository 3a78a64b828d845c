"""Mapping between dataclass models and JSON or query-string data."""

from __future__ import annotations

import dataclasses
import types
from typing import Any, Optional, Union, get_args, get_origin

_MISSING = dataclasses.MISSING

_BUILTIN_TYPES: dict[str, Any] = {
    "int": int,
    "str": str,
    "float": float,
    "bool": bool,
    "bytes": bytes,
    "object": object,
    "Any": Any,
    "None": type(None),
    "NoneType": type(None),
}

_MODELS: dict[str, list[type]] = {}
_FIELD_TYPES: dict[type, dict[str, Any]] = {}


def json_field(key, *, omitempty=False, default=_MISSING, default_factory=_MISSING):
    """Declare a dataclass field carried under ``key`` in JSON.

    With ``omitempty`` the field is left out when empty; a field whose default
    is None is left out only when it is None, so False or 0 are still sent.
    """
    metadata = {"json": key, "omitempty": omitempty}
    if default_factory is not _MISSING:
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def _is_empty(value: Any, nullable: bool) -> bool:
    if value is None:
        return True
    if nullable or isinstance(value, JsonModel):
        return False
    return not value


def _encode(value: Any) -> Any:
    if isinstance(value, JsonModel):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    return value


def _split_top(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator`` where it is not nested in brackets."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        if char == separator and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    parts.append("".join(current).strip())
    return parts


def _lookup(name: str, owner: type) -> Any:
    candidates = _MODELS.get(name)
    if candidates:
        same_module = [model for model in candidates if model.__module__ == owner.__module__]
        return (same_module or candidates)[-1]
    return _BUILTIN_TYPES.get(name, Any)


def _parse_annotation(text: str, owner: type) -> Any:
    """Turn an annotation written as text into a type usable for decoding."""
    text = text.strip().strip("'\"")
    alternatives = _split_top(text, "|")
    if len(alternatives) > 1:
        return Union[tuple(_parse_annotation(part, owner) for part in alternatives)]
    if text.endswith("]") and "[" in text:
        head, inner = text[:-1].split("[", 1)
        name = head.strip().rsplit(".", 1)[-1]
        args = [_parse_annotation(part, owner) for part in _split_top(inner, ",")]
        if name == "Optional":
            return Optional[args[0]]
        if name == "Union":
            return Union[tuple(args)]
        if name in ("list", "List", "Sequence"):
            return list[args[0]]
        if name in ("dict", "Dict", "Mapping") and len(args) == 2:
            return dict[args[0], args[1]]
        return Any
    return _lookup(text.rsplit(".", 1)[-1], owner)


def _field_types(cls: type) -> dict[str, Any]:
    cached = _FIELD_TYPES.get(cls)
    if cached is None:
        cached = {
            f.name: _parse_annotation(f.type, cls) if isinstance(f.type, str) else f.type
            for f in dataclasses.fields(cls)
        }
        _FIELD_TYPES[cls] = cached
    return cached


def _decode(tp: Any, value: Any) -> Any:
    if value is None:
        return None
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        return _decode(args[0], value) if len(args) == 1 else value
    if origin is list:
        (item_type,) = get_args(tp) or (Any,)
        return [_decode(item_type, item) for item in value]
    if origin is dict:
        args = get_args(tp)
        item_type = args[1] if len(args) == 2 else Any
        return {key: _decode(item_type, item) for key, item in value.items()}
    if isinstance(tp, type) and issubclass(tp, JsonModel):
        return tp.from_dict(value)
    if tp is float:
        return float(value)
    return value


def _json_fields(obj_or_cls: Any):
    for f in dataclasses.fields(obj_or_cls):
        key = f.metadata.get("json")
        if key is not None:
            yield f, key


class JsonModel:
    """Base for dataclasses that are exchanged as JSON objects."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        _MODELS.setdefault(cls.__name__, []).append(cls)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object for this model."""
        result: dict[str, Any] = {}
        for f, key in _json_fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("omitempty") and _is_empty(value, f.default is None):
                continue
            result[key] = _encode(value)
        return result

    @classmethod
    def from_dict(cls, data):
        """Build the model from a JSON object, ignoring unknown keys."""
        data = data or {}
        hints = _field_types(cls)
        kwargs = {
            f.name: _decode(hints.get(f.name, Any), data[key])
            for f, key in _json_fields(cls)
            if f.init and key in data
        }
        return cls(**kwargs)


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def to_query(options) -> dict[str, str]:
    """Encode a model as query parameters, omitting empty values, sorted by key."""
    pairs = {
        key: _query_value(getattr(options, f.name))
        for f, key in _json_fields(options)
        if getattr(options, f.name) not in (None, "", 0, False, [], {})
    }
    return dict(sorted(pairs.items()))