"""Structured encodings for records: JSON and YAML, both driven by pydantic."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional, Protocol

import yaml
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DecodingError, EncodingError

_SUFFIXES = {
    ".json": "json",
    ".yml": "yaml",
    ".yaml": "yaml",
}


@lru_cache(maxsize=128)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


class Codec(Protocol):
    name: str

    def encode(self, value: Any) -> bytes: ...

    def decode(self, data: bytes, model: Any = None) -> Any: ...


class JsonCodec:
    """JSON via pydantic, so models, dataclasses and plain containers all work."""

    name = "json"

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = indent

    def encode(self, value: Any) -> bytes:
        try:
            return _adapter(Any).dump_json(value, indent=self.indent)
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise EncodingError(f"Cannot encode {type(value).__name__} as JSON: {exc}") from exc

    def decode(self, data: bytes, model: Any = None) -> Any:
        try:
            return _adapter(model if model is not None else Any).validate_json(data)
        except ValidationError as exc:
            raise DecodingError(f"JSON does not match {_describe(model)}: {exc}") from exc


class YamlCodec:
    """YAML via PyYAML's safe loader and dumper."""

    name = "yaml"

    def encode(self, value: Any) -> bytes:
        try:
            plain = _adapter(Any).dump_python(value, mode="json")
            text = yaml.safe_dump(plain, sort_keys=False, allow_unicode=True)
        except (PydanticSerializationError, yaml.YAMLError, TypeError, ValueError) as exc:
            raise EncodingError(f"Cannot encode {type(value).__name__} as YAML: {exc}") from exc
        return text.encode("utf-8")

    def decode(self, data: bytes, model: Any = None) -> Any:
        try:
            plain = yaml.safe_load(data)
        except yaml.YAMLError as exc:
            raise DecodingError(f"Invalid YAML: {exc}") from exc
        if model is None:
            return plain
        try:
            return _adapter(model).validate_python(plain)
        except ValidationError as exc:
            raise DecodingError(f"YAML does not match {_describe(model)}: {exc}") from exc


def _describe(model: Any) -> str:
    if model is None:
        return "any value"
    return getattr(model, "__name__", repr(model))


def get_codec(name: str, *, json_indent: Optional[int] = None) -> Codec:
    if name == "json":
        return JsonCodec(indent=json_indent)
    if name == "yaml":
        return YamlCodec()
    raise ValueError(f"Unknown codec: {name}")


def codec_for(relative_path: str, default: str = "json", *, json_indent: Optional[int] = None) -> Codec:
    """Pick a codec from the path suffix, falling back to *default*."""
    _, dot, suffix = relative_path.rpartition(".")
    name = _SUFFIXES.get(f".{suffix.lower()}", default) if dot else default
    return get_codec(name, json_indent=json_indent)
