"""Structured record persistence on top of the location resolver."""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

from ..codecs import Codec, codec_for
from .resolver import LocationResolver

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordStore:
    """Read and write whole files as a single encoded value."""

    def __init__(self, resolver: LocationResolver) -> None:
        self.resolver = resolver

    def _codec(self, relative_path: str, codec: Optional[Codec]) -> Codec:
        if codec is not None:
            return codec
        settings = self.resolver.settings
        return codec_for(relative_path, settings.default_codec, json_indent=settings.json_indent)

    def save(self, value: T, relative_path: str, *, codec: Optional[Codec] = None) -> T:
        """Encode *value* into the file, replacing its contents, and hand it back."""
        target = self.resolver.resolve(relative_path)
        codec = self._codec(relative_path, codec)
        data = codec.encode(value)
        target.write_bytes(data)
        logger.debug("Saved %s record to %s (%d bytes)", codec.name, target, len(data))
        return value

    def load(self, relative_path: str, model: Any = None, *, codec: Optional[Codec] = None) -> Any:
        """Decode the file into *model*, or into plain data when no model is given."""
        target = self.resolver.resolve(relative_path)
        codec = self._codec(relative_path, codec)
        data = target.read_bytes()
        logger.debug("Loading %s record from %s (%d bytes)", codec.name, target, len(data))
        return codec.decode(data, model)
