"""Plain-text list persistence: one string per separator-delimited chunk."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..errors import EncodingError
from .resolver import LocationResolver

logger = logging.getLogger(__name__)


class TextStore:
    """Read and write files as lists of strings joined by a separator."""

    def __init__(self, resolver: LocationResolver) -> None:
        self.resolver = resolver

    def _separator(self, separator: Optional[str]) -> str:
        if separator is None:
            return self.resolver.settings.text_separator
        if not separator:
            raise ValueError("separator must not be empty")
        return separator

    def save(self, lines: Iterable[str], relative_path: str, separator: Optional[str] = None) -> None:
        sep = self._separator(separator)
        target = self.resolver.resolve(relative_path)
        content = sep.join(lines)
        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as exc:
            if self.resolver.settings.strict_text_encoding:
                raise EncodingError(f"Text for {relative_path!r} is not valid UTF-8: {exc}") from exc
            logger.warning("Skipping write to %s; text is not valid UTF-8", target)
            return
        target.write_bytes(data)
        logger.debug("Saved text to %s (%d bytes)", target, len(data))

    def load(self, relative_path: str, separator: Optional[str] = None) -> list[str]:
        sep = self._separator(separator)
        target = self.resolver.resolve(relative_path)
        data = target.read_bytes()
        try:
            content = data.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("Ignoring %s; contents are not valid UTF-8", target)
            return []
        components = content.split(sep)
        if components[-1] == "":
            components.pop()
        return components
