"""Resolve relative paths under the namespace root, creating directories on the way."""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import Settings
from ..errors import ConfigurationError, InvalidPathError

logger = logging.getLogger(__name__)


class LocationResolver:
    """Map relative paths onto ``<home>/.<namespace>`` and materialise their folders.

    Nothing is cached: the namespace is read from the settings on every call,
    so reassigning it takes effect immediately.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    # ------------------------------------------------------------------ utils
    def _segments(self, relative_path: str) -> list[str]:
        segments = [part for part in relative_path.split(self.settings.path_delimiter) if part]
        if ".." in segments:
            raise InvalidPathError(f"Invalid path {relative_path!r}; must reside under the namespace root.")
        return segments

    def _ensure_root(self, root: Path) -> None:
        if not root.exists():
            logger.debug("Creating namespace root %s", root)
            root.mkdir(parents=True, exist_ok=True)

    def _materialise(self, root: Path, directories: list[str]) -> None:
        # One level per mkdir call, top-down.
        current = root
        for segment in directories:
            current = current / segment
            if not current.is_dir():
                logger.debug("Creating directory %s", current)
                current.mkdir()

    # ------------------------------------------------------------------- API
    def namespace_root(self) -> Path:
        if not self.settings.namespace:
            raise ConfigurationError("namespace not set")
        return self.settings.namespace_dir

    def resolve(self, relative_path: str) -> Path:
        """Return the absolute location of a file, creating its parent folders."""
        root = self.namespace_root()
        segments = self._segments(relative_path)
        self._ensure_root(root)
        self._materialise(root, segments[:-1])
        return root.joinpath(*segments)

    def resolve_directory(self, relative_path: str) -> Path:
        """Return the absolute location of a folder, creating it and its parents."""
        root = self.namespace_root()
        segments = self._segments(relative_path)
        self._ensure_root(root)
        self._materialise(root, segments)
        return root.joinpath(*segments)
