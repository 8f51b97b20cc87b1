"""Storage handle bundling the resolver, record and text stores."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, TypeVar

from .codecs import Codec
from .config import Settings, get_settings
from .storage.records import RecordStore
from .storage.resolver import LocationResolver
from .storage.text import TextStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FileKeeper:
    """Persist records, text lists and folders under ``~/.<namespace>``.

    Example::

        keeper = FileKeeper(Settings(namespace="My Project"))
        keeper.save_record({"text": "hello"}, "folder/content.json")
        # written to ~/.my-project/folder/content.json
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        # Private copy of the cached defaults.
        self.settings = settings if settings is not None else get_settings().model_copy()
        self.resolver = LocationResolver(self.settings)
        self.records = RecordStore(self.resolver)
        self.text = TextStore(self.resolver)

    # -------------------------------------------------------------- namespace
    def set_namespace(self, raw: str) -> None:
        self.settings.namespace = raw
        logger.debug("Namespace set to %r", self.settings.namespace)

    def get_namespace(self) -> str:
        return self.settings.namespace

    # ------------------------------------------------------------------- API
    def resolve(self, relative_path: str) -> Path:
        return self.resolver.resolve(relative_path)

    def save_record(self, value: T, relative_path: str, *, codec: Optional[Codec] = None) -> T:
        return self.records.save(value, relative_path, codec=codec)

    def load_record(self, relative_path: str, model: Any = None, *, codec: Optional[Codec] = None) -> Any:
        return self.records.load(relative_path, model, codec=codec)

    def save_text(self, lines: Iterable[str], relative_path: str, separator: Optional[str] = None) -> None:
        self.text.save(lines, relative_path, separator)

    def load_text(self, relative_path: str, separator: Optional[str] = None) -> list[str]:
        return self.text.load(relative_path, separator)

    def list_directory(self, relative_path: str) -> list[str]:
        """Names of the entries directly inside a folder, creating the folder if needed."""
        target = self.resolver.resolve_directory(relative_path)
        return [entry.name for entry in target.iterdir()]
