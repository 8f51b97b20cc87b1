"""Configuration management for filekeeper."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_WHITESPACE = re.compile(r"\s")


def normalise_namespace(raw: str) -> str:
    """Turn a project name into the folder-safe namespace used on disk."""
    return _WHITESPACE.sub("-", raw).lower()


class Settings(BaseSettings):
    """Runtime configuration for a storage handle."""

    model_config = SettingsConfigDict(
        env_prefix="FILEKEEPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
    )

    # Namespace
    namespace: str = Field(
        default="",
        description="Project identifier; names the hidden folder under the home directory.",
    )
    home_dir: Path = Field(
        default_factory=Path.home,
        description="Directory that holds the namespace folder.",
    )

    # Paths
    path_delimiter: Literal["/"] = Field(default="/")

    # Formats
    text_separator: str = Field(default="\n", description="Default separator for text records.")
    json_indent: Optional[int] = Field(default=None)
    default_codec: Literal["json", "yaml"] = Field(
        default="json",
        description="Codec for record paths whose suffix does not name one.",
    )
    strict_text_encoding: bool = Field(
        default=True,
        description="Raise on unencodable text instead of skipping the write.",
    )

    @field_validator("namespace", mode="before")
    @classmethod
    def _normalise_namespace(cls, value: str) -> str:
        return normalise_namespace(str(value))

    @field_validator("home_dir", mode="before")
    @classmethod
    def _expand_home_dir(cls, value: Path | str) -> Path:
        return Path(value).expanduser()

    @field_validator("text_separator")
    @classmethod
    def _reject_empty_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("text_separator must not be empty")
        return value

    @property
    def namespace_dir(self) -> Path:
        return self.home_dir / f".{self.namespace}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance built from the environment."""
    return Settings()
