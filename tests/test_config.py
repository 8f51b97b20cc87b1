from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from filekeeper.config import Settings, get_settings, normalise_namespace


def test_namespace_is_normalised_on_construction(tmp_path: Path) -> None:
    settings = Settings(namespace="My Project", home_dir=tmp_path)
    assert settings.namespace == "my-project"
    assert settings.namespace_dir == tmp_path / ".my-project"


def test_namespace_is_normalised_on_assignment(tmp_path: Path) -> None:
    settings = Settings(home_dir=tmp_path)
    assert settings.namespace == ""
    settings.namespace = "Data\tTool Kit"
    assert settings.namespace == "data-tool-kit"


def test_normalise_namespace_replaces_each_whitespace_character() -> None:
    assert normalise_namespace("A  B") == "a--b"
    assert normalise_namespace("already-fine") == "already-fine"


def test_namespace_read_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FILEKEEPER_NAMESPACE", "Env Project")
    monkeypatch.setenv("FILEKEEPER_HOME_DIR", str(tmp_path))
    settings = Settings()
    assert settings.namespace == "env-project"
    assert settings.home_dir == tmp_path


def test_empty_text_separator_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        Settings(home_dir=tmp_path, text_separator="")


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
