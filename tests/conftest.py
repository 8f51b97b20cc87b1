from __future__ import annotations

from pathlib import Path

import pytest

from filekeeper.config import Settings
from filekeeper.keeper import FileKeeper


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(namespace="My Project", home_dir=tmp_path)


@pytest.fixture
def keeper(settings: Settings) -> FileKeeper:
    return FileKeeper(settings)
