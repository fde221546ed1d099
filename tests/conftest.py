from __future__ import annotations

from pathlib import Path

import pytest

from memory_core.ui_logic.grid_layout import generate_slots
from tests.fakes import DEFAULT_NAMES, RecordingRenderer, descriptor, make_template


@pytest.fixture
def asset_dir(tmp_path: Path) -> Path:
    root = tmp_path / "assets"
    root.mkdir()
    for index, name in enumerate(DEFAULT_NAMES):
        (root / f"{name}.json").write_bytes(descriptor(width=10.0 + index, label=name))
    return root


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def templates():
    return [make_template(name) for name in DEFAULT_NAMES]


@pytest.fixture
def slots():
    return generate_slots(4, 4, 0.1)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    import os

    for key in list(os.environ):
        if key.startswith("MEMORY_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
