from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clear_recordmerge_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("RECORDMERGE_ANCESTOR_ONLY", "RECORDMERGE_INDENT", "RECORDMERGE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    def writer(filename: str, payload: object) -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return writer
