from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def rc_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # Keep every test away from the real ~/.rastercanvas
    home = tmp_path / "rc_home"
    monkeypatch.setenv("RASTERCANVAS_HOME", str(home))
    return home
