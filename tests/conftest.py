from __future__ import annotations

import pytest

GUIDE_ENV = ("WARNINGS", "ALL", "ONLY", "EDGE")


@pytest.fixture(autouse=True)
def _clean_guides_env(monkeypatch: pytest.MonkeyPatch):
    # The generator reads these; a developer shell with WARNINGS=1 must not leak in
    for key in GUIDE_ENV:
        monkeypatch.delenv(key, raising=False)
