from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from touchfile.config import GeneratorConfig  # noqa: E402


@pytest.fixture()
def config() -> GeneratorConfig:
    return GeneratorConfig(author="alice", today=date(2024, 3, 7))


@pytest.fixture()
def logname(monkeypatch: pytest.MonkeyPatch) -> str:
    """Give the process a deterministic ``$LOGNAME``."""

    monkeypatch.setenv("LOGNAME", "alice")
    return "alice"
