import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
ROOT = Path(__file__).resolve().parent.parent
if ROOT.as_posix() not in sys.path:
    sys.path.insert(0, ROOT.as_posix())


POEM = """\
Rust:
really productive.
also passive.
probably problamatic.
but simply lovely.
Come dive into the world of rust."""


@pytest.fixture
def poem() -> str:
    """Six lines of text used by most search tests."""
    return POEM


@pytest.fixture
def poem_file(tmp_path: Path) -> Path:
    path = tmp_path / "poem.txt"
    path.write_text(POEM + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def no_ignore_case(monkeypatch):
    """Keep the caller's IGNORE_CASE from leaking into tests."""
    monkeypatch.delenv("IGNORE_CASE", raising=False)
