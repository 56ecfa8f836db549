from pathlib import Path

import pytest


def _write(path: Path, size: int = 1, fill: bytes = b"x") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes((fill * size)[:size])
    return path


@pytest.fixture
def make_file():
    """Create a file (and its parents) holding ``size`` bytes."""
    return _write
