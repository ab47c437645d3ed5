# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Resolve repo root no matter where pytest is run from
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="sweeps.csv"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write
