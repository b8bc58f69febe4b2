"""Pytest configuration for tests.

No sys.path hacks - tests should import from installed searchschemer package.
"""

import json
from pathlib import Path

import pytest


@pytest.fixture
def write_mapping(tmp_path):
    """Write a mapping document (dict or raw text) to a file and return its path."""
    def _write(doc, name: str = "mapping.json") -> Path:
        path = tmp_path / name
        text = doc if isinstance(doc, str) else json.dumps(doc, indent=2)
        path.write_text(text, encoding="utf-8")
        return path
    return _write
