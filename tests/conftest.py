"""Pytest fixtures for test configuration.

Global test safety measures:
 - Drop any LRM__* variables from the developer's shell so config defaults
   stay deterministic
"""
import os
import pytest
from pathlib import Path
from typing import Dict, Any


def pytest_sessionstart(session):  # type: ignore[no-untyped-def]
    for key in [k for k in os.environ if k.startswith('LRM__') or k == 'LRM_ENABLE_DOTENV']:
        del os.environ[key]


@pytest.fixture
def test_config(tmp_path: Path) -> Dict[str, Any]:
    """Provide a minimal test configuration as a dict.

    Tests pass this to the CLI via ``obj=`` instead of writing .env files or
    setting environment variables. Report output is isolated to tmp_path.
    """
    return {
        'log_level': 'DEBUG',
        'matching': {
            'algorithm': 'exact',
            'ignore_case': True,
            'threshold': 80.0,
            'show_unmatched': 20,
        },
        'ingest': {
            'deduplicate': False,
            'extensions': ['.txt', '.xlsx', '.docx'],
        },
        'reports': {
            'directory': str(tmp_path / 'reports'),
        },
    }


@pytest.fixture
def write_list(tmp_path: Path):
    """Write items (one per line) to a .txt file and return its path."""
    def _write(name: str, items) -> Path:
        path = tmp_path / name
        path.write_text("\n".join(items) + "\n", encoding="utf-8")
        return path
    return _write
