"""Shared fixtures for scanner tests."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

import pytest

import duplicate_scanner
from duplicate_scanner import DuplicateScanner


@pytest.fixture(scope="session", autouse=True)
def _isolated_log_dir(tmp_path_factory: pytest.TempPathFactory):
    """Keep rotating log files out of the source tree."""
    log_dir = tmp_path_factory.mktemp("logs")
    previous = os.environ.get(duplicate_scanner.LOG_DIR_ENV)
    os.environ[duplicate_scanner.LOG_DIR_ENV] = str(log_dir)
    duplicate_scanner.setup_logger()
    yield log_dir
    if previous is None:
        os.environ.pop(duplicate_scanner.LOG_DIR_ENV, None)
    else:
        os.environ[duplicate_scanner.LOG_DIR_ENV] = previous


@pytest.fixture
def scanner() -> DuplicateScanner:
    return DuplicateScanner()


def write_files(root: Path, files: Dict[str, bytes]) -> Dict[str, Path]:
    created: Dict[str, Path] = {}
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)
        created[relative] = target
    return created


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """a.txt and b.txt share content, c.txt is unique."""
    root = tmp_path / "data"
    write_files(
        root,
        {
            "a.txt": b"hello",
            "b.txt": b"hello",
            "c.txt": b"world",
        },
    )
    return root
