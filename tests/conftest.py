"""Pytest configuration and shared fixtures."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from todo_txt.config import Config  # noqa: E402
from todo_txt.logger import set_logger  # noqa: E402

FIXED_TODAY = date(2013, 5, 20)


@pytest.fixture
def fixed_today(monkeypatch):
    """Pin the date the library sees as "today"."""
    monkeypatch.setattr("todo_txt.utils.datetime.today", lambda: FIXED_TODAY)
    monkeypatch.setattr("todo_txt.task.today", lambda: FIXED_TODAY)
    return FIXED_TODAY


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Drop cached config and logger between tests."""
    Config._instance = None
    set_logger(None)
    yield
    Config._instance = None
    set_logger(None)


@pytest.fixture
def todo_file(tmp_path):
    """A small todo.txt file on disk."""
    path = tmp_path / "todo.txt"
    path.write_text(
        "(A) 2012-03-04 Call mom @phone +family due:2012-03-10\n"
        "\n"
        "(B) Schedule checkup @phone +health\n"
        "x 2012-03-05 2012-03-01 Pay rent +home priority:C\n"
        "Water plants @home +garden\n",
        encoding="utf-8",
    )
    return path
