"""Utility helpers for todo-txt."""

from .datetime import today, parse_date, format_date
from .validation import (
    TodoTxtError,
    InvalidTaskInputError,
    ConfigError,
    validate_task_input,
)

__all__ = [
    "today",
    "parse_date",
    "format_date",
    "TodoTxtError",
    "InvalidTaskInputError",
    "ConfigError",
    "validate_task_input",
]
