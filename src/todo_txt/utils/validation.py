"""Error types and input validation for todo-txt.

Malformed task lines are never an error: a field that does not match its
pattern is simply absent. The exceptions here cover the remaining cases,
namely values that cannot be turned into a task at all and broken
configuration files.
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class TodoTxtError(Exception):
    """Base class for all todo-txt errors."""


class InvalidTaskInputError(TodoTxtError, TypeError):
    """Raised when a list is built from something that is neither a str nor a Task."""

    def __init__(self, value: Any, index: Optional[int] = None):
        self.value = value
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(
            f"Cannot build a task from {type(value).__name__}{where}: "
            f"expected str or Task, got {value!r}"
        )


class ConfigError(TodoTxtError):
    """Raised when a configuration file cannot be parsed."""


def validate_task_input(value: Any, index: Optional[int] = None) -> Any:
    """Check that ``value`` is acceptable input for a task list.

    Strings and ``Task`` instances pass through unchanged.

    Raises:
        InvalidTaskInputError: For any other type
    """
    from ..task import Task

    if isinstance(value, (str, Task)):
        return value

    logger.debug("Rejecting task input %r at index %s", value, index)
    raise InvalidTaskInputError(value, index)
