"""todo-txt - parse, query and write todo.txt task lists."""

__version__ = "0.3.0"

from .task import Task
from .todo_list import TodoList, TaskInput, to_task
from .logger import get_logger, set_logger, configure_logging
from .utils.validation import TodoTxtError, InvalidTaskInputError, ConfigError

__all__ = [
    "Task",
    "TodoList",
    "TaskInput",
    "to_task",
    "get_logger",
    "set_logger",
    "configure_logging",
    "TodoTxtError",
    "InvalidTaskInputError",
    "ConfigError",
    "__version__",
]
