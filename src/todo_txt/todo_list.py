"""Todo lists: ordered collections of tasks backed by a todo.txt file or a sequence."""

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from . import filters
from .config import ConfigModel, get_config
from .task import Task
from .utils.validation import validate_task_input

logger = logging.getLogger(__name__)

TaskInput = Union[str, Task]
PathLike = Union[str, os.PathLike]


def to_task(item: TaskInput, index: Optional[int] = None) -> Task:
    """Turn a raw line or an existing task into a task.

    Raises:
        InvalidTaskInputError: If ``item`` is neither a str nor a Task
    """
    item = validate_task_input(item, index)
    if isinstance(item, Task):
        return item
    return Task(item)


class TodoList:
    """An ordered list of tasks.

    Build one from a sequence of lines and/or tasks, or read it from a file
    with ``TodoList.load``. Filters return new lists and leave this one alone.

    Example::

        todos = TodoList(["(A) Call mom @phone", Task("Buy milk @store")])
        todos.by_context("@phone")  # TodoList with the first task only
    """

    def __init__(self, items: Optional[Iterable[TaskInput]] = None,
                 path: Optional[PathLike] = None):
        self.path: Optional[Path] = Path(path) if path is not None else None
        self._tasks: List[Task] = []
        if items is not None:
            self.extend(items)

    @classmethod
    def load(cls, path: PathLike, encoding: str = "utf-8",
             skip_blank_lines: bool = True) -> "TodoList":
        """Read a todo.txt file, one task per line, in file order.

        Raises:
            OSError: If the file cannot be opened or read
        """
        todo_list = cls(path=path)
        with open(path, "r", encoding=encoding) as f:
            for line in f:
                line = line.rstrip("\r\n")
                if skip_blank_lines and not line.strip():
                    continue
                todo_list._tasks.append(Task(line))

        logger.debug("Loaded %d tasks from %s", len(todo_list), path)
        return todo_list

    @classmethod
    def from_config(cls, config: Optional[ConfigModel] = None) -> "TodoList":
        """Load the todo file named in the configuration."""
        if config is None:
            config = get_config()
        return cls.load(
            config.get_todo_path(),
            encoding=config.encoding,
            skip_blank_lines=config.skip_blank_lines,
        )

    def save(self, path: Optional[PathLike] = None, encoding: str = "utf-8") -> Path:
        """Write every task as a canonical line.

        Args:
            path: Target file; defaults to the path the list was loaded from

        Returns:
            The path written to
        """
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("No path given and the list was not loaded from a file")

        with open(target, "w", encoding=encoding, newline="\n") as f:
            for task in self._tasks:
                f.write(f"{task}\n")

        logger.debug("Saved %d tasks to %s", len(self._tasks), target)
        return target

    def to_lines(self) -> List[str]:
        return [str(task) for task in self._tasks]

    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    def append(self, item: TaskInput) -> Task:
        """Add a line or task to the end of the list and return the task."""
        task = to_task(item, len(self._tasks))
        self._tasks.append(task)
        return task

    def extend(self, items: Iterable[TaskInput]) -> None:
        """Add several lines or tasks.

        Every item is checked before any is added, so a bad item leaves the
        list unchanged.
        """
        start = len(self._tasks)
        converted = [to_task(item, start + i) for i, item in enumerate(items)]
        self._tasks.extend(converted)

    def _derive(self, tasks: Iterable[Task]) -> "TodoList":
        derived = TodoList(path=self.path)
        derived._tasks = list(tasks)
        return derived

    def by_priority(self, priority: Optional[str]) -> "TodoList":
        return self._derive(filters.by_priority(self._tasks, priority))

    def by_context(self, context: str) -> "TodoList":
        return self._derive(filters.by_context(self._tasks, context))

    def by_project(self, project: str) -> "TodoList":
        return self._derive(filters.by_project(self._tasks, project))

    def by_done(self) -> "TodoList":
        return self._derive(filters.by_done(self._tasks))

    def by_not_done(self) -> "TodoList":
        return self._derive(filters.by_not_done(self._tasks))

    def by_overdue(self) -> "TodoList":
        return self._derive(filters.by_overdue(self._tasks))

    def sorted_by_priority(self) -> "TodoList":
        return self._derive(filters.sort_by_priority(self._tasks))

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._derive(self._tasks[index])
        return self._tasks[index]

    def __contains__(self, task) -> bool:
        return any(task is existing for existing in self._tasks)

    def __bool__(self) -> bool:
        return bool(self._tasks)

    def __repr__(self) -> str:
        return f"TodoList({len(self._tasks)} tasks, path={str(self.path) if self.path else None!r})"
