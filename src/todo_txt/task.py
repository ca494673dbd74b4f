"""Task model for todo.txt lines."""

from datetime import date
from typing import List, Optional

from .logger import LoggerMixin
from .syntax import (
    get_completed_date,
    get_priority,
    get_created_on,
    get_due_on,
    extract_contexts,
    extract_projects,
    get_item_text,
)
from .utils.datetime import today, format_date


class Task(LoggerMixin):
    """A single line of a todo.txt file.

    Everything except the completion date is read from the line once, at
    construction. ``do``, ``undo`` and ``toggle`` only change
    ``completed_on``; whether a task is done is derived from it.

    Example::

        task = Task("(A) 2012-03-04 Call mom @phone +family due:2012-03-10")
        task.priority    # "A"
        task.created_on  # date(2012, 3, 4)
        task.contexts    # ["@phone"]
        task.text        # "Call mom"
    """

    def __init__(self, text: str):
        self._original_text = text
        self.completed_on: Optional[date] = get_completed_date(text)
        self._priority = get_priority(text)
        self._created_on = get_created_on(text)
        self._due_on = get_due_on(text)
        self._contexts = extract_contexts(text)
        self._projects = extract_projects(text)
        self._text: Optional[str] = None

    @property
    def original_text(self) -> str:
        """The line this task was built from, unchanged."""
        return self._original_text

    @property
    def orig(self) -> str:
        return self._original_text

    @property
    def priority(self) -> Optional[str]:
        return self._priority

    @property
    def created_on(self) -> Optional[date]:
        return self._created_on

    @property
    def due_on(self) -> Optional[date]:
        return self._due_on

    @property
    def contexts(self) -> List[str]:
        return list(self._contexts)

    @property
    def projects(self) -> List[str]:
        return list(self._projects)

    @property
    def text(self) -> str:
        """Description without priority, dates, contexts and projects."""
        if self._text is None:
            self._text = get_item_text(self._original_text)
        return self._text

    @property
    def date(self) -> Optional[date]:
        """Deprecated alias for ``created_on``."""
        self.logger.warning("Task.date is deprecated, use created_on instead.")
        return self._created_on

    @property
    def done(self) -> bool:
        return self.completed_on is not None

    @property
    def overdue(self) -> bool:
        """True if the task has a due date earlier than today."""
        return self._due_on is not None and self._due_on < today()

    def do(self) -> None:
        """Mark the task done as of today, even if it already was."""
        self.completed_on = today()

    def undo(self) -> None:
        """Mark the task not done. The creation date and priority are kept."""
        self.completed_on = None

    def toggle(self) -> None:
        if self.done:
            self.undo()
        else:
            self.do()

    def compare(self, other: "Task") -> int:
        """Compare two tasks by priority alone.

        Returns 1 if this task has the higher priority, -1 if ``other`` has,
        and 0 if they are equal or both unprioritised. A lettered priority is
        higher than none, and ``A`` is higher than ``B``.
        """
        mine, theirs = self._priority, other.priority
        if mine is None and theirs is None:
            return 0
        if theirs is None:
            return 1
        if mine is None:
            return -1
        if mine == theirs:
            return 0
        return 1 if mine < theirs else -1

    def __lt__(self, other):
        if not isinstance(other, Task):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Task):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Task):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Task):
            return NotImplemented
        return self.compare(other) >= 0

    # Serialization

    def _str_priority(self) -> str:
        # Active tasks lead with "(A) "; done tasks trail with " priority:A".
        if not self._priority:
            return ""
        if self.done:
            return f" priority:{self._priority}"
        return f"({self._priority}) "

    def _str_done(self) -> str:
        return f"x {format_date(self.completed_on)} " if self.done else ""

    def _str_created_on(self) -> str:
        return f"{format_date(self._created_on)} " if self._created_on else ""

    def _str_contexts(self) -> str:
        return f" {' '.join(self._contexts)}" if self._contexts else ""

    def _str_projects(self) -> str:
        return f" {' '.join(self._projects)}" if self._projects else ""

    def _str_due_on(self) -> str:
        return f" due:{format_date(self._due_on)}" if self._due_on else ""

    def to_string(self) -> str:
        """Return the canonical todo.txt line for this task."""
        if self.done:
            return (
                self._str_done()
                + self._str_created_on()
                + self.text
                + self._str_contexts()
                + self._str_projects()
                + self._str_due_on()
                + self._str_priority()
            )
        return (
            self._str_priority()
            + self._str_created_on()
            + self.text
            + self._str_contexts()
            + self._str_projects()
            + self._str_due_on()
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Task({self.to_string()!r})"
