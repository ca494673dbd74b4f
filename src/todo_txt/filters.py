"""Filter and sort helpers that work on any iterable of tasks.

The filters are generators and never modify their input. ``TodoList`` wraps
them to return new lists.
"""

from typing import Iterable, Iterator, List, Optional

from .task import Task


def by_priority(tasks: Iterable[Task], priority: Optional[str]) -> Iterator[Task]:
    """Yield tasks whose priority is exactly ``priority`` (None matches unprioritised)."""
    return (task for task in tasks if task.priority == priority)


def by_context(tasks: Iterable[Task], context: str) -> Iterator[Task]:
    """Yield tasks tagged with ``context``, e.g. ``"@phone"``."""
    return (task for task in tasks if context in task.contexts)


def by_project(tasks: Iterable[Task], project: str) -> Iterator[Task]:
    """Yield tasks tagged with ``project``, e.g. ``"+garden"``."""
    return (task for task in tasks if project in task.projects)


def by_done(tasks: Iterable[Task], done: bool = True) -> Iterator[Task]:
    return (task for task in tasks if task.done == done)


def by_not_done(tasks: Iterable[Task]) -> Iterator[Task]:
    return by_done(tasks, False)


def by_overdue(tasks: Iterable[Task]) -> Iterator[Task]:
    return (task for task in tasks if task.overdue)


def sort_by_priority(tasks: Iterable[Task]) -> List[Task]:
    """Return tasks highest priority first; unprioritised tasks go last.

    The sort is stable, so tasks of equal priority keep their order.
    """
    return sorted(tasks, reverse=True)
