"""Field extraction for todo.txt lines.

Each function looks at the raw line and pulls out a single field. None of
them raise on malformed input: a field whose pattern does not match at its
required position is reported as absent (None or an empty list).

Line layout::

    x 2012-03-05 (A) 2012-03-04 Call mom @phone +family due:2012-03-10
    ^ completion ^ priority     ^ free text, contexts, projects, due date
                     ^ created on
"""

import re
from datetime import date
from typing import List, Optional, Tuple

from .utils.datetime import parse_date

# Head of the line, matched in order from the start.
COMPLETED_ON_PATTERN = re.compile(r"^x (\d{4}-\d{2}-\d{2}) ")
PRIORITY_PATTERN = re.compile(r"^\(([A-Z])\) ")
CREATED_ON_PATTERN = re.compile(r"^(\d{4}-\d{2}-\d{2})(?=\s|$)")

# Annotations, matched anywhere as whitespace-delimited tokens.
DUE_ON_PATTERN = re.compile(r"(?<!\S)due:(\d{4}-\d{2}-\d{2})(?=\s|$)")
# Written by the formatter as the very last token of a done line.
DONE_PRIORITY_PATTERN = re.compile(r"(?<!\S)priority:([A-Z])\s*$")
CONTEXT_PATTERN = re.compile(r"(?<!\S)@\S+")
PROJECT_PATTERN = re.compile(r"(?<!\S)\+\S+")


def _split_completion(line: str) -> Tuple[Optional[date], str]:
    """Split off ``x YYYY-MM-DD `` if it is present with a real date."""
    match = COMPLETED_ON_PATTERN.match(line)
    if match:
        completed_on = parse_date(match.group(1))
        if completed_on is not None:
            return completed_on, line[match.end():]
    return None, line


def _split_priority(rest: str) -> Tuple[Optional[str], str]:
    match = PRIORITY_PATTERN.match(rest)
    if match:
        return match.group(1), rest[match.end():]
    return None, rest


def _split_created_on(rest: str) -> Tuple[Optional[date], str]:
    match = CREATED_ON_PATTERN.match(rest)
    if match:
        created_on = parse_date(match.group(1))
        if created_on is not None:
            return created_on, rest[match.end():]
    return None, rest


def _split_head(line: str) -> Tuple[Optional[date], Optional[str], Optional[date], str]:
    """Consume completion, priority and creation date from the front of a line.

    Returns:
        Tuple of (completed_on, priority, created_on, remainder)
    """
    completed_on, rest = _split_completion(line)
    priority, rest = _split_priority(rest)
    created_on, rest = _split_created_on(rest)
    return completed_on, priority, created_on, rest


def _find_due(line: str) -> Optional[re.Match]:
    """Return the last ``due:`` token holding a valid date.

    The formatter writes the due date after the free text, so earlier
    ``due:`` tokens belong to the text.
    """
    found = None
    for match in DUE_ON_PATTERN.finditer(line):
        if parse_date(match.group(1)) is not None:
            found = match
    return found


def get_completed_date(line: str) -> Optional[date]:
    """Return the completion date of a done line.

    The ``x `` marker and a valid date form one pattern: ``x 2012-13-99 Task``
    is not a completed task.
    """
    completed_on, _ = _split_completion(line)
    return completed_on


def get_priority(line: str) -> Optional[str]:
    """Return the priority letter, if any.

    Active lines carry it as a leading ``(A)``. Completed lines written by
    this library carry it as a trailing ``priority:A`` instead; that form is
    read back only on completed lines, and only as the last token.
    """
    completed_on, rest = _split_completion(line)
    priority, _ = _split_priority(rest)
    if priority is None and completed_on is not None:
        match = DONE_PRIORITY_PATTERN.search(rest)
        if match:
            priority = match.group(1)
    return priority


def get_created_on(line: str) -> Optional[date]:
    """Return the creation date.

    Only a date directly after the completion and priority tokens counts;
    dates elsewhere in the text are ignored.
    """
    _, _, created_on, _ = _split_head(line)
    return created_on


def get_due_on(line: str) -> Optional[date]:
    """Return the date of the last valid ``due:YYYY-MM-DD`` annotation."""
    match = _find_due(line)
    return parse_date(match.group(1)) if match else None


def extract_contexts(line: str) -> List[str]:
    """Return every ``@context`` token in order, duplicates included."""
    return CONTEXT_PATTERN.findall(line)


def extract_projects(line: str) -> List[str]:
    """Return every ``+project`` token in order, duplicates included."""
    return PROJECT_PATTERN.findall(line)


def get_item_text(line: str) -> str:
    """Return the free-text description of a line.

    Strips the completion marker, priority (either form), creation date, due
    annotation, contexts and projects, then collapses whitespace. Tokens that
    failed validation, such as an impossible date, stay in the text.
    """
    completed_on, priority, _, rest = _split_head(line)

    if priority is None and completed_on is not None:
        suffix = DONE_PRIORITY_PATTERN.search(rest)
        if suffix:
            rest = rest[:suffix.start()]

    due = _find_due(rest)
    if due:
        rest = rest[:due.start()] + rest[due.end():]

    rest = CONTEXT_PATTERN.sub("", rest)
    rest = PROJECT_PATTERN.sub("", rest)
    return " ".join(rest.split())
