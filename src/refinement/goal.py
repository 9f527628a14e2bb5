"""Goal deduction - work out what the teaching session ended with.

The terminal state is read from the last value each target held:
- task targets whose final value is ``True`` are completed tasks
- targets whose final value is a non-blank string are settled form fields
- everything else (``False``, blank strings, clicks) contributes nothing
"""

import time
from collections.abc import Callable, Sequence

import structlog

from .models import EventRecord, TerminalState

logger = structlog.get_logger()

DEFAULT_TASK_PREFIX = "task-"

TaskPredicate = Callable[[str], bool]


def prefix_task_predicate(prefix: str = DEFAULT_TASK_PREFIX) -> TaskPredicate:
    """Build a predicate recognising checklist items by target prefix."""

    def is_task(target: str) -> bool:
        return target.startswith(prefix)

    return is_task


def last_record_per_target(events: Sequence[EventRecord]) -> dict[str, EventRecord]:
    """Reduce a log to the latest record for each target.

    On equal timestamps the record seen later in the sequence wins.
    """
    latest: dict[str, EventRecord] = {}
    for event in events:
        existing = latest.get(event.target)
        if existing is None or event.recorded_at >= existing.recorded_at:
            latest[event.target] = event
    return latest


def deduce_goal(
    events: Sequence[EventRecord],
    is_task: TaskPredicate | None = None,
) -> TerminalState:
    """Deduce the terminal state of a session.

    Args:
        events: Chronological event log (may be empty)
        is_task: Predicate deciding whether a target is a checklist item.
            Defaults to the ``task-`` prefix convention.

    Returns:
        TerminalState with completed tasks and settled form values
    """
    is_task = is_task or prefix_task_predicate()

    completed: set[str] = set()
    form_values: dict[str, str] = {}

    for target, record in last_record_per_target(events).items():
        value = record.value
        # bool is checked first: form values are strings only
        if isinstance(value, bool):
            if value is True and is_task(target):
                completed.add(target)
        elif isinstance(value, str) and value.strip():
            form_values[target] = value.strip()

    logger.debug(
        "Goal deduced",
        event_count=len(events),
        completed_tasks=len(completed),
        form_values=len(form_values),
    )

    return TerminalState(
        completed_tasks=frozenset(completed),
        form_values=form_values,
        deduced_at=time.time(),
    )
