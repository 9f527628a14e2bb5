"""Backward tracing - find the action that produced each part of the goal."""

from collections.abc import Sequence

import structlog

from .models import EventKind, EventRecord, TerminalState

logger = structlog.get_logger()


def matches_goal(record: EventRecord, goal: TerminalState) -> bool:
    """Check whether a record produces its target's terminal value.

    Toggles match when the target is a completed task. Text inputs match
    on exact string equality with the settled form value.
    """
    if record.kind == EventKind.STATE_TOGGLE:
        return record.target in goal.completed_tasks
    if record.kind == EventKind.TEXT_INPUT:
        expected = goal.form_values.get(record.target)
        return expected is not None and record.value == expected
    return False


def trace_backward(
    events: Sequence[EventRecord],
    goal: TerminalState,
) -> list[EventRecord]:
    """Select, per necessary target, the newest record matching the goal.

    A record is only considered when strictly newer than the current
    candidate for its target, and non-matching records never replace a
    candidate. So when the last write to a target does not match the goal
    but an earlier one does, the earlier record is kept.

    Targets with no matching record are left out.

    Returns:
        Keep-list ordered by recorded_at ascending
    """
    necessary = goal.necessary_targets
    best: dict[str, EventRecord] = {}

    for event in events:
        if event.target not in necessary:
            continue
        current = best.get(event.target)
        if current is not None and event.recorded_at <= current.recorded_at:
            continue
        if matches_goal(event, goal):
            best[event.target] = event

    keep_list = sorted(best.values(), key=lambda r: r.recorded_at)

    logger.debug(
        "Backward trace complete",
        necessary_targets=len(necessary),
        kept=len(keep_list),
    )
    return keep_list
