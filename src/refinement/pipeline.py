"""Refinement pipeline - turn a raw teaching log into a minimal script.

The three stages run strictly in order and never mutate their input:

    raw log -> deduce_goal -> trace_backward -> prune_noise -> refined script

Example:
    script = refine(events)
    summary = describe_script(script)
"""

from collections.abc import Sequence

import structlog

from ..config import get_settings
from .goal import TaskPredicate, deduce_goal, prefix_task_predicate
from .models import (
    EventKind,
    EventRecord,
    RefinementResult,
    TerminalState,
    event_from_dict,
    event_to_dict,
)
from .pruning import prune_noise
from .tracing import trace_backward

logger = structlog.get_logger()

NO_ACTIONS_DESCRIPTION = "No actions recorded"
GENERIC_DESCRIPTION = "Perform actions"


def refine(
    raw_log: Sequence[EventRecord],
    is_task: TaskPredicate | None = None,
) -> list[EventRecord]:
    """Refine a raw event log into a replayable script.

    Args:
        raw_log: Complete, chronological log of one teaching session
        is_task: Optional predicate recognising checklist targets

    Returns:
        One record per goal target, ordered by recorded_at
    """
    if not raw_log:
        return []

    _, _, script = run_stages(raw_log, is_task)
    return script


def run_stages(
    raw_log: Sequence[EventRecord],
    is_task: TaskPredicate | None = None,
) -> tuple[TerminalState, list[EventRecord], list[EventRecord]]:
    """Run the three stages and return (goal, keep_list, script)."""
    goal = deduce_goal(raw_log, is_task)
    keep_list = trace_backward(raw_log, goal)
    return goal, keep_list, prune_noise(raw_log, keep_list)


def describe_script(script: Sequence[EventRecord]) -> str:
    """Produce a short human-readable summary of a refined script."""
    if not script:
        return NO_ACTIONS_DESCRIPTION

    phrases: list[str] = []
    for record in script:
        if record.kind == EventKind.STATE_TOGGLE and record.value is True:
            phrase = "complete a task"
        elif record.kind == EventKind.TEXT_INPUT and isinstance(record.value, str):
            phrase = "fill a form field"
        else:
            continue
        if phrase not in phrases:
            phrases.append(phrase)

    if not phrases:
        return GENERIC_DESCRIPTION
    return " and ".join(phrases)


def refine_dicts(raw_log: Sequence[dict], is_task: TaskPredicate | None = None) -> list[dict]:
    """Refine a log given in the shell's dict format."""
    events = [event_from_dict(d) for d in raw_log]
    return [event_to_dict(r) for r in refine(events, is_task)]


class RefinementPipeline:
    """Configured refinement pipeline.

    Wraps the pure stages with a task predicate and reporting used by
    the teaching shell.

    Example:
        pipeline = RefinementPipeline(task_prefix="todo-")
        result = pipeline.run(events)
        if result.has_suggestion:
            save(result.script)
    """

    def __init__(
        self,
        task_prefix: str | None = None,
        is_task: TaskPredicate | None = None,
        min_script_length: int | None = None,
    ):
        """Initialize pipeline.

        Args:
            task_prefix: Prefix marking checklist targets (settings default)
            is_task: Explicit task predicate, overrides task_prefix
            min_script_length: Minimum refined length worth suggesting
        """
        if task_prefix is None or min_script_length is None:
            settings = get_settings()
            if task_prefix is None:
                task_prefix = settings.task_prefix
            if min_script_length is None:
                min_script_length = settings.min_script_length

        self.task_prefix = task_prefix
        self.is_task = is_task or prefix_task_predicate(task_prefix)
        self.min_script_length = min_script_length
        self.log = logger.bind(component="refinement_pipeline")

    def deduce(self, raw_log: Sequence[EventRecord]) -> TerminalState:
        return deduce_goal(raw_log, self.is_task)

    def refine(self, raw_log: Sequence[EventRecord]) -> list[EventRecord]:
        return refine(raw_log, self.is_task)

    def run(self, raw_log: Sequence[EventRecord]) -> RefinementResult:
        """Refine a log and report what was kept."""
        if not raw_log:
            self.log.info("Nothing to refine", raw_count=0)
            return RefinementResult(
                raw_count=0,
                description=NO_ACTIONS_DESCRIPTION,
                min_script_length=self.min_script_length,
            )

        goal, keep_list, script = run_stages(raw_log, self.is_task)

        result = RefinementResult(
            raw_count=len(raw_log),
            script=script,
            goal=goal,
            description=describe_script(script),
            min_script_length=self.min_script_length,
        )

        self.log.info(
            "Refinement complete",
            raw_count=result.raw_count,
            refined_count=result.refined_count,
            removed_count=result.removed_count,
            unreachable_targets=len(goal.necessary_targets) - len(keep_list),
        )
        return result
