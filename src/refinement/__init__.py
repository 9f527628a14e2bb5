"""Demonstration refinement module - turn teaching logs into minimal scripts.

A recorded demonstration is full of detours: fields retyped, tasks
ticked and unticked, stray clicks. Refinement keeps only the actions
that produced the session's final outcome:
- Goal deduction reads the terminal state from each target's last value
- Backward tracing picks the action that established each terminal value
- Noise pruning drops everything else and orders the result
"""

from .goal import deduce_goal, prefix_task_predicate
from .models import (
    EventKind,
    EventRecord,
    PointerActivation,
    RefinementResult,
    StateToggle,
    TerminalState,
    TextInput,
    event_from_dict,
    event_to_dict,
)
from .pipeline import RefinementPipeline, describe_script, refine, refine_dicts
from .pruning import prune_noise
from .session import SessionState, TeachingSession
from .tracing import trace_backward

__all__ = [
    # Models
    "EventKind",
    "EventRecord",
    "PointerActivation",
    "TextInput",
    "StateToggle",
    "TerminalState",
    "RefinementResult",
    "event_from_dict",
    "event_to_dict",
    # Stages
    "deduce_goal",
    "prefix_task_predicate",
    "trace_backward",
    "prune_noise",
    # Pipeline
    "refine",
    "refine_dicts",
    "describe_script",
    "RefinementPipeline",
    # Session
    "SessionState",
    "TeachingSession",
]
