"""Data models for demonstration refinement."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class EventKind(str, Enum):
    """Kinds of recorded UI interactions.

    Values are the wire names used by the recording shell.
    """

    POINTER_ACTIVATION = "click"
    TEXT_INPUT = "input"
    STATE_TOGGLE = "toggle"


@dataclass(frozen=True)
class PointerActivation:
    """A click on a UI element. Carries no value."""

    target: str
    value: None = None
    recorded_at: int = 0  # ms

    @property
    def kind(self) -> EventKind:
        return EventKind.POINTER_ACTIVATION


@dataclass(frozen=True)
class TextInput:
    """A text field write."""

    target: str
    value: Optional[str] = None
    recorded_at: int = 0  # ms

    @property
    def kind(self) -> EventKind:
        return EventKind.TEXT_INPUT


@dataclass(frozen=True)
class StateToggle:
    """A checkbox or switch flip."""

    target: str
    value: Optional[bool] = None
    recorded_at: int = 0  # ms

    @property
    def kind(self) -> EventKind:
        return EventKind.STATE_TOGGLE


EventRecord = Union[PointerActivation, TextInput, StateToggle]

_KIND_ALIASES = {
    "pointer-activation": EventKind.POINTER_ACTIVATION,
    "text-input": EventKind.TEXT_INPUT,
    "state-toggle": EventKind.STATE_TOGGLE,
}

_RECORD_TYPES = {
    EventKind.POINTER_ACTIVATION: PointerActivation,
    EventKind.TEXT_INPUT: TextInput,
    EventKind.STATE_TOGGLE: StateToggle,
}


def event_from_dict(data: dict) -> EventRecord:
    """Create an EventRecord from a dictionary.

    Accepts both the shell's wire keys (``type``/``timestamp``) and the
    long-form keys (``kind``/``recordedAt``). Kinds may be given by wire
    name (``input``) or long name (``text-input``). Unknown kinds are read
    as pointer activations; values of the wrong type are kept and simply
    contribute nothing to the goal.

    Raises:
        ValueError: If the record has no target.
    """
    target = data.get("target")
    if not target:
        raise ValueError("Event record requires a target")

    raw_kind = data.get("type", data.get("kind", EventKind.POINTER_ACTIVATION.value))
    if isinstance(raw_kind, str) and raw_kind in _KIND_ALIASES:
        kind = _KIND_ALIASES[raw_kind]
    else:
        try:
            kind = EventKind(raw_kind)
        except ValueError:
            kind = EventKind.POINTER_ACTIVATION

    recorded_at = data.get("timestamp", data.get("recordedAt", 0)) or 0

    if kind == EventKind.POINTER_ACTIVATION:
        return PointerActivation(target=str(target), recorded_at=int(recorded_at))

    return _RECORD_TYPES[kind](
        target=str(target),
        value=data.get("value"),
        recorded_at=int(recorded_at),
    )


def event_to_dict(record: EventRecord) -> dict:
    """Convert an EventRecord to the shell's wire format."""
    step: dict[str, Any] = {
        "type": record.kind.value,
        "target": record.target,
        "timestamp": record.recorded_at,
    }
    if record.value is not None:
        step["value"] = record.value
    return step


def identity_key(record: EventRecord) -> tuple[int, str]:
    """Identity of a record within one session: (recorded_at, target)."""
    return (record.recorded_at, record.target)


@dataclass(frozen=True)
class TerminalState:
    """The deduced final outcome of a teaching session.

    ``deduced_at`` is bookkeeping only and is never compared against
    event timestamps.
    """

    completed_tasks: frozenset[str] = frozenset()
    form_values: dict[str, str] = field(default_factory=dict)
    deduced_at: Optional[float] = field(default=None, compare=False)

    @property
    def necessary_targets(self) -> set[str]:
        """Every target that appears in the terminal state."""
        return set(self.completed_tasks) | set(self.form_values)

    @property
    def is_empty(self) -> bool:
        return not self.completed_tasks and not self.form_values


@dataclass
class RefinementResult:
    """Outcome of refining one teaching session."""

    raw_count: int
    script: list[EventRecord] = field(default_factory=list)
    goal: TerminalState = field(default_factory=TerminalState)
    description: str = ""
    min_script_length: int = 1

    @property
    def refined_count(self) -> int:
        return len(self.script)

    @property
    def removed_count(self) -> int:
        """Number of raw events pruned as noise."""
        return self.raw_count - self.refined_count

    @property
    def has_suggestion(self) -> bool:
        """Whether the script is worth offering to save."""
        return self.refined_count > 0 and self.refined_count >= self.min_script_length

    def to_dict(self) -> dict:
        return {
            "raw_count": self.raw_count,
            "refined_count": self.refined_count,
            "removed_count": self.removed_count,
            "description": self.description,
            "script": [event_to_dict(r) for r in self.script],
        }
