"""Teaching session - record a demonstration and refine it on finish.

A session buffers events only while teaching. Finishing refines the
buffer; the caller may then accept the refined script as a saved task
or dismiss it. Replaying and scheduling saved tasks happen elsewhere.
"""

import uuid
from enum import Enum
from typing import Optional

import structlog

from ..utils.logging import LogContext, log_operation
from .models import EventRecord, RefinementResult
from .pipeline import RefinementPipeline

logger = structlog.get_logger()


class SessionState(str, Enum):
    """Teaching session lifecycle states."""

    IDLE = "idle"
    TEACHING = "teaching"
    SUGGESTING = "suggesting"


class TeachingSession:
    """Recorder for a single demonstration.

    Example:
        session = TeachingSession()
        session.start()
        session.record(StateToggle(target="task-1", value=True, recorded_at=10))
        result = session.finish()
        if result.has_suggestion:
            saved = session.accept()
    """

    def __init__(
        self,
        pipeline: Optional[RefinementPipeline] = None,
        session_id: Optional[str] = None,
    ):
        self.pipeline = pipeline or RefinementPipeline()
        self.session_id = session_id or f"teach-{uuid.uuid4().hex[:8]}"
        self.state = SessionState.IDLE
        self.saved_task: Optional[list[EventRecord]] = None
        self.last_result: Optional[RefinementResult] = None
        self._buffer: list[EventRecord] = []
        self.log = logger.bind(component="teaching_session", session_id=self.session_id)

    @property
    def is_teaching(self) -> bool:
        return self.state == SessionState.TEACHING

    @property
    def recorded(self) -> list[EventRecord]:
        """Copy of the events buffered so far."""
        return list(self._buffer)

    def start(self) -> None:
        """Begin recording, clearing any previous buffer and suggestion."""
        self._buffer = []
        self.last_result = None
        self.state = SessionState.TEACHING
        self.log.info("Teaching started")

    def record(self, event: EventRecord) -> bool:
        """Buffer an event if teaching. Returns whether it was kept."""
        if not self.is_teaching:
            self.log.debug("Ignoring event outside teach mode", target=event.target)
            return False
        self._buffer.append(event)
        return True

    def cancel(self) -> None:
        """Stop teaching and discard the buffer."""
        self._buffer = []
        self.state = SessionState.IDLE
        self.log.info("Teaching cancelled")

    def finish(self) -> RefinementResult:
        """Stop teaching and refine the recorded demonstration."""
        if not self.is_teaching:
            self.log.debug("Finish called outside teach mode")
            return RefinementResult(raw_count=0, min_script_length=self.pipeline.min_script_length)

        raw_log = self._buffer
        with LogContext(session_id=self.session_id):
            with log_operation("refine_session", logger=self.log) as op:
                result = self.pipeline.run(raw_log)
                op["refined_count"] = result.refined_count

        self.last_result = result
        if result.has_suggestion:
            self.state = SessionState.SUGGESTING
        else:
            self.state = SessionState.IDLE
            self._buffer = []
        return result

    def accept(self) -> Optional[list[EventRecord]]:
        """Save the suggested script as this session's task."""
        if self.state != SessionState.SUGGESTING or self.last_result is None:
            return None
        self.saved_task = list(self.last_result.script)
        self.state = SessionState.IDLE
        self._buffer = []
        self.log.info("Task saved", actions=len(self.saved_task))
        return self.saved_task

    def dismiss(self) -> None:
        """Drop the current suggestion without saving."""
        self.state = SessionState.IDLE
        self._buffer = []
        self.last_result = None
