"""Wizard Session - stateful owner of a wizard flow and its auto-reset."""

import threading

from returns.pipeline import is_successful
from returns.result import Result

from ..core.errors import PromptError
from ..core.id import SessionID, new_session_id
from ..core.logging_config import LogContext, get_logger
from ..grammar.validator import ArgumentValidator
from ..monitoring import metrics_collector
from . import wizard
from .codec import MAX_PROMPT_LENGTH
from .models import WizardQuestion
from .scheduler import ScheduledCall, Scheduler, ThreadingScheduler
from .wizard import QUESTIONS, WizardState

logger = get_logger(__name__)

DEFAULT_RESET_DELAY = 5.0


class WizardSession:
    """
    Holds the current ``WizardState`` and performs the only side effect of
    the flow: resetting itself a fixed delay after completion.

    A pending reset is cancelled by ``restart()`` and ``close()``; a reset
    that fires for a superseded session is ignored.
    """

    def __init__(
        self,
        validator: ArgumentValidator | None = None,
        scheduler: Scheduler | None = None,
        reset_delay: float = DEFAULT_RESET_DELAY,
        questions: tuple[WizardQuestion, ...] = QUESTIONS,
        lowercase: bool = True,
        max_length: int = MAX_PROMPT_LENGTH,
    ) -> None:
        if reset_delay <= 0:
            raise ValueError("reset_delay must be positive")

        self.validator = validator or ArgumentValidator()
        self.scheduler = scheduler or ThreadingScheduler()
        self.reset_delay = reset_delay
        self.questions = questions
        self.lowercase = lowercase
        self.max_length = max_length

        self.session_id: SessionID = new_session_id()
        self._state = wizard.restart(questions)
        self._pending: ScheduledCall | None = None
        self._generation = 0
        # Reset callbacks may arrive from a timer thread
        self._lock = threading.RLock()

    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def is_completing(self) -> bool:
        """True while a completed result is on display, before the reset."""
        return self._pending is not None

    def advance(self, answer: str, max_length: int | None = None) -> Result[WizardState, PromptError]:
        """Answer the current question; ``max_length`` overrides the session limit."""
        with self._lock:
            result = wizard.advance(
                self._state, answer, self.validator, self.lowercase, max_length or self.max_length
            )
            self._apply("advance", result)
            if is_successful(result) and result.unwrap().completed:
                self._complete()
            return result

    def skip(self) -> Result[WizardState, PromptError]:
        """Skip the current question."""
        with self._lock:
            result = wizard.skip(self._state)
            self._apply("skip", result)
            return result

    def back(self) -> Result[WizardState, PromptError]:
        """Go to the previous question."""
        with self._lock:
            result = wizard.back(self._state)
            self._apply("back", result)
            return result

    def restart(self) -> WizardState:
        """Start over immediately, cancelling any pending reset."""
        with self._lock:
            self._cancel_pending()
            self._generation += 1
            self.session_id = new_session_id()
            self._state = wizard.restart(self.questions)
            logger.info("wizard_restarted", session_id=self.session_id)
            return self._state

    def close(self) -> None:
        """Tear down; a pending reset will not run."""
        with self._lock:
            self._cancel_pending()
            self._generation += 1

    def _apply(self, action: str, result: Result[WizardState, PromptError]) -> None:
        with LogContext(session_id=self.session_id):
            if is_successful(result):
                self._state = result.unwrap()
                metrics_collector.record_transition(action, "success")
                logger.debug("wizard_transition", action=action, index=self._state.index)
            else:
                error = result.failure()
                metrics_collector.record_transition(action, "rejected")
                metrics_collector.record_error(error.kind.value, "wizard")
                logger.warning("wizard_rejected", action=action, kind=error.kind.value, reason=error.reason)

    def _complete(self) -> None:
        metrics_collector.record_completion()
        logger.info("wizard_completed", session_id=self.session_id, prompt=self._state.result)

        generation = self._generation
        self._pending = self.scheduler.call_later(self.reset_delay, lambda: self._auto_reset(generation))

    def _auto_reset(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("stale_reset_ignored", session_id=self.session_id)
                return
            self._pending = None
            self._generation += 1
            self._state = wizard.restart(self.questions)
            logger.info("wizard_reset", session_id=self.session_id)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
