"""
Composer
Authoring surface combining direct syntax entry with the wizard.

The two modes are mutually exclusive through explicit guard predicates;
the assembler and the wizard themselves know nothing about UI affordances.
"""

from returns.pipeline import is_successful
from returns.result import Result, Success, Failure

from ..core.errors import PromptError, invalid_transition, mode_conflict, unknown_keyword
from ..core.logging_config import get_logger
from ..monitoring import metrics_collector
from .assembler import PromptAssembler
from .codec import SEPARATOR
from .models import Prompt, TranscriptMessage
from .session import WizardSession
from .wizard import WizardState

logger = get_logger(__name__)

# Tab + key bindings for wizard navigation
WIZARD_KEYS = {"-": "back", "+": "skip", "=": "skip"}

LOCKED = "prompt is locked while the wizard result is shown"
TYPING = "finish typing the prompt before using the wizard"


def wizard_allowed(draft: str, typing: bool) -> bool:
    """Wizard navigation is blocked while a non-empty draft is being typed."""
    return not (typing and draft.strip())


def direct_edit_allowed(session: WizardSession) -> bool:
    """Direct edits are blocked while a wizard result is on display."""
    return not session.is_completing


class Composer:
    """One authoring context: a direct-entry draft, its prompt, and a wizard."""

    def __init__(self, assembler: PromptAssembler, session: WizardSession) -> None:
        self.assembler = assembler
        self.session = session
        self.draft = ""
        self.typing = False

    @property
    def prompt(self) -> Prompt:
        return self.assembler.prompt

    @property
    def transcript(self) -> tuple[TranscriptMessage, ...]:
        return self.session.state.transcript

    @property
    def wizard_enabled(self) -> bool:
        return wizard_allowed(self.draft, self.typing)

    @property
    def direct_enabled(self) -> bool:
        return direct_edit_allowed(self.session)

    # ------------------------------------------------------------------
    # Direct entry
    # ------------------------------------------------------------------

    def edit(self, text: str) -> Result[str, PromptError]:
        """Replace the draft text as the user types."""
        if not self.direct_enabled:
            return self._conflict(LOCKED)
        self.draft = text
        self.typing = bool(text.strip())
        return Success(text)

    def finish_editing(self) -> Result[Prompt, PromptError]:
        """Stop typing and parse the draft into the prompt."""
        if not self.direct_enabled:
            return self._conflict(LOCKED)
        self.typing = False
        return self.assembler.load(self.draft)

    def append_or_replace(self, keyword_id: str, raw_argument: str) -> Result[Prompt, PromptError]:
        """Set one clause and refresh the draft from the prompt."""
        if not self.direct_enabled:
            return self._conflict(LOCKED)
        result = self.assembler.append_or_replace(keyword_id, raw_argument)
        if is_successful(result):
            self.draft = self.assembler.serialize()
        return result

    def insert_shortcut(self, key: str) -> Result[str, PromptError]:
        """Append the ``*keyword* `` insertion bound to ``Tab + key``."""
        if not self.direct_enabled:
            return self._conflict(LOCKED)
        definition = self.assembler.validator.registry.by_shortcut(key)
        if definition is None:
            return Failure(unknown_keyword(f"Tab + {key}"))

        stem = self.draft.rstrip()
        self.draft = f"{stem}{SEPARATOR}{definition.syntax}" if stem else definition.syntax
        self.typing = True
        logger.debug("shortcut_inserted", keyword=definition.id, shortcut=str(definition.shortcut))
        return Success(self.draft)

    # ------------------------------------------------------------------
    # Wizard
    # ------------------------------------------------------------------

    def wizard_advance(self, answer: str) -> Result[WizardState, PromptError]:
        """Answer the current question; a completed flow loads its prompt."""
        if not self.wizard_enabled:
            return self._conflict(TYPING)

        result = self.session.advance(answer, max_length=self.assembler.max_length)
        if is_successful(result) and result.unwrap().completed:
            output = result.unwrap().result or ""
            loaded = self.assembler.load(output)
            if not is_successful(loaded):
                return Failure(loaded.failure())
            self.draft = output
            self.typing = False
        return result

    def wizard_skip(self) -> Result[WizardState, PromptError]:
        if not self.wizard_enabled:
            return self._conflict(TYPING)
        return self.session.skip()

    def wizard_back(self) -> Result[WizardState, PromptError]:
        if not self.wizard_enabled:
            return self._conflict(TYPING)
        return self.session.back()

    def handle_wizard_key(self, key: str) -> Result[WizardState, PromptError]:
        """Dispatch ``Tab + -`` (back) and ``Tab + +``/``=`` (skip)."""
        action = WIZARD_KEYS.get(key)
        if action == "back":
            return self.wizard_back()
        if action == "skip":
            return self.wizard_skip()
        return Failure(invalid_transition(f"no wizard action bound to '{key}'"))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Clear the prompt and start a fresh wizard session."""
        self.assembler.reset()
        self.draft = ""
        self.typing = False
        self.session.restart()

    def close(self) -> None:
        self.session.close()

    def _conflict(self, reason: str) -> Failure:
        error = mode_conflict(reason)
        logger.warning("mode_conflict", session_id=self.session.session_id, reason=reason)
        metrics_collector.record_error(error.kind.value, "composer")
        return Failure(error)
