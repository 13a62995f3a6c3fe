"""
Prompt Assembler / Interaction Engine
Canonical codec, clause buffer, wizard flow and authoring surface.
"""

from .models import Prompt, TranscriptMessage, WizardQuestion
from .codec import SEPARATOR, parse, serialize
from .assembler import PromptAssembler
from .wizard import QUESTIONS, SKIPPED, WizardState, advance, answers_to_prompt, back, restart, skip
from .scheduler import AsyncioScheduler, ScheduledCall, Scheduler, ThreadingScheduler
from .session import WizardSession
from .composer import WIZARD_KEYS, Composer, direct_edit_allowed, wizard_allowed

__all__ = [
    "Prompt",
    "TranscriptMessage",
    "WizardQuestion",
    "SEPARATOR",
    "parse",
    "serialize",
    "PromptAssembler",
    "QUESTIONS",
    "SKIPPED",
    "WizardState",
    "advance",
    "answers_to_prompt",
    "back",
    "restart",
    "skip",
    "AsyncioScheduler",
    "ScheduledCall",
    "Scheduler",
    "ThreadingScheduler",
    "WizardSession",
    "WIZARD_KEYS",
    "Composer",
    "direct_edit_allowed",
    "wizard_allowed",
]
