"""
Prompt Wizard
Guided question/answer flow as pure transitions over ``WizardState``.

States are ``AwaitingAnswer(index)`` plus the terminal ``Completed``
(``state.result`` is set). ``WizardSession`` owns the side effects.
"""

from pydantic import BaseModel, ConfigDict, Field
from returns.pipeline import is_successful
from returns.result import Result, Success, Failure

from ..core.errors import PromptError, invalid_transition, malformed, required_answer
from ..grammar.validator import ArgumentValidator
from .codec import MAX_PROMPT_LENGTH, serialize
from .models import Prompt, TranscriptMessage, WizardQuestion

SKIPPED = "skipped"

QUESTIONS: tuple[WizardQuestion, ...] = (
    WizardQuestion(
        id="platform",
        text="What programming language or framework are you using? (e.g., JavaScript, Swift, React)",
        keyword="in",
    ),
    WizardQuestion(
        id="device",
        text="What device or platform are you targeting? (e.g., web, iPhone, Android)",
        keyword="for",
    ),
    WizardQuestion(
        id="element",
        text="What UI element do you want to create? (e.g., search bar, button, card)",
        keyword="create",
    ),
    WizardQuestion(
        id="reference",
        text="Which app would you like to reference for styling? (e.g., Instagram, WhatsApp)",
        keyword="from",
    ),
    WizardQuestion(
        id="background",
        text="Would you like a specific background color? (optional, in hex)",
        keyword="background",
        required=False,
        lowercase=False,
    ),
)


class WizardState(BaseModel):
    """Snapshot of a wizard session."""

    model_config = ConfigDict(frozen=True)

    questions: tuple[WizardQuestion, ...] = QUESTIONS
    index: int = Field(default=0, ge=0)
    answers: dict[str, str] = Field(default_factory=dict)
    transcript: tuple[TranscriptMessage, ...] = Field(default_factory=tuple)
    result: str | None = None

    @classmethod
    def start(cls, questions: tuple[WizardQuestion, ...] = QUESTIONS) -> "WizardState":
        """Fresh state with the first question in the transcript."""
        if not questions:
            raise ValueError("wizard needs at least one question")
        return cls(
            questions=questions,
            transcript=(TranscriptMessage(role="assistant", content=questions[0].text),),
        )

    @property
    def current(self) -> WizardQuestion:
        return self.questions[self.index]

    @property
    def is_last(self) -> bool:
        return self.index == len(self.questions) - 1

    @property
    def completed(self) -> bool:
        return self.result is not None

    @property
    def can_skip(self) -> bool:
        return not self.completed and not self.is_last

    @property
    def can_go_back(self) -> bool:
        return not self.completed and self.index > 0


def _assistant(content: str) -> TranscriptMessage:
    return TranscriptMessage(role="assistant", content=content)


def _user(content: str) -> TranscriptMessage:
    return TranscriptMessage(role="user", content=content)


def normalize_answer(question: WizardQuestion, answer: str, lowercase: bool = True) -> str:
    text = answer.strip()
    return text.lower() if lowercase and question.lowercase else text


def answers_to_prompt(
    questions: tuple[WizardQuestion, ...],
    answers: dict[str, str],
    validator: ArgumentValidator,
    lowercase: bool = True,
) -> Result[Prompt, PromptError]:
    """
    Map recorded answers onto clauses in question order.

    Answers that are missing or ``skipped`` produce no clause.
    """
    prompt = Prompt()
    for question in questions:
        answer = answers.get(question.id)
        if not answer or answer == SKIPPED:
            continue
        clause = validator.validate(question.keyword, normalize_answer(question, answer, lowercase))
        if not is_successful(clause):
            return Failure(clause.failure())
        prompt = prompt.with_clause(clause.unwrap())
    return Success(prompt)


def advance(
    state: WizardState,
    answer: str,
    validator: ArgumentValidator,
    lowercase: bool = True,
    max_length: int = MAX_PROMPT_LENGTH,
) -> Result[WizardState, PromptError]:
    """
    Record an answer and move on, or complete on the last question.

    Args:
        state: Current state
        answer: Raw user answer
        validator: Checks the answer against the question's keyword
        lowercase: Lower-case answers for questions that ask for it
        max_length: Longest serialized prompt the completion may produce

    Returns:
        Next state (``result`` set when completed), or REQUIRED_ANSWER_MISSING /
        MALFORMED_ARGUMENT / INVALID_WIZARD_TRANSITION with the state untouched
    """
    if state.completed:
        return Failure(invalid_transition("session completed, waiting for reset"))

    question = state.current
    text = answer.strip()
    if not text:
        if question.required:
            return Failure(required_answer(question.id))
        recorded, shown = SKIPPED, "Skipped"
    else:
        check = validator.validate(question.keyword, normalize_answer(question, text, lowercase))
        if not is_successful(check):
            return Failure(check.failure())
        recorded, shown = text, text

    answers = {**state.answers, question.id: recorded}
    transcript = state.transcript + (_user(shown),)

    if not state.is_last:
        following = state.index + 1
        return Success(state.model_copy(update={
            "index": following,
            "answers": answers,
            "transcript": transcript + (_assistant(state.questions[following].text),),
        }))

    prompt = answers_to_prompt(state.questions, answers, validator, lowercase)
    if not is_successful(prompt):
        return Failure(prompt.failure())

    output = serialize(prompt.unwrap())
    if len(output) > max_length:
        return Failure(malformed(question.keyword, f"prompt would exceed {max_length} characters"))

    return Success(state.model_copy(update={
        "answers": answers,
        "transcript": transcript + (_assistant(f"Here's your ChimPrompt:\n{output}"),),
        "result": output,
    }))


def skip(state: WizardState) -> Result[WizardState, PromptError]:
    """Mark the current question skipped; the last question cannot be skipped."""
    if state.completed:
        return Failure(invalid_transition("session completed, waiting for reset"))
    if state.is_last:
        return Failure(invalid_transition("the last question cannot be skipped"))

    following = state.index + 1
    return Success(state.model_copy(update={
        "index": following,
        "answers": {**state.answers, state.current.id: SKIPPED},
        "transcript": state.transcript + (
            _user("Skipped"),
            _assistant(state.questions[following].text),
        ),
    }))


def back(state: WizardState) -> Result[WizardState, PromptError]:
    """Return to the previous question; earlier answers are kept."""
    if state.completed:
        return Failure(invalid_transition("session completed, waiting for reset"))
    if state.index == 0:
        return Failure(invalid_transition("already at the first question"))

    previous = state.index - 1
    return Success(state.model_copy(update={
        "index": previous,
        "transcript": state.transcript + (_assistant(state.questions[previous].text),),
    }))


def restart(questions: tuple[WizardQuestion, ...] = QUESTIONS) -> WizardState:
    """Fresh state for a new flow."""
    return WizardState.start(questions)
