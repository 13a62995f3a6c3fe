"""Tests for the pure wizard transitions."""

import pytest
from returns.pipeline import is_successful

from chimprompt.core import ErrorKind
from chimprompt.engine import QUESTIONS, SKIPPED, WizardQuestion, WizardState, advance, back, restart, skip


def answer_all(state, answers, validator):
    for answer in answers:
        state = advance(state, answer, validator).unwrap()
    return state


@pytest.mark.unit
def test_start_shows_first_question():
    state = WizardState.start()

    assert state.index == 0
    assert state.current.id == "platform"
    assert state.transcript[0].role == "assistant"
    assert state.transcript[0].content == QUESTIONS[0].text
    assert not state.completed


@pytest.mark.unit
def test_start_requires_questions():
    with pytest.raises(ValueError):
        WizardState.start(())


@pytest.mark.unit
def test_advance_records_answer(validator):
    state = advance(WizardState.start(), "Swift", validator).unwrap()

    assert state.index == 1
    assert state.answers == {"platform": "Swift"}
    assert [m.role for m in state.transcript] == ["assistant", "user", "assistant"]
    assert state.transcript[-1].content == QUESTIONS[1].text


@pytest.mark.unit
def test_required_answer_missing(validator):
    """Blank answer on a required question keeps the index."""
    start = WizardState.start()
    result = advance(start, "   ", validator)

    assert result.failure().kind is ErrorKind.REQUIRED_ANSWER_MISSING
    assert start.index == 0


@pytest.mark.unit
def test_invalid_answer_rejected(validator):
    questions = (WizardQuestion(id="where", text="Where?", keyword="nextto"),)
    result = advance(WizardState.start(questions), "sideways (bar)", validator)

    assert result.failure().kind is ErrorKind.MALFORMED_ARGUMENT


@pytest.mark.unit
def test_full_flow(validator, wizard_answers):
    """Last answer is included in the result."""
    state = answer_all(WizardState.start(), wizard_answers, validator)

    assert state.completed
    assert state.result == (
        "*in* swift | *for* iphone | *create* search bar | *from* instagram | *background* ffffffff"
    )
    assert state.transcript[-1].content.startswith("Here's your ChimPrompt:\n*in* swift")


@pytest.mark.unit
def test_optional_last_question_blank(validator, wizard_answers):
    state = answer_all(WizardState.start(), wizard_answers[:4] + [""], validator)

    assert state.answers["background"] == SKIPPED
    assert state.result == "*in* swift | *for* iphone | *create* search bar | *from* instagram"


@pytest.mark.unit
def test_background_keeps_case(validator, wizard_answers):
    state = answer_all(WizardState.start(), wizard_answers[:4] + ["FFAA00"], validator)
    assert state.result.endswith("*background* FFAA00")


@pytest.mark.unit
def test_skip_omits_clause(validator):
    state = skip(WizardState.start()).unwrap()
    assert state.answers == {"platform": SKIPPED}
    assert state.transcript[-2].content == "Skipped"

    state = answer_all(state, ["iPhone", "Button", "WhatsApp", "000000"], validator)
    assert state.result == "*for* iphone | *create* button | *from* whatsapp | *background* 000000"


@pytest.mark.unit
def test_skip_rejected_on_last_question(validator, wizard_answers):
    state = answer_all(WizardState.start(), wizard_answers[:4], validator)

    assert state.is_last
    assert not state.can_skip
    result = skip(state)
    assert result.failure().kind is ErrorKind.INVALID_WIZARD_TRANSITION


@pytest.mark.unit
def test_back_rejected_at_first_question():
    result = back(WizardState.start())
    assert result.failure().kind is ErrorKind.INVALID_WIZARD_TRANSITION


@pytest.mark.unit
def test_back_keeps_answers(validator):
    state = advance(WizardState.start(), "Swift", validator).unwrap()
    state = back(state).unwrap()

    assert state.index == 0
    assert state.answers == {"platform": "Swift"}
    assert state.transcript[-1].content == QUESTIONS[0].text


@pytest.mark.unit
def test_back_then_overwrite(validator, wizard_answers):
    state = advance(WizardState.start(), "Swift", validator).unwrap()
    state = back(state).unwrap()
    state = answer_all(state, ["React"] + wizard_answers[1:], validator)

    assert state.result.startswith("*in* react | *for* iphone")


@pytest.mark.unit
def test_completed_rejects_transitions(validator, wizard_answers):
    state = answer_all(WizardState.start(), wizard_answers, validator)

    for result in (advance(state, "x", validator), skip(state), back(state)):
        assert not is_successful(result)
        assert result.failure().kind is ErrorKind.INVALID_WIZARD_TRANSITION


@pytest.mark.unit
def test_lowercase_can_be_disabled(validator, wizard_answers):
    state = WizardState.start()
    for answer in wizard_answers:
        state = advance(state, answer, validator, lowercase=False).unwrap()

    assert state.result.startswith("*in* Swift | *for* iPhone")


@pytest.mark.unit
def test_restart_with_custom_questions():
    questions = (WizardQuestion(id="style", text="Which style?", keyword="like"),)
    state = restart(questions)

    assert state.current.keyword == "like"
    assert state.is_last
    assert not state.can_skip
    assert not state.can_go_back


@pytest.mark.unit
def test_completion_respects_max_length(validator):
    """An over-long result fails on the last question without completing."""
    state = answer_all(WizardState.start(), ["a", "b", "c", "d"], validator)

    result = advance(state, "ffffffff", validator, max_length=40)

    assert result.failure().kind is ErrorKind.MALFORMED_ARGUMENT
    assert "exceed 40" in result.failure().reason
    assert not state.completed
    assert is_successful(advance(state, "", validator, max_length=40))
