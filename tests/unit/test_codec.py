"""Tests for canonical parse/serialize."""

import pytest
from hypothesis import given, strategies as st
from returns.pipeline import is_successful

from chimprompt.core import ErrorKind
from chimprompt.engine import Prompt, PromptAssembler, parse, serialize
from chimprompt.keywords import KEYWORDS


@pytest.mark.unit
def test_parse_two_clauses_in_order(validator):
    prompt = parse("*in* swift | *for* iphone", validator).unwrap()

    assert prompt.keywords == ("in", "for")
    assert prompt.clauses[0].argument.value == "swift"
    assert serialize(prompt) == "*in* swift | *for* iphone"


@pytest.mark.unit
def test_empty_text_is_empty_prompt(validator):
    assert parse("", validator).unwrap() == Prompt()
    assert parse("   ", validator).unwrap() == Prompt()
    assert serialize(Prompt()) == ""


@pytest.mark.unit
def test_parse_normalizes_incidental_whitespace(validator):
    prompt = parse("  *in*   swift|*for* iphone  ", validator).unwrap()
    assert serialize(prompt) == "*in* swift | *for* iphone"


@pytest.mark.unit
def test_parse_keeps_duplicates_in_order(validator):
    """Parsing never reorders or merges clauses."""
    prompt = parse("*with* fire edges | *in* swift | *with* glow", validator).unwrap()
    assert prompt.keywords == ("with", "in", "with")


@pytest.mark.unit
def test_parse_sample(sample_prompt_text, validator):
    prompt = parse(sample_prompt_text, validator).unwrap()

    assert len(prompt) == 8
    assert prompt.clauses[4].argument.relation == "within-left"
    assert prompt.clauses[5].argument.get("start") == "3; appear"
    assert prompt.clauses[7].argument.indices == (39, 45)
    assert serialize(prompt) == sample_prompt_text


@pytest.mark.unit
def test_parse_unknown_keyword_reports_position(validator):
    result = parse("*in* swift | *teleport* mars", validator)

    assert not is_successful(result)
    err = result.failure()
    assert err.kind is ErrorKind.UNKNOWN_KEYWORD
    assert err.position == 1
    assert "clause 2" in str(err)


@pytest.mark.unit
@pytest.mark.parametrize("text", [
    "in swift",
    "*in swift",
    "* in* swift",
    "*in* swift | | *for* iphone",
    "*in* swift |",
])
def test_parse_malformed_clause(text, validator):
    result = parse(text, validator)
    assert not is_successful(result)
    assert result.failure().kind is ErrorKind.MALFORMED_ARGUMENT


@pytest.mark.unit
def test_parse_invalid_argument(validator):
    err = parse("*context* 39 | *nextto* sideways (x)", validator).failure()

    assert err.keyword == "nextto"
    assert err.position == 1


@pytest.mark.unit
def test_keyword_case_is_canonicalized(validator):
    prompt = parse("*IN* swift", validator).unwrap()
    assert serialize(prompt) == "*in* swift"


# ============================================================================
# Round trip
# ============================================================================

EXAMPLE_CLAUSES = [
    (definition.id, example.split("* ", 1)[1])
    for definition in KEYWORDS
    for example in definition.examples
]


@given(st.lists(st.sampled_from(EXAMPLE_CLAUSES), max_size=12))
def test_roundtrip_property(pairs):
    """Property test: parse(serialize(P)) is equivalent to P."""
    assembler = PromptAssembler()
    for keyword, argument in pairs:
        assert is_successful(assembler.append_or_replace(keyword, argument))

    original = assembler.prompt
    reparsed = parse(serialize(original)).unwrap()

    assert reparsed.equivalent(original)
    assert serialize(reparsed) == serialize(original)


@given(st.lists(
    st.tuples(
        st.sampled_from(["in", "for", "create", "from", "maybe", "with", "without"]),
        st.text(min_size=1, max_size=40).filter(lambda s: s.strip() and "|" not in s),
    ),
    max_size=8,
))
def test_roundtrip_free_text_property(pairs):
    """Property test: free-text single tokens survive the round trip."""
    assembler = PromptAssembler()
    for keyword, argument in pairs:
        assembler.append_or_replace(keyword, argument)

    reparsed = parse(serialize(assembler.prompt)).unwrap()
    assert reparsed.equivalent(assembler.prompt)
