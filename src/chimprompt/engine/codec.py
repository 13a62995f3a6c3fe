"""Canonical text form: ``*keyword* argument | *keyword* argument``."""

import re

from returns.pipeline import is_successful
from returns.result import Result, Success, Failure

from ..core.errors import PromptError, malformed
from ..grammar.models import Clause
from ..grammar.validator import ArgumentValidator
from .models import Prompt

SEPARATOR = " | "

MAX_PROMPT_LENGTH = 10_000

_SPLIT = re.compile(r"\s*\|\s*")
_CLAUSE = re.compile(r"^\*(?P<keyword>[^*\s]+)\*(?P<argument>.*)$", re.DOTALL)


def serialize(prompt: Prompt) -> str:
    """Join canonical clause forms in order; the empty prompt is ''."""
    return SEPARATOR.join(clause.canonical for clause in prompt.clauses)


def parse_clause(segment: str, validator: ArgumentValidator) -> Result[Clause, PromptError]:
    """Parse one ``*keyword* argument`` segment."""
    match = _CLAUSE.match(segment.strip())
    if match is None:
        return Failure(malformed(None, f"expected '*keyword* argument', got '{segment.strip()}'"))
    return validator.validate(match.group("keyword"), match.group("argument").strip())


def parse(text: str, validator: ArgumentValidator | None = None) -> Result[Prompt, PromptError]:
    """
    Parse canonical text into a prompt.

    Args:
        text: Pipe-delimited ChimPrompt
        validator: Argument validator (default registry if omitted)

    Returns:
        Prompt with clauses in textual order, or the first error pinned to
        its clause position
    """
    validator = validator or ArgumentValidator()
    if not text.strip():
        return Success(Prompt())

    clauses: list[Clause] = []
    for position, segment in enumerate(_SPLIT.split(text.strip())):
        if not segment.strip():
            return Failure(malformed(None, "empty clause").at(position))
        result = parse_clause(segment, validator)
        if not is_successful(result):
            return Failure(result.failure().at(position))
        clauses.append(result.unwrap())

    return Success(Prompt(clauses=tuple(clauses)))
