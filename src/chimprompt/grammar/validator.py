"""Argument validation - keyword payload to typed clause."""

import re
from typing import Callable

from returns.pipeline import is_successful
from returns.result import Result, Success, Failure

from ..core.errors import PromptError, duplicate_key, malformed
from ..keywords.registry import KeywordRegistry, get_registry
from ..keywords.types import ArgumentShape, KeywordDefinition, NumericRule
from .models import (
    Clause,
    DelimitedName,
    IdReference,
    IndexRange,
    KeyedList,
    Payload,
    PositionalReference,
    SingleToken,
    TokenPair,
    VariantPair,
)
from .segments import split_call, split_on_word, split_segments

CLAUSE_SEPARATOR = "|"

DIRECTIONS = frozenset({
    "left", "right", "above", "below",
    "top", "bottom", "center",
    "top-left", "top-center", "top-right",
    "center-left", "center-right",
    "bottom-left", "bottom-center", "bottom-right",
})

_INDEX = re.compile(r"^\d+$")
_HANDLE = re.compile(r"^[A-Za-z0-9_-]+$")
_VARIANTS = ("light", "dark")
_VARIANT_CALL = re.compile(r"\b(?:light|dark)\s*\(", re.IGNORECASE)
_POSITIONAL = re.compile(r"^(?:(within)\s+)?([^()]+?)\s*\((.*)\)$", re.IGNORECASE | re.DOTALL)

ShapeParser = Callable[[str, KeywordDefinition], Result[Payload, PromptError]]


class ArgumentValidator:
    """
    Validates keyword arguments against their declared shape.

    Pure: no logging, no state. Either a fully parsed clause or a single
    error naming the keyword and the reason.
    """

    def __init__(self, registry: KeywordRegistry | None = None):
        self.registry = registry or get_registry()
        self._parsers: dict[ArgumentShape, ShapeParser] = {
            ArgumentShape.SINGLE_TOKEN: self._single_token,
            ArgumentShape.TOKEN_PAIR: self._token_pair,
            ArgumentShape.INDEX_RANGE: self._index_range,
            ArgumentShape.ID_REFERENCE: self._id_reference,
            ArgumentShape.KEYED_LIST: self._keyed_list,
            ArgumentShape.VARIANT_PAIR: self._variant_pair,
            ArgumentShape.BRACKETED_NAME: self._bracketed_name,
            ArgumentShape.PARENTHESIZED_NAME: self._parenthesized_name,
            ArgumentShape.POSITIONAL_REFERENCE: self._positional_reference,
        }

    def validate(self, keyword_id: str, raw_argument: str) -> Result[Clause, PromptError]:
        """
        Validate an argument for a keyword.

        Args:
            keyword_id: Keyword token
            raw_argument: Argument text as typed

        Returns:
            Parsed clause, or UNKNOWN_KEYWORD / MALFORMED_ARGUMENT / DUPLICATE_KEY
        """
        return self.registry.lookup(keyword_id).bind(
            lambda definition: self.validate_for(definition, raw_argument)
        )

    def validate_for(
        self, definition: KeywordDefinition, raw_argument: str
    ) -> Result[Clause, PromptError]:
        """Validate against an already resolved definition."""
        text = raw_argument.strip()
        if not text:
            return Failure(malformed(definition.id, "argument is empty"))
        if CLAUSE_SEPARATOR in text:
            return Failure(malformed(definition.id, "argument may not contain '|'"))

        parse = self._parsers[definition.shape]
        return parse(text, definition).map(
            lambda payload: Clause(keyword=definition, raw_argument=raw_argument, argument=payload)
        )

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def _single_token(self, text: str, definition: KeywordDefinition) -> Result[Payload, PromptError]:
        return Success(SingleToken(value=text))

    def _split_pair(
        self, text: str, definition: KeywordDefinition
    ) -> Result[tuple[tuple[str, ...], str | None], PromptError]:
        """One part, or exactly two split on ';' (or 'to' where parts are indices)."""
        split = split_segments(text)
        if not is_successful(split):
            return Failure(malformed(definition.id, split.failure()))

        parts = split.unwrap()
        separator = ";" if len(parts) > 1 else None
        if separator is None and definition.rules.numeric is not NumericRule.NONE:
            words = split_on_word(text)
            if len(words) > 1:
                parts, separator = words, "to"

        if len(parts) > 2:
            return Failure(malformed(definition.id, f"expected at most two parts, got {len(parts)}"))
        if any(not part for part in parts):
            return Failure(malformed(definition.id, "empty segment"))
        return Success((parts, separator))

    def _index_range(self, text: str, definition: KeywordDefinition) -> Result[Payload, PromptError]:
        def build(split: tuple[tuple[str, ...], str | None]) -> Result[Payload, PromptError]:
            parts, separator = split
            for part in parts:
                if not _INDEX.match(part):
                    return Failure(malformed(definition.id, f"non-numeric index '{part}'"))
            return Success(IndexRange(indices=tuple(int(p) for p in parts), separator=separator))

        return self._split_pair(text, definition).bind(build)

    def _token_pair(self, text: str, definition: KeywordDefinition) -> Result[Payload, PromptError]:
        numeric = definition.rules.numeric

        def build(split: tuple[tuple[str, ...], str | None]) -> Result[Payload, PromptError]:
            parts, _ = split
            checked = parts if numeric is NumericRule.ALL else parts[-1:]
            if numeric is not NumericRule.NONE:
                for part in checked:
                    if not _INDEX.match(part):
                        return Failure(malformed(definition.id, f"non-numeric index '{part}'"))
            index = int(parts[-1]) if numeric is not NumericRule.NONE else None
            return Success(TokenPair(parts=parts, index=index))

        return self._split_pair(text, definition).bind(build)

    def _id_reference(self, text: str, definition: KeywordDefinition) -> Result[Payload, PromptError]:
        if definition.rules.bracketed_alias and text.startswith("["):
            return self._delimited(text, definition, "[]", allow_members=False).map(
                lambda ref: IdReference(handle=ref.name, bracketed=True)
            )
        if not _HANDLE.match(text):
            return Failure(malformed(definition.id, f"expected an alphanumeric handle, got '{text}'"))
        return Success(IdReference(handle=text))

    def _keyed_list(self, text: str, definition: KeywordDefinition) -> Result[Payload, PromptError]:
        split = split_segments(text)
        if not is_successful(split):
            return Failure(malformed(definition.id, split.failure()))

        entries: list[tuple[str, str]] = []
        seen: set[str] = set()
        for segment in split.unwrap():
            if not segment:
                return Failure(malformed(definition.id, "empty segment"))
            call = split_call(segment)
            if call is None:
                return Failure(malformed(definition.id, f"expected key(value), got '{segment}'"))
            key, value = call[0].lower(), call[1].strip()
            if not value:
                return Failure(malformed(definition.id, f"empty value for '{key}'"))
            if key in seen:
                return Failure(duplicate_key(definition.id, key))
            seen.add(key)
            entries.append((key, value))

        return Success(KeyedList(entries=tuple(entries)))

    def _variant_pair(self, text: str, definition: KeywordDefinition) -> Result[Payload, PromptError]:
        split = split_segments(text)
        if not is_successful(split):
            return Failure(malformed(definition.id, split.failure()))

        base: list[str] = []
        variants: dict[str, str] = {}
        for segment in split.unwrap():
            if not segment:
                return Failure(malformed(definition.id, "empty segment"))
            call = split_call(segment)
            if call is None or call[0].lower() not in _VARIANTS:
                # Plain values may hold balanced parens, e.g. rgb(0, 0, 0)
                if _VARIANT_CALL.search(segment):
                    return Failure(malformed(
                        definition.id, f"missing ';' between segments in '{segment}'"
                    ))
                base.append(segment)
                continue
            name, value = call[0].lower(), call[1].strip()
            if not value:
                return Failure(malformed(definition.id, f"empty {name}() variant"))
            if name in variants:
                return Failure(duplicate_key(definition.id, name))
            variants[name] = value

        if not definition.rules.mixed_segments:
            if variants and base:
                return Failure(malformed(definition.id, "cannot mix a plain value with light()/dark()"))
            if len(base) > 1:
                return Failure(malformed(definition.id, "expected one value or light(...)/dark(...)"))

        return Success(VariantPair(base=tuple(base), light=variants.get("light"), dark=variants.get("dark")))

    def _bracketed_name(self, text: str, definition: KeywordDefinition) -> Result[Payload, PromptError]:
        return self._delimited(text, definition, "[]", definition.rules.leading_members)

    def _parenthesized_name(self, text: str, definition: KeywordDefinition) -> Result[Payload, PromptError]:
        return self._delimited(text, definition, "()", definition.rules.leading_members)

    def _delimited(
        self, text: str, definition: KeywordDefinition, delimiter: str, allow_members: bool
    ) -> Result[DelimitedName, PromptError]:
        opener, closer = delimiter
        members: tuple[str, ...] = ()
        last = text

        if allow_members:
            split = split_segments(text)
            if not is_successful(split):
                return Failure(malformed(definition.id, split.failure()))
            *leading, last = split.unwrap()
            if any(not member for member in leading):
                return Failure(malformed(definition.id, "empty segment"))
            members = tuple(leading)

        if not last.startswith(opener):
            return Failure(malformed(definition.id, f"missing '{opener}' before name"))
        if not last.endswith(closer):
            return Failure(malformed(definition.id, f"missing '{closer}' after name"))

        inner = last[1:-1]
        if any(ch in inner for ch in "()[]"):
            return Failure(malformed(definition.id, "mismatched delimiters"))
        name = inner.strip()
        if not name:
            return Failure(malformed(definition.id, "empty name"))

        return Success(DelimitedName(name=name, delimiter=delimiter, members=members))

    def _positional_reference(
        self, text: str, definition: KeywordDefinition
    ) -> Result[Payload, PromptError]:
        match = _POSITIONAL.match(text)
        if match is None:
            if "(" not in text:
                return Failure(malformed(definition.id, "missing '(' around target"))
            if not text.endswith(")"):
                return Failure(malformed(definition.id, "missing ')' after target"))
            return Failure(malformed(definition.id, "expected 'direction (target)'"))

        within, raw_direction, raw_target = match.groups()
        direction = re.sub(r"[\s-]+", "-", raw_direction.strip().lower())
        if direction not in DIRECTIONS:
            return Failure(malformed(definition.id, f"unknown direction '{raw_direction.strip()}'"))

        target = raw_target.strip()
        if not target:
            return Failure(malformed(definition.id, "empty target"))
        if any(ch in target for ch in "()"):
            return Failure(malformed(definition.id, "mismatched delimiters"))

        return Success(PositionalReference(direction=direction, target=target, within=within is not None))


_default_validator: ArgumentValidator | None = None


def validate(keyword_id: str, raw_argument: str) -> Result[Clause, PromptError]:
    """Validate with the default registry."""
    global _default_validator
    if _default_validator is None:
        _default_validator = ArgumentValidator()
    return _default_validator.validate(keyword_id, raw_argument)
