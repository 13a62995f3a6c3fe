"""Parsed argument payloads, one model per argument shape."""

from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field

from ..keywords.types import KeywordDefinition


class Payload(BaseModel):
    """Base for parsed arguments (immutable)."""

    model_config = ConfigDict(frozen=True)


class SingleToken(Payload):
    kind: Literal["single-token"] = "single-token"
    value: str


class TokenPair(Payload):
    """One or two parts; ``index`` holds the numeric part when the keyword needs one."""

    kind: Literal["token-pair"] = "token-pair"
    parts: tuple[str, ...]
    index: int | None = None


class IndexRange(Payload):
    """One index, or two joined by ``;`` (list) or ``to`` (span)."""

    kind: Literal["index-range"] = "index-range"
    indices: tuple[int, ...]
    separator: Literal[";", "to"] | None = None

    @property
    def is_span(self) -> bool:
        return self.separator == "to"


class IdReference(Payload):
    kind: Literal["id-reference"] = "id-reference"
    handle: str
    bracketed: bool = False


class KeyedList(Payload):
    """Ordered ``key(value)`` entries; values are opaque text."""

    kind: Literal["keyed-list"] = "keyed-list"
    entries: tuple[tuple[str, str], ...]

    def get(self, key: str) -> str | None:
        for name, value in self.entries:
            if name == key:
                return value
        return None

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.entries)


class VariantPair(Payload):
    """Plain segments plus optional light/dark variants."""

    kind: Literal["variant-pair"] = "variant-pair"
    base: tuple[str, ...] = ()
    light: str | None = None
    dark: str | None = None


class DelimitedName(Payload):
    """A ``[name]`` or ``(name)`` reference, optionally after member segments."""

    kind: Literal["delimited-name"] = "delimited-name"
    name: str
    delimiter: Literal["[]", "()"]
    members: tuple[str, ...] = ()


class PositionalReference(Payload):
    kind: Literal["positional-reference"] = "positional-reference"
    direction: str
    target: str
    within: bool = False

    @property
    def relation(self) -> str:
        """Direction qualified by ``within``, e.g. ``within-left``."""
        return f"within-{self.direction}" if self.within else self.direction


Argument = Annotated[
    Union[
        SingleToken,
        TokenPair,
        IndexRange,
        IdReference,
        KeyedList,
        VariantPair,
        DelimitedName,
        PositionalReference,
    ],
    Field(discriminator="kind"),
]


class Clause(BaseModel):
    """One ``*keyword* argument`` unit of a prompt."""

    model_config = ConfigDict(frozen=True)

    keyword: KeywordDefinition
    raw_argument: str
    argument: Argument

    @property
    def keyword_id(self) -> str:
        return self.keyword.id

    @property
    def canonical(self) -> str:
        """Canonical textual form."""
        return f"*{self.keyword.id}* {self.raw_argument.strip()}"

    def equivalent(self, other: "Clause") -> bool:
        """Same keyword and same parsed value, ignoring raw whitespace."""
        return self.keyword.id == other.keyword.id and self.argument == other.argument
