"""
Keyword Registry
Static table of every ChimPrompt keyword with lookup and search.
"""

from functools import lru_cache
from typing import Iterable

from returns.result import Result, Success, Failure

from ..core.errors import PromptError, unknown_keyword
from .types import ArgumentRules, ArgumentShape, KeywordDefinition, NumericRule, Shortcut


def _keyword(
    id: str,
    shape: ArgumentShape,
    key: str,
    description: str,
    *examples: str,
    **rules: object,
) -> KeywordDefinition:
    return KeywordDefinition(
        id=id,
        shape=shape,
        description=description,
        shortcut=Shortcut(key=key),
        rules=ArgumentRules(**rules),
        examples=examples,
    )


S = ArgumentShape

KEYWORDS: tuple[KeywordDefinition, ...] = (
    _keyword("in", S.SINGLE_TOKEN, "Q",
             "For specifying the language you want the output to be in.",
             "*in* swift"),
    _keyword("for", S.SINGLE_TOKEN, "W",
             "For choosing the app platform you're building",
             "*for* apple phone"),
    _keyword("context", S.INDEX_RANGE, "E",
             "Allows you to reference code using index number shortcut.",
             "*context* 39", "*context* 39; 45", "*context* 39 to 45",
             numeric=NumericRule.ALL),
    _keyword("line", S.TOKEN_PAIR, "R",
             "For specifying what line the code should be in",
             "*line* 150", "*line* react; 150",
             numeric=NumericRule.LAST),
    _keyword("chimcontext", S.ID_REFERENCE, "T",
             "Allows you to reference code using code id",
             "*chimcontext* 4535hevne53354"),
    _keyword("prompt", S.ID_REFERENCE, "Y",
             "Load a local prompt name saved in library",
             "*prompt* saved1", "*prompt* [homepage]",
             bracketed_alias=True),
    _keyword("chimprompt", S.ID_REFERENCE, "U",
             "To load a public prompt name",
             "*chimprompt* richardssearchbar"),
    _keyword("spawn", S.TOKEN_PAIR, "I",
             "To create visually similar entire page from program",
             "*spawn* instagram/ home page; instagram.com"),
    _keyword("rare", S.SINGLE_TOKEN, "O",
             "Randomly creates a unique object",
             "*rare* search bar"),
    _keyword("create", S.SINGLE_TOKEN, "P",
             "For specifying the object in particular you want to achieve",
             "*create* search bar"),
    _keyword("from", S.SINGLE_TOKEN, "A",
             "For mimicking the appearance of an object from an already existing app",
             "*from* instagram/ search page"),
    _keyword("makeit", S.SINGLE_TOKEN, "S",
             "For selecting if its gonna be auto hiding (dynamic) or static",
             "*makeit* static"),
    _keyword("like", S.SINGLE_TOKEN, "D",
             "For mimicking the functionality of a similar object",
             "*like* snapchat/ explore page"),
    _keyword("but", S.SINGLE_TOKEN, "F",
             "For replacing abstract attributes and adding exact dimensions",
             "*but* fire edges that turn cold when inactive for 1 minute; top center; rectangle; 4:5; 35"),
    _keyword("with", S.SINGLE_TOKEN, "G",
             "For adding abstract attributes",
             "*with* fire edges"),
    _keyword("without", S.SINGLE_TOKEN, "H",
             "For removing abstract attributes",
             "*without* search icon on the end"),
    _keyword("nextto", S.POSITIONAL_REFERENCE, "J",
             "Reference position relative to an object",
             "*nextto* left (search bar)",
             "*nextto* within left (loading screen)",
             "*nextto* within bottom right (checkout page)",
             "*nextto* above (share sheet)",
             "*nextto* within below (chat screen)"),
    _keyword("blame", S.SINGLE_TOKEN, "K",
             "For specifying a problem you want to make sure doesn't occur",
             "*blame* instagram / search page"),
    _keyword("animate", S.KEYED_LIST, "L",
             "For adding an animation for when tapped and speed",
             "*animate* start(3; appear); end(5, fade out)"),
    _keyword("background", S.VARIANT_PAIR, "Z",
             "For the background colour",
             "*background* ffffffff", "*background* light(ffffffff); dark(00000000)"),
    _keyword("font", S.VARIANT_PAIR, "X",
             "For specifying what the font will be if applicable",
             "*font* aerial; center; ffffffff; 15",
             "*font* aerial; left; light(00000000); dark(ffffffff); 15",
             mixed_segments=True),
    _keyword("maybe", S.SINGLE_TOKEN, "C",
             "Allows you to describe what you want in your own words",
             "*maybe* snapchat search bar with a bit of instagram feel"),
    _keyword("then", S.TOKEN_PAIR, "V",
             "For replicating the same edits and using it to create multiple codes",
             "*then* loading screen; checkout page"),
    _keyword("forge", S.PARENTHESIZED_NAME, "B",
             "Save a configuration for a component",
             "*forge* instagram / search page; (ig bias)", "*forge* (ig bias)",
             leading_members=True),
    _keyword("mold", S.BRACKETED_NAME, "N",
             "Make multiple objects be part of a single page",
             "*mold* loading screen; checkout page; [home page]", "*mold* [home page]",
             leading_members=True),
    _keyword("jump", S.SINGLE_TOKEN, "M",
             "Auto arrange prompts in order of importance",
             "*jump* descending", "*jump* ascending", "*jump* reset"),
)


class KeywordRegistry:
    """
    Read-only registry of keyword definitions.
    Preserves insertion order for menu listing and search.
    """

    def __init__(self, definitions: Iterable[KeywordDefinition] = KEYWORDS):
        self._index: dict[str, KeywordDefinition] = {}
        self._shortcuts: dict[str, KeywordDefinition] = {}

        for definition in definitions:
            if definition.id in self._index:
                raise ValueError(f"Duplicate keyword: {definition.id}")
            key = definition.shortcut.key.upper()
            if key in self._shortcuts:
                raise ValueError(f"Shortcut {definition.shortcut} bound twice")
            self._index[definition.id] = definition
            self._shortcuts[key] = definition

    def lookup(self, keyword_id: str) -> Result[KeywordDefinition, PromptError]:
        """
        Resolve a keyword by id.

        Args:
            keyword_id: Keyword token, case-insensitive

        Returns:
            The definition, or an UNKNOWN_KEYWORD error
        """
        definition = self._index.get(keyword_id.strip().lower())
        if definition is None:
            return Failure(unknown_keyword(keyword_id))
        return Success(definition)

    def all(self) -> tuple[KeywordDefinition, ...]:
        """All definitions in insertion order."""
        return tuple(self._index.values())

    def search(self, query: str) -> tuple[KeywordDefinition, ...]:
        """Definitions whose id or description contains the query (case-insensitive)."""
        needle = query.strip().lower()
        if not needle:
            return self.all()
        return tuple(
            d for d in self._index.values()
            if needle in d.id or needle in d.description.lower()
        )

    def by_shortcut(self, key: str) -> KeywordDefinition | None:
        """Keyword bound to ``Tab + key``."""
        return self._shortcuts.get(key.upper())

    def complete(self, prefix: str) -> tuple[KeywordDefinition, ...]:
        """Autocomplete candidates for a partially typed keyword."""
        stem = prefix.strip().lstrip("*").lower()
        return tuple(d for d in self._index.values() if d.id.startswith(stem))

    def syntax_for(self, keyword_id: str) -> Result[str, PromptError]:
        """Canonical insertion syntax for a clause type."""
        return self.lookup(keyword_id).map(lambda d: d.syntax)

    def __contains__(self, keyword_id: str) -> bool:
        return keyword_id.strip().lower() in self._index

    def __len__(self) -> int:
        return len(self._index)


@lru_cache
def get_registry() -> KeywordRegistry:
    """Process-wide default registry."""
    return KeywordRegistry()
