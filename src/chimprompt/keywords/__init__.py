"""
Keyword Registry
Every ChimPrompt keyword, its grammar and shortcut.
"""

from .types import ArgumentRules, ArgumentShape, KeywordDefinition, NumericRule, Shortcut
from .registry import KEYWORDS, KeywordRegistry, get_registry

__all__ = [
    "ArgumentRules",
    "ArgumentShape",
    "KeywordDefinition",
    "NumericRule",
    "Shortcut",
    "KEYWORDS",
    "KeywordRegistry",
    "get_registry",
]
