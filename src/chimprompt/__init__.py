"""
ChimPrompt
Keyword-tagged mini-language for UI design intents, with a validating
grammar and an interactive authoring engine.
"""

from .core import ErrorKind, PromptError, create_container, get_settings
from .keywords import ArgumentShape, KeywordDefinition, KeywordRegistry, get_registry
from .grammar import ArgumentValidator, Clause, validate
from .engine import Composer, Prompt, PromptAssembler, WizardSession, WizardState, parse, serialize

__version__ = "1.0.0"

__all__ = [
    "ErrorKind",
    "PromptError",
    "create_container",
    "get_settings",
    "ArgumentShape",
    "KeywordDefinition",
    "KeywordRegistry",
    "get_registry",
    "ArgumentValidator",
    "Clause",
    "validate",
    "Composer",
    "Prompt",
    "PromptAssembler",
    "WizardSession",
    "WizardState",
    "parse",
    "serialize",
]
