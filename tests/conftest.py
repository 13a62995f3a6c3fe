"""Pytest configuration and fixtures."""

import os
from typing import Callable

import pytest

from chimprompt.core import get_settings
from chimprompt.engine import Composer, PromptAssembler, Scheduler, WizardSession
from chimprompt.grammar import ArgumentValidator
from chimprompt.keywords import KeywordRegistry
from chimprompt.store import InMemorySnippetStore


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['CHIM_LOG_LEVEL'] = 'DEBUG'
    os.environ['CHIM_METRICS_ENABLED'] = 'true'


# ============================================================================
# Scheduler Fake
# ============================================================================

class ManualCall:
    """Scheduled call that only runs when the test fires it."""

    def __init__(self, delay: float, callback: Callable[[], None]) -> None:
        self.delay = delay
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self, force: bool = False) -> None:
        """Run the callback; ``force`` simulates a timer that fired before cancel landed."""
        if (self.cancelled and not force) or self.fired:
            return
        self.fired = True
        self.callback()


class ManualScheduler(Scheduler):
    """Records scheduled calls instead of running them."""

    def __init__(self) -> None:
        self.calls: list[ManualCall] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualCall:
        call = ManualCall(delay, callback)
        self.calls.append(call)
        return call

    @property
    def pending(self) -> list[ManualCall]:
        return [c for c in self.calls if not c.cancelled and not c.fired]

    def fire_all(self) -> None:
        for call in list(self.calls):
            call.fire()


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def registry():
    """Keyword registry fixture."""
    return KeywordRegistry()


@pytest.fixture
def validator(registry):
    """Argument validator over the fixture registry."""
    return ArgumentValidator(registry)


@pytest.fixture
def assembler(validator):
    """Empty prompt assembler."""
    return PromptAssembler(validator)


# ============================================================================
# Wizard Fixtures
# ============================================================================

@pytest.fixture
def scheduler():
    """Manual scheduler fake."""
    return ManualScheduler()


@pytest.fixture
def session(validator, scheduler):
    """Wizard session with a manual scheduler."""
    wizard_session = WizardSession(validator, scheduler, reset_delay=5.0)
    yield wizard_session
    wizard_session.close()


@pytest.fixture
def composer(assembler, session):
    """Authoring surface."""
    return Composer(assembler, session)


@pytest.fixture
def store():
    """Empty in-memory snippet store."""
    return InMemorySnippetStore()


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def wizard_answers():
    """Answers for the reference five-question flow."""
    return ["Swift", "iPhone", "Search Bar", "Instagram", "ffffffff"]


@pytest.fixture
def sample_prompt_text():
    """Canonical prompt touching several argument shapes."""
    return (
        "*in* swift | *for* iphone | *create* search bar | *from* instagram"
        " | *nextto* within left (search bar) | *animate* start(3; appear); end(5, fade out)"
        " | *background* light(ffffffff); dark(00000000) | *context* 39 to 45"
    )
