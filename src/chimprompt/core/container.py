"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ..engine.assembler import PromptAssembler
from ..engine.composer import Composer
from ..engine.scheduler import Scheduler, ThreadingScheduler
from ..engine.session import WizardSession
from ..grammar.validator import ArgumentValidator
from ..keywords.registry import KeywordRegistry, get_registry
from ..monitoring import metrics_collector
from ..store.memory import InMemorySnippetStore, SnippetStore
from .config import Settings, get_settings
from .logging_config import configure_logging


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_registry(self) -> KeywordRegistry:
        """Provide the process-wide keyword registry."""
        return get_registry()

    @singleton
    @provider
    def provide_validator(self, registry: KeywordRegistry) -> ArgumentValidator:
        return ArgumentValidator(registry)

    @singleton
    @provider
    def provide_scheduler(self) -> Scheduler:
        return ThreadingScheduler()

    @singleton
    @provider
    def provide_snippet_store(self) -> SnippetStore:
        return InMemorySnippetStore()

    @provider
    def provide_assembler(self, validator: ArgumentValidator) -> PromptAssembler:
        """Fresh assembler per authoring context."""
        return PromptAssembler(validator, max_length=self.settings.max_prompt_length)

    @provider
    def provide_session(self, validator: ArgumentValidator, scheduler: Scheduler) -> WizardSession:
        """Fresh wizard session per authoring context."""
        return WizardSession(
            validator,
            scheduler,
            reset_delay=self.settings.reset_delay_seconds,
            lowercase=self.settings.lowercase_answers,
            max_length=self.settings.max_prompt_length,
        )

    @provider
    def provide_composer(self, assembler: PromptAssembler, session: WizardSession) -> Composer:
        return Composer(assembler, session)


def create_container(settings: Settings | None = None, configure: bool = True) -> Injector:
    """
    Create configured injector.

    Args:
        settings: Engine settings (environment if omitted)
        configure: Also configure logging and metrics from settings
    """
    settings = settings or get_settings()
    if configure:
        configure_logging(settings.log_level, settings.json_logs)
        metrics_collector.enabled = settings.metrics_enabled
    return Injector([CoreModule(settings)])
