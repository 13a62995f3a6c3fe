"""Prompt Assembler - ordered clause buffer for direct entry."""

from returns.pipeline import is_successful
from returns.result import Result, Success, Failure

from ..core.errors import PromptError, malformed
from ..core.logging_config import get_logger
from ..grammar.validator import ArgumentValidator
from ..monitoring import metrics_collector
from .codec import MAX_PROMPT_LENGTH, parse, serialize
from .models import Prompt

logger = get_logger(__name__)


class PromptAssembler:
    """
    Owns the prompt of one authoring context.

    Every mutation validates first; a failure leaves the prompt unchanged.
    """

    def __init__(
        self,
        validator: ArgumentValidator | None = None,
        max_length: int = MAX_PROMPT_LENGTH,
    ) -> None:
        self.validator = validator or ArgumentValidator()
        self.max_length = max_length
        self._prompt = Prompt()

    @property
    def prompt(self) -> Prompt:
        return self._prompt

    def append_or_replace(self, keyword_id: str, raw_argument: str) -> Result[Prompt, PromptError]:
        """
        Validate and place a clause.

        An existing clause with the same keyword is replaced in place;
        otherwise the clause is appended.

        Args:
            keyword_id: Keyword token
            raw_argument: Argument text as typed

        Returns:
            The updated prompt, or the validation error
        """
        result = self.validator.validate(keyword_id, raw_argument)
        if not is_successful(result):
            error = result.failure()
            logger.warning("clause_rejected", keyword=keyword_id, kind=error.kind.value, reason=error.reason)
            metrics_collector.record_clause(keyword_id, "error")
            metrics_collector.record_error(error.kind.value, "assembler")
            return Failure(error)

        clause = result.unwrap()
        updated = self._prompt.with_clause(clause)
        if len(serialize(updated)) > self.max_length:
            error = malformed(clause.keyword.id, f"prompt would exceed {self.max_length} characters")
            logger.warning("clause_rejected", keyword=clause.keyword.id, kind=error.kind.value, reason=error.reason)
            metrics_collector.record_clause(clause.keyword.id, "error")
            metrics_collector.record_error(error.kind.value, "assembler")
            return Failure(error)

        replaced = self._prompt.index_of(clause.keyword.id) is not None
        self._prompt = updated
        logger.debug("clause_replaced" if replaced else "clause_appended", keyword=clause.keyword.id)
        metrics_collector.record_clause(clause.keyword.id, "replaced" if replaced else "appended")
        return Success(updated)

    def load(self, text: str) -> Result[Prompt, PromptError]:
        """Replace the whole prompt with parsed text."""
        if len(text) > self.max_length:
            logger.warning("prompt_rejected", length=len(text), max_length=self.max_length)
            metrics_collector.record_parse("error")
            return Failure(malformed(None, f"prompt exceeds {self.max_length} characters"))

        result = parse(text, self.validator)
        if not is_successful(result):
            error = result.failure()
            logger.warning("prompt_rejected", kind=error.kind.value, reason=str(error))
            metrics_collector.record_parse("error")
            metrics_collector.record_error(error.kind.value, "codec")
            return result

        self._prompt = result.unwrap()
        metrics_collector.record_parse("success")
        logger.debug("prompt_loaded", clauses=len(self._prompt))
        return result

    def reset(self) -> None:
        """Back to the empty prompt."""
        self._prompt = Prompt()

    def serialize(self) -> str:
        return serialize(self._prompt)
