"""Prompt and wizard data models."""

from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

from ..grammar.models import Clause


class Prompt(BaseModel):
    """Ordered, immutable sequence of clauses."""

    model_config = ConfigDict(frozen=True)

    clauses: tuple[Clause, ...] = Field(default_factory=tuple)

    def index_of(self, keyword_id: str) -> int | None:
        """Position of the first clause with this keyword."""
        for position, clause in enumerate(self.clauses):
            if clause.keyword.id == keyword_id:
                return position
        return None

    def with_clause(self, clause: Clause) -> "Prompt":
        """Replace the clause of the same keyword in place, else append."""
        position = self.index_of(clause.keyword.id)
        if position is None:
            return Prompt(clauses=self.clauses + (clause,))
        clauses = list(self.clauses)
        clauses[position] = clause
        return Prompt(clauses=tuple(clauses))

    def equivalent(self, other: "Prompt") -> bool:
        """Same keywords, same order, same parsed values."""
        return len(self.clauses) == len(other.clauses) and all(
            mine.equivalent(theirs) for mine, theirs in zip(self.clauses, other.clauses)
        )

    @property
    def keywords(self) -> tuple[str, ...]:
        return tuple(clause.keyword.id for clause in self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    def __bool__(self) -> bool:
        return bool(self.clauses)


class WizardQuestion(BaseModel):
    """One step of the guided flow, mapped onto a clause keyword."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    keyword: str
    required: bool = True
    lowercase: bool = True


class TranscriptMessage(BaseModel):
    """Display-only chat message."""

    model_config = ConfigDict(frozen=True)

    role: Literal["assistant", "user"]
    content: str = Field(..., min_length=1)
