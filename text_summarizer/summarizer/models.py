from __future__ import annotations

"""Domain models shared across summarization strategies."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Literal, Optional


SummaryMode = Literal["concise", "standard", "detailed"]
StrategyOption = Literal["local", "remote"]


@dataclass(frozen=True, slots=True)
class SentenceSpan:
    text: str
    start: int


@dataclass(slots=True)
class ScoredSentence:
    span: SentenceSpan
    score: float


@dataclass(frozen=True, slots=True)
class SummaryResult:
    summary: str
    keywords: List[str] = field(default_factory=list)
    highlights: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class StrategyPreference:
    strategy: StrategyOption = "local"
    credential: Optional[str] = None

    @property
    def has_credential(self) -> bool:
        return bool(self.credential and self.credential.strip())


class SummarizationOutcome(str, Enum):
    """Which path of the orchestrator produced a result."""

    LOCAL = "local"
    LOCAL_NO_CREDENTIAL = "local_no_credential"
    REMOTE = "remote"
    REMOTE_FALLBACK = "remote_fallback"

    @property
    def engine(self) -> StrategyOption:
        return "remote" if self is SummarizationOutcome.REMOTE else "local"


@dataclass(frozen=True, slots=True)
class SummarizationRun:
    result: SummaryResult
    outcome: SummarizationOutcome
    error: Optional[str] = None
