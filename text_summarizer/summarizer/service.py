"""Strategy selection and local fallback for summarization requests."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from text_summarizer.config import Settings, get_settings
from text_summarizer.summarizer.engines.extractive import ExtractiveEngine
from text_summarizer.summarizer.engines.remote import (
    ChatCompletionsProvider,
    RemoteSummarizer,
)
from text_summarizer.summarizer.errors import InputEmpty, RemoteSummarizerError
from text_summarizer.summarizer.models import (
    StrategyPreference,
    SummarizationOutcome,
    SummarizationRun,
    SummaryMode,
    SummaryResult,
)

logger = logging.getLogger(__name__)


def validate_document(document: Optional[str]) -> str:
    if document is None or not document.strip():
        raise InputEmpty()
    return document


class SummarizationOrchestrator:
    """
    Chooses between the extractive and remote strategies.

    Paths:
      * ``local`` preference runs the extractive engine.
      * ``remote`` without a credential runs the extractive engine silently.
      * ``remote`` with a credential calls the provider and falls back to the
        extractive engine if the call raises.

    Only ``InputEmpty`` ever reaches the caller.
    """

    def __init__(
        self,
        local: Optional[ExtractiveEngine] = None,
        remote: Optional[RemoteSummarizer] = None,
    ) -> None:
        self.local = local or ExtractiveEngine()
        self.remote = remote

    async def run(
        self,
        document: str,
        mode: SummaryMode,
        preference: Optional[StrategyPreference] = None,
    ) -> SummarizationRun:
        document = validate_document(document)
        preference = preference or StrategyPreference()

        if preference.strategy != "remote":
            return SummarizationRun(
                result=self.local.summarize(document, mode),
                outcome=SummarizationOutcome.LOCAL,
            )

        if not preference.has_credential or self.remote is None:
            logger.debug("No credential for remote summarization, using local engine")
            return SummarizationRun(
                result=self.local.summarize(document, mode),
                outcome=SummarizationOutcome.LOCAL_NO_CREDENTIAL,
            )

        try:
            result = await self.remote.summarize(document, mode, preference.credential)
        except RemoteSummarizerError as exc:
            logger.warning(f"Remote summarization failed, falling back to local: {exc}")
            error = str(exc)
        except Exception as exc:
            logger.warning(
                f"Unexpected remote summarization error, falling back to local: {exc}"
            )
            error = f"{type(exc).__name__}: {exc}"
        else:
            logger.info(f"Remote summarization succeeded ({mode})")
            return SummarizationRun(result=result, outcome=SummarizationOutcome.REMOTE)

        return SummarizationRun(
            result=self.local.summarize(document, mode),
            outcome=SummarizationOutcome.REMOTE_FALLBACK,
            error=error,
        )

    async def summarize(
        self,
        document: str,
        mode: SummaryMode,
        preference: Optional[StrategyPreference] = None,
    ) -> SummaryResult:
        run = await self.run(document, mode, preference)
        return run.result


def build_orchestrator(settings: Settings) -> SummarizationOrchestrator:
    provider = ChatCompletionsProvider.from_settings(settings)
    return SummarizationOrchestrator(remote=RemoteSummarizer(provider))


@lru_cache
def get_orchestrator() -> SummarizationOrchestrator:
    """Orchestrator wired to the provider configured in settings."""
    return build_orchestrator(get_settings())
