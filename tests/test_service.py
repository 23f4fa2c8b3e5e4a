import json

import httpx
import pytest

from text_summarizer.summarizer.engines.extractive import ExtractiveEngine
from text_summarizer.summarizer.engines.remote import (
    ChatCompletionsProvider,
    CompletionProvider,
    RemoteSummarizer,
)
from text_summarizer.summarizer.errors import InputEmpty, TransportError
from text_summarizer.summarizer.models import (
    StrategyPreference,
    SummarizationOutcome,
)
from text_summarizer.summarizer.service import SummarizationOrchestrator


class RecordingProvider(CompletionProvider):
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = 0

    async def complete(self, prompt, credential):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.content


def _orchestrator(provider):
    return SummarizationOrchestrator(remote=RemoteSummarizer(provider))


@pytest.mark.anyio
async def test_local_preference_runs_extractive_engine(article):
    provider = RecordingProvider(content="unused")
    run = await _orchestrator(provider).run(article, "standard", StrategyPreference("local"))
    assert run.outcome is SummarizationOutcome.LOCAL
    assert run.result == ExtractiveEngine().summarize(article, "standard")
    assert provider.calls == 0


@pytest.mark.anyio
async def test_default_preference_is_local(article):
    run = await SummarizationOrchestrator().run(article, "concise")
    assert run.outcome is SummarizationOutcome.LOCAL


@pytest.mark.anyio
@pytest.mark.parametrize("credential", [None, "", "   "])
async def test_remote_without_credential_matches_local(article, credential):
    provider = RecordingProvider(content="unused")
    orchestrator = _orchestrator(provider)
    remote_run = await orchestrator.run(
        article, "detailed", StrategyPreference("remote", credential)
    )
    local_result = await orchestrator.summarize(article, "detailed", StrategyPreference("local"))
    assert remote_run.outcome is SummarizationOutcome.LOCAL_NO_CREDENTIAL
    assert remote_run.result == local_result
    assert remote_run.error is None
    assert provider.calls == 0


@pytest.mark.anyio
async def test_remote_success_returns_provider_result(article):
    content = json.dumps({"summary": "Solar grows.", "keywords": "solar", "highlights": ["A."]})
    provider = RecordingProvider(content=content)
    run = await _orchestrator(provider).run(
        article, "standard", StrategyPreference("remote", "sk-test")
    )
    assert run.outcome is SummarizationOutcome.REMOTE
    assert run.outcome.engine == "remote"
    assert run.result.summary == "Solar grows."
    assert provider.calls == 1


@pytest.mark.anyio
async def test_remote_degraded_parse_does_not_fall_back(article):
    provider = RecordingProvider(content="not json at all")
    run = await _orchestrator(provider).run(
        article, "standard", StrategyPreference("remote", "sk-test")
    )
    assert run.outcome is SummarizationOutcome.REMOTE
    assert run.result.summary == "not json at all"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "error",
    [TransportError("timed out"), RuntimeError("boom")],
)
async def test_remote_failure_falls_back_to_local(article, error):
    provider = RecordingProvider(error=error)
    run = await _orchestrator(provider).run(
        article, "standard", StrategyPreference("remote", "sk-test")
    )
    assert run.outcome is SummarizationOutcome.REMOTE_FALLBACK
    assert run.outcome.engine == "local"
    assert run.result == ExtractiveEngine().summarize(article, "standard")
    assert run.error


@pytest.mark.anyio
async def test_provider_http_error_falls_back_to_local(article):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="upstream exploded")

    provider = ChatCompletionsProvider(
        api_url="https://llm.test/v1/chat/completions",
        transport=httpx.MockTransport(handler),
    )
    result = await _orchestrator(provider).summarize(
        article, "concise", StrategyPreference("remote", "sk-test")
    )
    assert result == ExtractiveEngine().summarize(article, "concise")


@pytest.mark.anyio
@pytest.mark.parametrize("document", ["", "   \n\t "])
async def test_empty_document_raises_input_empty(document):
    provider = RecordingProvider(content="unused")
    with pytest.raises(InputEmpty):
        await _orchestrator(provider).run(
            document, "standard", StrategyPreference("remote", "sk-test")
        )
    assert provider.calls == 0


@pytest.mark.anyio
@pytest.mark.parametrize("document", ["!! ", "...\n"])
async def test_punctuation_only_document_is_summarized(document):
    result = await SummarizationOrchestrator().summarize(document, "standard")
    assert result.summary == document.strip()
    assert len(result.highlights) == 1
