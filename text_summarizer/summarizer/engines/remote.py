# text_summarizer/summarizer/engines/remote.py
"""
Remote summarization through a chat-completion provider.

One request per call, no retries. Transport and HTTP failures are raised so
the orchestrator can fall back to the extractive engine; content that is not
the requested JSON shape degrades to a plain-text summary instead.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx
import orjson

from text_summarizer.config import Settings
from text_summarizer.summarizer.errors import (
    CredentialMissing,
    ProviderError,
    TransportError,
)
from text_summarizer.summarizer.models import SummaryMode, SummaryResult

logger = logging.getLogger(__name__)

MAX_KEYWORDS = 12

MODE_INSTRUCTIONS: Dict[str, str] = {
    "concise": "a very short summary of one or two sentences",
    "standard": "a summary of one short paragraph",
    "detailed": "a detailed summary covering every main point in a few paragraphs",
}


class CompletionProvider(ABC):
    """Abstract base class for completion providers."""

    @abstractmethod
    async def complete(self, prompt: str, credential: str) -> str:
        """Return the completion text for a single user prompt."""
        pass


class ChatCompletionsProvider(CompletionProvider):
    """OpenAI-compatible ``/chat/completions`` endpoint over httpx."""

    def __init__(
        self,
        api_url: str,
        model: str = "gpt-4o-mini",
        max_tokens: int = 600,
        temperature: float = 0.2,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the provider.

        Args:
            api_url: Full URL of the chat completions endpoint
            model: Model name sent with every request
            max_tokens: Completion token limit
            temperature: Sampling temperature
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.api_url = api_url
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ChatCompletionsProvider":
        return cls(
            api_url=settings.llm_api_url,
            model=settings.llm_model,
            max_tokens=settings.llm_max_tokens,
            temperature=settings.llm_temperature,
            timeout=settings.llm_timeout_seconds,
            transport=transport,
        )

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }

    async def complete(self, prompt: str, credential: str) -> str:
        """Send one completion request and return the message text."""
        headers = {"Authorization": f"Bearer {credential}"}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self.api_url, json=self.build_payload(prompt), headers=headers
                )
        except httpx.HTTPError as exc:
            raise TransportError(f"Completion request failed: {exc}") from exc

        if not response.is_success:
            logger.error(f"Provider returned HTTP {response.status_code}")
            raise ProviderError(response.status_code, response.text)

        content = extract_completion_text(response.content)
        if not content:
            raise ProviderError(response.status_code, "Completion contained no text")
        return content


def extract_completion_text(body: bytes) -> str:
    """Read ``choices[0].message.content`` or ``choices[0].text``."""
    try:
        data = orjson.loads(body)
    except orjson.JSONDecodeError:
        return body.decode("utf-8", errors="replace").strip()

    if not isinstance(data, dict):
        return ""
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return ""
    first = choices[0]
    message = first.get("message")
    if isinstance(message, dict) and message.get("content"):
        return str(message["content"])
    return str(first.get("text") or "")


def build_prompt(document: str, mode: SummaryMode) -> str:
    instruction = MODE_INSTRUCTIONS.get(mode, MODE_INSTRUCTIONS["standard"])
    return f"""Summarize the text below as {instruction}.

Respond with only a JSON object with these fields:
- "summary": the summary text
- "keywords": the most important keywords as one comma-separated string
- "highlights": an array of exactly 3 key sentences taken from the text

Text:
{document}"""


def _strip_code_fence(content: str) -> str:
    if "```json" in content:
        start = content.find("```json") + 7
        end = content.find("```", start)
        return content[start:end if end != -1 else None].strip()
    if "```" in content:
        start = content.find("```") + 3
        end = content.find("```", start)
        return content[start:end if end != -1 else None].strip()
    return content.strip()


def _as_string_list(value: Any, separator: str) -> List[str]:
    if isinstance(value, str):
        items = value.split(separator)
    elif isinstance(value, list):
        items = [str(item) for item in value if item is not None]
    else:
        return []
    return [item.strip() for item in items if item and item.strip()]


def parse_completion(content: str) -> SummaryResult:
    """
    Parse provider content into a summary result.

    Falls back to using the raw text as the summary when the content is not
    a JSON object.
    """
    try:
        payload = orjson.loads(_strip_code_fence(content))
    except orjson.JSONDecodeError:
        payload = None

    if not isinstance(payload, dict):
        logger.warning("Provider response was not a JSON object; using raw text")
        return SummaryResult(summary=content.strip(), keywords=[], highlights=[])

    summary = payload.get("summary")
    return SummaryResult(
        summary=str(summary).strip() if summary is not None else "",
        keywords=_as_string_list(payload.get("keywords"), ",")[:MAX_KEYWORDS],
        highlights=_as_string_list(payload.get("highlights"), "\n"),
    )


class RemoteSummarizer:
    """Summarizes a document with a single provider completion."""

    name = "remote"

    def __init__(self, provider: CompletionProvider):
        self.provider = provider

    async def summarize(
        self, document: str, mode: SummaryMode, credential: Optional[str]
    ) -> SummaryResult:
        if not credential or not credential.strip():
            raise CredentialMissing()
        prompt = build_prompt(document, mode)
        content = await self.provider.complete(prompt, credential.strip())
        return parse_completion(content)
