"""Exception hierarchy for the summarization engine."""

from __future__ import annotations

from typing import Optional


class SummarizerError(Exception):
    """Base class for every error raised by the summarizer."""


class InputEmpty(SummarizerError, ValueError):
    """The document contains no text to summarize."""

    def __init__(self, message: str = "No text to summarize.") -> None:
        super().__init__(message)


class RemoteSummarizerError(SummarizerError):
    """Remote strategy failure; always recovered by falling back to local."""


class CredentialMissing(RemoteSummarizerError):
    def __init__(self, message: str = "No credential supplied for the remote provider.") -> None:
        super().__init__(message)


class TransportError(RemoteSummarizerError):
    """The request to the completion provider could not be completed."""


class ProviderError(RemoteSummarizerError):
    """The completion provider answered with a non-success status."""

    def __init__(self, status_code: Optional[int], body: str) -> None:
        self.status_code = status_code
        self.body = body
        if status_code is None:
            super().__init__(f"Provider error: {body}")
        else:
            super().__init__(f"Provider returned HTTP {status_code}: {body}")
