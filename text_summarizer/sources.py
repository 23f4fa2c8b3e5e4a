"""Turn pasted text, uploaded files and web pages into summarizer input."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from text_summarizer.config import Settings

logger = logging.getLogger(__name__)

EXCLUDED_TAGS = ["script", "style", "iframe", "nav"]


class SourceFetchError(Exception):
    """A URL source could not be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Could not fetch {url}: {reason}")


def decode_upload(content: bytes) -> str:
    """Decode uploaded plain-text file content."""
    return content.decode("utf-8-sig", errors="replace")


def extract_paragraph_text(html: str) -> str:
    """
    Return the text of every ``<p>`` element separated by blank lines.

    Scripts, styles, iframes and navigation blocks are removed first so their
    nested paragraphs never leak into the result.
    """
    soup = BeautifulSoup(html, "html.parser")
    for element in soup.find_all(EXCLUDED_TAGS):
        if not element.decomposed:
            element.decompose()
    paragraphs = [p.get_text(" ", strip=True) for p in soup.find_all("p")]
    return "\n\n".join(text for text in paragraphs if text)


async def fetch_url_text(
    url: str,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    timeout = httpx.Timeout(settings.fetch_timeout_seconds)
    headers = {"User-Agent": settings.fetch_user_agent}
    try:
        async with httpx.AsyncClient(
            timeout=timeout, follow_redirects=True, transport=transport
        ) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning(f"URL source returned HTTP {exc.response.status_code}: {url}")
        raise SourceFetchError(url, f"HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        logger.warning(f"URL source request failed for {url}: {exc}")
        raise SourceFetchError(url, str(exc) or type(exc).__name__) from exc

    return extract_paragraph_text(response.text)
