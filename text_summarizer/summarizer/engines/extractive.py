"""Extractive summarization engine implementation."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from text_summarizer.summarizer.models import (
    ScoredSentence,
    SentenceSpan,
    SummaryMode,
    SummaryResult,
)
from text_summarizer.summarizer.text import (
    STOPWORDS,
    build_frequencies,
    segment,
    tokenize,
    top_terms,
)

logger = logging.getLogger(__name__)


# mode -> (fraction of sentences kept, minimum count)
SENTENCE_RATIO_BY_MODE = {
    "concise": (0.03, 1),
    "standard": (0.08, 2),
    "detailed": (0.20, 3),
}

MAX_KEYWORDS = 12
LENGTH_BONUS_CAP = 2.0
LENGTH_BONUS_DIVISOR = 20


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_sentence(sentence: str, terms: Sequence[str]) -> float:
    """Term-overlap count plus a length bonus capped at 2."""
    term_set = set(terms)
    tokens = tokenize(sentence)
    overlap = sum(1 for token in tokens if token in term_set)
    return overlap + min(LENGTH_BONUS_CAP, len(tokens) / LENGTH_BONUS_DIVISOR)


def sentence_count_for_mode(total: int, mode: SummaryMode) -> int:
    try:
        ratio, minimum = SENTENCE_RATIO_BY_MODE[mode]
    except KeyError:
        raise ValueError(f"Unknown summary mode: {mode!r}") from None
    count = max(minimum, _round_half_up(total * ratio))
    return max(1, min(count, total))


def select_sentences(
    sentences: Sequence[SentenceSpan], terms: Sequence[str], mode: SummaryMode
) -> SummaryResult:
    """
    Pick the best-scoring sentences and return them in document order.

    Ties keep source order because the ranking sort is stable.
    """
    candidates = [span for span in sentences if span.text.strip()]
    scored = [
        ScoredSentence(span=span, score=score_sentence(span.text, terms))
        for span in candidates
    ]
    ranked = sorted(scored, key=lambda item: -item.score)

    keep = sentence_count_for_mode(len(candidates), mode)
    chosen = sorted(ranked[:keep], key=lambda item: item.span.start)
    highlights = [item.span.text.strip() for item in chosen]

    return SummaryResult(
        summary=" ".join(highlights),
        keywords=list(terms[:MAX_KEYWORDS]),
        highlights=highlights,
    )


class ExtractiveEngine:
    """Local, deterministic summarizer. Never fails on non-empty input."""

    name = "local"

    def summarize(self, document: str, mode: SummaryMode) -> SummaryResult:
        sentences, tokens = segment(document)
        table = build_frequencies(tokens, STOPWORDS)
        terms = top_terms(table)
        result = select_sentences(sentences, terms, mode)
        logger.debug(
            f"Extractive summary kept {len(result.highlights)} of "
            f"{len(sentences)} sentences ({mode})"
        )
        return result

