"""Sentence segmentation, tokenization and term-frequency ranking."""

from __future__ import annotations

import re
from collections import Counter
from typing import AbstractSet, Iterable, List, Tuple

from text_summarizer.summarizer.models import SentenceSpan


SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]?")
TOKEN_PATTERN = re.compile(r"[\w']{3,}", re.ASCII)

STOPWORDS = frozenset(
    {
        "the",
        "and",
        "for",
        "with",
        "that",
        "this",
        "have",
        "from",
        "were",
        "which",
        "when",
        "what",
        "where",
        "are",
        "but",
        "not",
        "you",
        "your",
        "all",
        "their",
        "they",
    }
)

TOP_TERMS_LIMIT = 20


def split_sentences(document: str) -> List[SentenceSpan]:
    """
    Split a document into sentence spans.

    Each span is a run of characters without ``.``, ``!`` or ``?`` followed by
    at most one terminator. A document with no non-blank span is a single
    sentence. Whitespace-only spans are kept so offsets stay
    aligned with the source; consumers drop them when selecting output.
    """
    spans = [
        SentenceSpan(text=match.group(0), start=match.start())
        for match in SENTENCE_PATTERN.finditer(document)
    ]
    if not any(span.text.strip() for span in spans):
        return [SentenceSpan(text=document, start=0)]
    return spans


def tokenize(text: str) -> List[str]:
    return TOKEN_PATTERN.findall(text.lower())


def segment(document: str) -> Tuple[List[SentenceSpan], List[str]]:
    return split_sentences(document), tokenize(document)


def build_frequencies(
    tokens: Iterable[str], stopwords: AbstractSet[str] = STOPWORDS
) -> Counter[str]:
    """Count every non-stopword token; keys keep first-seen order."""
    table: Counter[str] = Counter()
    for token in tokens:
        if token in stopwords:
            continue
        table[token] += 1
    return table


def top_terms(table: Counter[str], n: int = TOP_TERMS_LIMIT) -> List[str]:
    # sorted() is stable, so equal counts keep first-seen order.
    ranked = sorted(table.items(), key=lambda item: -item[1])
    return [term for term, _ in ranked[:n]]
