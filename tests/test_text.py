import pytest

from text_summarizer.summarizer.text import (
    STOPWORDS,
    build_frequencies,
    segment,
    split_sentences,
    tokenize,
    top_terms,
)


def test_split_sentences_keeps_terminators_and_offsets():
    document = "Cats are great. Dogs are loyal! Why?"
    spans = split_sentences(document)
    assert [span.text for span in spans] == ["Cats are great.", " Dogs are loyal!", " Why?"]
    for span in spans:
        assert document[span.start : span.start + len(span.text)] == span.text


def test_split_sentences_without_terminator_is_single_sentence():
    spans = split_sentences("no punctuation here at all")
    assert len(spans) == 1
    assert spans[0].text == "no punctuation here at all"
    assert spans[0].start == 0


def test_split_sentences_only_terminators_falls_back_to_document():
    spans = split_sentences("...")
    assert len(spans) == 1
    assert spans[0].text == "..."


@pytest.mark.parametrize("document", ["... ", "?!\n", "!! "])
def test_split_sentences_terminators_and_whitespace_are_single_sentence(document):
    spans = split_sentences(document)
    assert len(spans) == 1
    assert spans[0].text == document
    assert spans[0].start == 0


def test_split_sentences_keeps_blank_spans_for_offsets():
    spans = split_sentences("First one.   ")
    assert [span.text for span in spans] == ["First one.", "   "]


def test_tokenize_lowercases_and_drops_short_words():
    assert tokenize("It's A big DOG, an ox and O'Neil's cat") == [
        "it's",
        "big",
        "dog",
        "and",
        "o'neil's",
        "cat",
    ]


def test_segment_returns_sentences_and_tokens():
    sentences, tokens = segment("Go home. The cat sat.")
    assert len(sentences) == 2
    assert tokens == ["home", "the", "cat", "sat"]


def test_build_frequencies_excludes_stopwords():
    table = build_frequencies(["the", "solar", "and", "solar", "wind", "they"])
    assert dict(table) == {"solar": 2, "wind": 1}
    assert not set(table) & STOPWORDS


def test_stopword_list_is_fixed():
    assert STOPWORDS == {
        "the", "and", "for", "with", "that", "this", "have", "from", "were",
        "which", "when", "what", "where", "are", "but", "not", "you", "your",
        "all", "their", "they",
    }


def test_top_terms_orders_by_count_then_first_seen():
    table = build_frequencies(["beta", "alpha", "gamma", "alpha", "beta", "delta"])
    assert top_terms(table) == ["beta", "alpha", "gamma", "delta"]


def test_top_terms_limits_to_twenty_by_default():
    tokens = [f"term{index:02d}" for index in range(30)]
    terms = top_terms(build_frequencies(tokens))
    assert len(terms) == 20
    assert terms[0] == "term00"
    assert top_terms(build_frequencies(tokens), n=5) == tokens[:5]


def test_tokenize_word_characters_are_ascii_only():
    assert tokenize("Café naïve résumé") == ["caf", "sum"]
