"""Tests for tokenization, stop words and stemming."""

import pytest

from nlptools.errors import InvalidInputError
from nlptools.text import (
    clean_text,
    get_stemmer,
    get_stop_words,
    preprocess,
    remove_stop_words,
    split_sentences,
    strip_accents,
    tokenize,
)


def test_strip_accents():
    assert strip_accents("français") == "francais"
    assert strip_accents("Müller") == "Muller"


def test_clean_text_lowercases_and_strips_accents():
    assert clean_text("Été Crème") == "ete creme"


def test_tokenize_drops_punctuation_and_short_tokens():
    assert tokenize("Hello, World! C'est l'été.") == ["hello", "world", "est", "ete"]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize("a . ! ?") == []


def test_tokenize_rejects_non_text():
    with pytest.raises(InvalidInputError):
        tokenize(42)


def test_split_sentences():
    assert split_sentences("First one. Second one!\nThird line") == [
        "First one.", "Second one!", "Third line",
    ]


def test_split_sentences_line_breaks_end_sentences():
    assert split_sentences("Line a\nLine b") == ["Line a.", "Line b"]


def test_stop_words_case_and_accent_insensitive():
    fr = get_stop_words("fr")
    assert fr.is_stop_word("ÉTÉ")
    assert fr.is_stop_word("Les")
    assert not fr.is_stop_word("texte")


def test_stop_words_unknown_language_falls_back_to_english():
    sw = get_stop_words("xx")
    assert sw.language == "en"
    assert sw.is_stop_word("The")


def test_stop_words_keep_lexicon_order():
    words = get_stop_words("de").all()
    assert words[:3] == ["aber", "als", "am"]


def test_english_stemmer():
    stemmer = get_stemmer("en")
    assert stemmer.stem("cats") == "cat"
    assert stemmer.stem("running") == "runn"
    assert stemmer.stem("plays") == "pla"
    assert stemmer.stem("glass") == "glass"


def test_stemmer_keeps_short_stems():
    # "dog" is too short to lose anything after the plural
    assert get_stemmer("en").stem("dogs") == "dog"
    assert get_stemmer("en").stem("bed") == "bed"


def test_unknown_language_stemmer_is_identity():
    assert get_stemmer("xx").stem("running") == "running"
    assert get_stemmer(None).stem("cats") == "cats"


def test_remove_stop_words():
    assert remove_stop_words("The cats are sleeping", "en") == ["cats", "sleeping"]


def test_preprocess_stems_after_stop_word_removal():
    assert preprocess("The cats are sleeping", "en") == ["cat", "sleep"]
    assert preprocess("The cats are sleeping", "en", stem=False) == ["cats", "sleeping"]
