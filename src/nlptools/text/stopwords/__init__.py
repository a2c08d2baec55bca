"""Per-language stop-word lexicons and lookup."""

import logging

from ..tokenizer import clean_text
from . import english, french, german, spanish

logger = logging.getLogger(__name__)

LEXICONS = {
    "en": english.STOP_WORDS,
    "fr": french.STOP_WORDS,
    "de": german.STOP_WORDS,
    "es": spanish.STOP_WORDS,
}

DEFAULT_LANGUAGE = "en"


class StopWords:
    """Case- and accent-insensitive stop-word lookup for one language."""

    def __init__(self, language: str, words: list[str]):
        self.language = language
        self.words = list(words)
        self._lookup = {clean_text(w) for w in self.words}

    def is_stop_word(self, term: str) -> bool:
        return clean_text(term) in self._lookup

    def all(self) -> list[str]:
        return list(self.words)

    def __contains__(self, term: str) -> bool:
        return self.is_stop_word(term)

    def __len__(self) -> int:
        return len(self.words)


_cache: dict[str, StopWords] = {}


def get_stop_words(language: str | None) -> StopWords:
    """Return the lexicon for a language code, English when unknown."""
    code = (language or DEFAULT_LANGUAGE).lower()
    if code not in LEXICONS:
        logger.debug(f"No stop words for language {language!r}, using {DEFAULT_LANGUAGE}")
        code = DEFAULT_LANGUAGE
    if code not in _cache:
        _cache[code] = StopWords(code, LEXICONS[code])
    return _cache[code]


__all__ = ["LEXICONS", "StopWords", "get_stop_words"]
