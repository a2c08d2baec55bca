"""Light suffix-stripping stemmers keyed by language code."""

import logging

logger = logging.getLogger(__name__)

# Checked in order; the first suffix that leaves a long enough stem wins.
SUFFIXES = {
    "en": ["ing", "ed", "ly", "ment", "ers", "or", "ies", "es", "y"],
    "fr": ["ement", "euse", "eux", "ant", "ent", "er", "ez", "ee"],
    "de": ["ung", "lich", "heit", "keit", "end", "en", "er"],
    "es": ["mente", "cion", "dor", "ando", "iendo", "ado", "ido", "ar", "er", "ir"],
}

MIN_STEM = 2


class IdentityStemmer:
    """Returns words unchanged."""

    language = None

    def stem(self, word: str) -> str:
        return word


class SuffixStemmer:
    """Strip a plural 's', then the first matching suffix.

    A suffix is only removed when more than ``MIN_STEM`` characters remain.
    """

    def __init__(self, language: str, suffixes: list[str]):
        self.language = language
        self.suffixes = list(suffixes)

    def stem(self, word: str) -> str:
        if len(word) > 3 and word.endswith("s") and not word.endswith("ss"):
            word = word[:-1]
        for suffix in self.suffixes:
            if word.endswith(suffix) and len(word) > len(suffix) + MIN_STEM:
                return word[: -len(suffix)]
        return word


STEMMERS = {lang: SuffixStemmer(lang, suffixes) for lang, suffixes in SUFFIXES.items()}


def get_stemmer(language: str | None) -> SuffixStemmer | IdentityStemmer:
    """Return the stemmer for a language code, or a no-op stemmer when unknown."""
    stemmer = STEMMERS.get((language or "").lower())
    if stemmer is None:
        logger.debug(f"No stemmer for language {language!r}, tokens left unstemmed")
        return IdentityStemmer()
    return stemmer
