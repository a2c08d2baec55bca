"""Text cleaning and tokenization."""

import re
import string
import unicodedata

from ..errors import InvalidInputError

_SPLIT_RE = re.compile(r"[\s,.!?()\[\]{}\"']+")
_SENTENCE_END_RE = re.compile(r"(?<=[.!?])\s+")
_PUNCTUATION = string.punctuation + "«»“”‘’…–—¿¡"


def _require_text(text) -> str:
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected text, got {type(text).__name__}")
    return text


def strip_accents(text: str) -> str:
    """Remove diacritics: 'français' -> 'francais'."""
    decomposed = unicodedata.normalize("NFKD", _require_text(text))
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def clean_text(text: str) -> str:
    """Lowercase and strip accents."""
    return strip_accents(_require_text(text).lower())


def tokenize(text: str) -> list[str]:
    """Split text into cleaned word tokens longer than one character."""
    tokens = []
    for raw in _SPLIT_RE.split(clean_text(text)):
        token = raw.strip(_PUNCTUATION)
        if len(token) > 1:
            tokens.append(token)
    return tokens


def split_sentences(text: str) -> list[str]:
    """Split on sentence-ending punctuation followed by whitespace.

    Line breaks are treated as sentence ends.
    """
    text = _require_text(text).replace("\r\n", "\n")
    text = re.sub(r"(?<![.!?])\s*\n+\s*", ". ", text)
    sentences = (s.strip() for s in _SENTENCE_END_RE.split(text))
    return [s for s in sentences if s]
