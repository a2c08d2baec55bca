"""Keyphrase extraction using stop words as phrase boundaries."""

import math
import re
from collections import Counter

from ..errors import InvalidInputError
from ..text.stopwords import StopWords
from ..text.tokenizer import clean_text, split_sentences

_TOKEN_RE = re.compile(r"\w+(?:['’-]\w+)*|[.,:;!?]")
_BOUNDARY_PUNCT = set(".,:;!?")

MIN_SENTENCE_WORDS = 3
MIN_PHRASE_WORDS = 2


def _sentence_tokens(sentence: str) -> list[str]:
    return [
        tok for tok in _TOKEN_RE.findall(clean_text(sentence))
        if tok in _BOUNDARY_PUNCT or len(tok) > 1
    ]


def candidate_phrases(sentence: str, stop_words: StopWords) -> list[str]:
    """Runs of two or more content words between stop words or punctuation."""
    tokens = _sentence_tokens(sentence)
    if sum(1 for t in tokens if t not in _BOUNDARY_PUNCT) < MIN_SENTENCE_WORDS:
        return []

    phrases = []
    current: list[str] = []
    for tok in tokens:
        if tok in _BOUNDARY_PUNCT or stop_words.is_stop_word(tok):
            if len(current) >= MIN_PHRASE_WORDS:
                phrases.append(" ".join(current))
            current = []
        else:
            current.append(tok)
    if len(current) >= MIN_PHRASE_WORDS:
        phrases.append(" ".join(current))
    return phrases


def extract_key_phrases(
    text: str,
    stop_words: StopWords,
    num_phrases: int = 5,
) -> list[tuple[str, float]]:
    """Top phrases scored by ``frequency * ln(length + 1) * word_count``.

    ``length`` is the phrase's character length. Ties keep first-seen order.
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected text, got {type(text).__name__}")

    counts: Counter = Counter()
    for sentence in split_sentences(text):
        counts.update(candidate_phrases(sentence, stop_words))

    scored = [
        (phrase, freq * math.log(len(phrase) + 1) * len(phrase.split()))
        for phrase, freq in counts.items()
    ]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored[:max(num_phrases, 0)]
