"""Character-trigram language identification.

A language profile is the summed trigram histogram of a reference lexicon
(by default the language's stop words). Input text is scored against each
profile with an unnormalized dot product, which favours larger profiles on
short inputs.
"""

import logging
import re
from collections import Counter
from collections.abc import Iterable

from ..errors import InvalidInputError
from ..models import LanguageGuess, TrigramProfile
from ..text.stopwords import LEXICONS

logger = logging.getLogger(__name__)

BOUNDARY = "_"
DEFAULT_LANGUAGES = ("fr", "en", "de", "es")

# Hyphens are kept so compounds such as "jean-paul" stay one unit.
_NON_LETTER_RE = re.compile(r"[^\w-]|[\d_]")


def clean_for_detection(text: str) -> str:
    """Lowercase and replace each character that is not a letter or hyphen with a space."""
    return _NON_LETTER_RE.sub(" ", text.lower())


def extract_trigrams(text: str) -> Counter:
    """Histogram of overlapping 3-character windows.

    The lowercased string is padded with the boundary marker on both ends.
    Inner whitespace is kept as is.
    """
    padded = BOUNDARY + text.lower() + BOUNDARY
    return Counter(padded[i:i + 3] for i in range(len(padded) - 2))


def build_profile(words: Iterable[str]) -> TrigramProfile:
    profile: Counter = Counter()
    for word in words:
        if word.strip():
            profile.update(extract_trigrams(word))
    return dict(profile)


def score_profile(text_trigrams: dict[str, int], profile: TrigramProfile) -> float:
    """Dot product over the trigrams both histograms contain."""
    if len(profile) < len(text_trigrams):
        return float(sum(n * text_trigrams.get(t, 0) for t, n in profile.items()))
    return float(sum(n * profile.get(t, 0) for t, n in text_trigrams.items()))


def identify(
    text: str,
    profiles: dict[str, TrigramProfile],
    default_language: str = "en",
    context_language: str | None = None,
    min_length: int = 50,
    confidence_threshold: float = 0.3,
) -> LanguageGuess:
    """Pick the language whose profile scores highest against ``text``.

    Ties go to the profile listed first. When the runner-up is within
    ``confidence_threshold`` of the winner (relative to the winner's score)
    and ``context_language`` was scored, the context language is returned.
    Text shorter than ``min_length`` after trimming is not scored.
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected text, got {type(text).__name__}")
    fallback = context_language or default_language

    if len(text.strip()) < min_length:
        logger.debug(f"Text too short for detection ({len(text.strip())} < {min_length}), using {fallback}")
        return LanguageGuess(language=fallback, fallback=True, reason="too_short")

    if not profiles:
        logger.debug(f"No language profiles registered, using {default_language}")
        return LanguageGuess(language=default_language, fallback=True, reason="no_profiles")

    trigrams = extract_trigrams(clean_for_detection(text))
    scores = {lang: score_profile(trigrams, profile) for lang, profile in profiles.items()}

    best_lang, best = None, 0.0
    for lang, value in scores.items():
        if best_lang is None or value > best:
            best_lang, best = lang, value

    if best <= 0:
        logger.debug(f"No trigram overlap with any profile, using {fallback}")
        return LanguageGuess(language=fallback, scores=scores, fallback=True, reason="no_match")

    runner_up = max((v for lang, v in scores.items() if lang != best_lang), default=0.0)
    if (
        context_language
        and context_language != best_lang
        and context_language in scores
        and (best - runner_up) / best < confidence_threshold
    ):
        logger.debug(
            f"Low confidence for {best_lang} ({best} vs {runner_up}), preferring {context_language}"
        )
        return LanguageGuess(language=context_language, scores=scores, fallback=True, reason="low_confidence")

    return LanguageGuess(language=best_lang, scores=scores)


class LanguageProfiler:
    """Holds trigram profiles for a set of languages and identifies text against them."""

    def __init__(
        self,
        profiles: dict[str, TrigramProfile] | None = None,
        default_language: str = "en",
        min_length: int = 50,
        confidence_threshold: float = 0.3,
    ):
        self.profiles: dict[str, TrigramProfile] = dict(profiles or {})
        self.default_language = default_language
        self.min_length = min_length
        self.confidence_threshold = confidence_threshold

    @classmethod
    def from_stop_words(cls, languages: Iterable[str] = DEFAULT_LANGUAGES, **kwargs) -> "LanguageProfiler":
        """Build profiles from the bundled stop-word lexicons."""
        profiler = cls(**kwargs)
        for lang in languages:
            if lang not in LEXICONS:
                logger.warning(f"No lexicon for language {lang!r}, skipping profile")
                continue
            profiler.add_profile(lang, LEXICONS[lang])
        return profiler

    @classmethod
    def from_config(cls, config: dict) -> "LanguageProfiler":
        det = config.get("language_detection", {})
        return cls.from_stop_words(
            det.get("languages", DEFAULT_LANGUAGES),
            default_language=config.get("default_language", "en"),
            min_length=det.get("min_length", 50),
            confidence_threshold=det.get("confidence_threshold", 0.3),
        )

    def add_profile(self, language: str, words: Iterable[str]) -> None:
        self.profiles[language] = build_profile(words)

    def identify(self, text: str, context_language: str | None = None) -> LanguageGuess:
        return identify(
            text,
            self.profiles,
            default_language=self.default_language,
            context_language=context_language,
            min_length=self.min_length,
            confidence_threshold=self.confidence_threshold,
        )
