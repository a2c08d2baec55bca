"""Statistical language identification."""

from .profiler import (
    LanguageProfiler,
    build_profile,
    clean_for_detection,
    extract_trigrams,
    identify,
    score_profile,
)

__all__ = [
    "LanguageProfiler", "build_profile", "clean_for_detection",
    "extract_trigrams", "identify", "score_profile",
]
