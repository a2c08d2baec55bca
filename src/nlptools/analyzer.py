"""High-level text analysis over raw documents."""

import copy
import logging
from typing import Any, Callable

import numpy as np

from .cache import InMemoryCache, MemoCache, make_cache_key
from .clustering import group_by_similarity, hierarchical, kmeans
from .config import DEFAULT_CONFIG
from .errors import InvalidInputError
from .language import LanguageProfiler
from .models import (
    ClusterResult,
    DendrogramNode,
    DocumentTermMatrix,
    KMeansResult,
    LanguageGuess,
    Topic,
    VectorSpace,
)
from .text import get_stop_words, preprocess, remove_stop_words, tokenize
from .topics import discover_topics, extract_key_phrases, score_terms
from .vectorize import build_document_term_matrix, build_tfidf, similarity_matrix

logger = logging.getLogger(__name__)


def _check_texts(texts: list[str]) -> list[str]:
    if isinstance(texts, str):
        raise InvalidInputError("Expected a list of texts, got a single string")
    texts = list(texts)
    for i, text in enumerate(texts):
        if not isinstance(text, str):
            raise InvalidInputError(f"Document {i} is {type(text).__name__}, expected text")
    return texts


class TextAnalyzer:
    """Runs the analysis pipeline from raw texts.

    When no language code is passed, the language of the first text is
    detected and used for the whole collection. An optional cache memoizes
    every entry point; results are the same with or without it.
    """

    def __init__(self, config: dict[str, Any] | None = None, cache: MemoCache | None = None):
        self.config = config or DEFAULT_CONFIG
        if cache is None and self.config.get("cache", {}).get("enabled"):
            cache = InMemoryCache(self.config["cache"].get("max_entries", 256))
        self.cache = cache
        self._profiler = None

    @property
    def profiler(self) -> LanguageProfiler:
        """Lazy-build the trigram profiles."""
        if self._profiler is None:
            self._profiler = LanguageProfiler.from_config(self.config)
        return self._profiler

    def _section(self, name: str) -> dict[str, Any]:
        return self.config.get(name, DEFAULT_CONFIG[name])

    def _cached(self, operation: str, texts: list[str], compute: Callable[[], Any], **params):
        if self.cache is None:
            return compute()
        key = make_cache_key(operation, texts, **params)
        value = self.cache.get(key)
        if value is None:
            value = compute()
            self.cache.set(key, copy.deepcopy(value))
            return value
        logger.debug(f"Cache hit for {operation}")
        # cached entries are never handed out directly
        return copy.deepcopy(value)

    # Language

    def detect(self, text: str, context_language: str | None = None) -> LanguageGuess:
        if not isinstance(text, str):
            raise InvalidInputError(f"Expected text, got {type(text).__name__}")
        return self._cached(
            "detect", [text],
            lambda: self.profiler.identify(text, context_language=context_language),
            context=context_language,
        )

    def detect_language(self, text: str, context_language: str | None = None) -> str:
        return self.detect(text, context_language).language

    def resolve_language(self, texts: list[str], language: str | None = None) -> str:
        """Explicit language wins; otherwise detect from the first text."""
        if language:
            return language
        if not texts:
            return self.config.get("default_language", "en")
        return self.detect_language(texts[0])

    # Preprocessing

    def tokenize(self, text: str) -> list[str]:
        return tokenize(text)

    def preprocess(self, text: str, language: str | None = None, stem: bool | None = None) -> list[str]:
        if stem is None:
            stem = self._section("preprocessing").get("stem", True)
        language = self.resolve_language([text], language)
        return preprocess(text, language, stem=stem)

    def _stemmed(self, texts: list[str], language: str) -> list[list[str]]:
        stem = self._section("preprocessing").get("stem", True)
        return [preprocess(t, language, stem=stem) for t in texts]

    def _unstemmed(self, texts: list[str], language: str) -> list[list[str]]:
        return [remove_stop_words(t, language) for t in texts]

    # Vector space

    def document_term_matrix(self, texts: list[str], language: str | None = None) -> DocumentTermMatrix:
        texts = _check_texts(texts)
        language = self.resolve_language(texts, language)
        return self._cached(
            "dtm", texts,
            lambda: build_document_term_matrix(self._unstemmed(texts, language)),
            language=language,
        )

    def tfidf(self, texts: list[str], language: str | None = None) -> VectorSpace:
        texts = _check_texts(texts)
        language = self.resolve_language(texts, language)
        return self._cached(
            "tfidf", texts,
            lambda: build_tfidf(self._stemmed(texts, language)),
            language=language,
        )

    def similarity_matrix(self, texts: list[str], language: str | None = None) -> np.ndarray:
        space = self.tfidf(texts, language)
        return similarity_matrix(space.vectors)

    # Clustering

    def kmeans(
        self,
        texts: list[str],
        k: int,
        language: str | None = None,
        max_iterations: int | None = None,
        seed: int | None = None,
        initial_ids: list[int] | None = None,
    ) -> KMeansResult:
        texts = _check_texts(texts)
        language = self.resolve_language(texts, language)
        cfg = self._section("kmeans")
        max_iterations = max_iterations if max_iterations is not None else cfg.get("max_iterations", 100)
        seed = seed if seed is not None else cfg.get("seed")
        return self._cached(
            "kmeans", texts,
            lambda: kmeans(
                self.tfidf(texts, language), k,
                max_iterations=max_iterations, seed=seed,
                initial_ids=initial_ids, texts=texts,
            ),
            language=language, k=k, max_iterations=max_iterations,
            seed=seed, initial_ids=initial_ids,
        )

    def hierarchical(
        self,
        texts: list[str],
        distance_threshold: float | None = None,
        language: str | None = None,
    ) -> list[DendrogramNode]:
        texts = _check_texts(texts)
        language = self.resolve_language(texts, language)
        if distance_threshold is None:
            distance_threshold = self._section("hierarchical").get("distance_threshold", 0.5)
        return self._cached(
            "hierarchical", texts,
            lambda: hierarchical(self.tfidf(texts, language), distance_threshold, texts=texts),
            language=language, threshold=distance_threshold,
        )

    def similarity_groups(
        self,
        texts: list[str],
        threshold: float | None = None,
        language: str | None = None,
    ) -> list[ClusterResult]:
        texts = _check_texts(texts)
        language = self.resolve_language(texts, language)
        if threshold is None:
            threshold = self._section("similarity").get("threshold", 0.7)
        return self._cached(
            "similarity_groups", texts,
            lambda: group_by_similarity(self.tfidf(texts, language), threshold, texts=texts),
            language=language, threshold=threshold,
        )

    # Topics

    def topic_terms(
        self,
        texts: list[str],
        num_terms: int | None = None,
        language: str | None = None,
    ) -> list[tuple[str, float]]:
        if num_terms is None:
            num_terms = self._section("topics").get("num_terms", 10)
        dtm = self.document_term_matrix(texts, language)
        return score_terms(dtm, num_terms)

    def topics(
        self,
        texts: list[str],
        num_topics: int | None = None,
        num_terms: int | None = None,
        language: str | None = None,
        seed: int | None = None,
        initial_ids: list[int] | None = None,
    ) -> list[Topic]:
        texts = _check_texts(texts)
        language = self.resolve_language(texts, language)
        cfg = self._section("topics")
        num_topics = num_topics if num_topics is not None else cfg.get("num_topics", 5)
        num_terms = num_terms if num_terms is not None else cfg.get("num_terms", 10)
        kmeans_cfg = self._section("kmeans")
        seed = seed if seed is not None else kmeans_cfg.get("seed")
        return self._cached(
            "topics", texts,
            lambda: discover_topics(
                self.tfidf(texts, language),
                self._unstemmed(texts, language),
                num_topics=num_topics,
                num_terms=num_terms,
                max_iterations=kmeans_cfg.get("max_iterations", 100),
                seed=seed,
                initial_ids=initial_ids,
                texts=texts,
            ),
            language=language, num_topics=num_topics, num_terms=num_terms,
            seed=seed, initial_ids=initial_ids,
        )

    def key_phrases(
        self,
        text: str,
        num_phrases: int | None = None,
        language: str | None = None,
    ) -> list[tuple[str, float]]:
        if not isinstance(text, str):
            raise InvalidInputError(f"Expected text, got {type(text).__name__}")
        language = self.resolve_language([text], language)
        if num_phrases is None:
            num_phrases = self._section("keyphrases").get("num_phrases", 5)
        return self._cached(
            "keyphrases", [text],
            lambda: extract_key_phrases(text, get_stop_words(language), num_phrases),
            language=language, num_phrases=num_phrases,
        )
