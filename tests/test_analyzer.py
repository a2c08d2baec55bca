"""End-to-end tests through the TextAnalyzer facade."""

import copy

import numpy as np
import pytest

from nlptools import InvalidInputError, TextAnalyzer
from nlptools.config import DEFAULT_CONFIG

TEXTS = ["the cat sleeps", "a dog plays", "cats and felines", "dogs are loyal"]
FRENCH = "Ceci est un texte en français avec plusieurs mots"
ENGLISH = "They would have been there with all of their friends before the others"


@pytest.fixture
def analyzer():
    return TextAnalyzer()


def test_detect_french_with_lower_minimum():
    config = copy.deepcopy(DEFAULT_CONFIG)
    config["language_detection"]["min_length"] = 40
    assert TextAnalyzer(config).detect_language(FRENCH) == "fr"


def test_detect_short_text_uses_default(analyzer):
    guess = analyzer.detect("Bonjour")
    assert guess.language == "en"
    assert guess.reason == "too_short"


def test_resolve_language(analyzer):
    assert analyzer.resolve_language([ENGLISH], "fr") == "fr"
    assert analyzer.resolve_language([ENGLISH]) == "en"
    assert analyzer.resolve_language([]) == "en"


def test_kmeans_end_to_end(analyzer):
    result = analyzer.kmeans(TEXTS, 2, initial_ids=[0, 1])
    groups = [c.document_ids for c in result.clusters]
    assert groups == [[0, 2], [1, 3]]
    matrix = analyzer.similarity_matrix(TEXTS)
    cross = matrix[0, 1]
    assert all(c.coherence > cross for c in result.clusters)
    assert result.clusters[1].texts[3] == "dogs are loyal"


def test_kmeans_invalid_k_is_empty(analyzer):
    assert analyzer.kmeans(TEXTS, 0).clusters == []
    assert analyzer.kmeans(TEXTS, 10).clusters == []
    assert analyzer.kmeans([], 1).clusters == []


def test_tfidf_stems_and_dtm_does_not(analyzer):
    assert analyzer.tfidf(TEXTS, "en").vocabulary == ["cat", "sleep", "dog", "pla", "feline", "loyal"]
    dtm = analyzer.document_term_matrix(TEXTS, "en")
    assert dtm.vocabulary == ["cat", "sleeps", "dog", "plays", "cats", "felines", "dogs", "loyal"]


def test_preprocess_respects_config(analyzer):
    config = copy.deepcopy(DEFAULT_CONFIG)
    config["preprocessing"]["stem"] = False
    assert TextAnalyzer(config).preprocess("The cats sleep", "en") == ["cats", "sleep"]
    assert analyzer.preprocess("The cats sleep", "en") == ["cat", "sleep"]


def test_similarity_matrix(analyzer):
    matrix = analyzer.similarity_matrix(TEXTS)
    assert matrix.shape == (4, 4)
    assert np.array_equal(np.diag(matrix), np.ones(4))


def test_hierarchical_and_groups(analyzer):
    roots = analyzer.hierarchical(TEXTS, distance_threshold=0.9)
    assert sorted(tuple(sorted(r.document_ids)) for r in roots) == [(0, 2), (1, 3)]
    groups = analyzer.similarity_groups(TEXTS, threshold=0.3)
    assert [g.document_ids for g in groups] == [[0, 2], [1, 3]]
    # default threshold 0.7 keeps the short texts apart
    assert len(analyzer.similarity_groups(TEXTS)) == 4


def test_topics(analyzer):
    topics = analyzer.topics(TEXTS, num_topics=2, initial_ids=[0, 1])
    assert [t.topic_id for t in topics] == ["topic_0", "topic_1"]
    assert topics[0].terms[0][0] == "cat"


def test_topic_terms(analyzer):
    terms = analyzer.topic_terms(["apple banana apple", "banana cherry"], num_terms=2, language="en")
    assert [t for t, _ in terms] == ["apple", "banana"]


def test_key_phrases(analyzer):
    text = "Machine learning models require training data. Machine learning models improve with more data."
    phrases = analyzer.key_phrases(text, num_phrases=1, language="en")
    assert phrases[0][0] == "machine learning models require training data"


def test_invalid_input(analyzer):
    with pytest.raises(InvalidInputError):
        analyzer.tfidf(["ok", None])
    with pytest.raises(InvalidInputError):
        analyzer.tfidf("a single string")
    with pytest.raises(InvalidInputError):
        analyzer.detect(123)
    with pytest.raises(InvalidInputError):
        analyzer.key_phrases(["not", "text"])
    with pytest.raises(ValueError):
        analyzer.kmeans(TEXTS, 2, initial_ids=[0, 0])
