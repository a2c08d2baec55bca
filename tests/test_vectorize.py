"""Tests for document-term matrices, TF-IDF and similarity."""

import math
from collections import Counter

import numpy as np
import pytest

from nlptools.errors import InvalidInputError
from nlptools.models import DocumentTermMatrix
from nlptools.vectorize import (
    build_document_term_matrix,
    build_tfidf,
    centroid,
    cosine_similarity,
    similarity_matrix,
)

DOCS = [
    ["cat", "sleep", "cat"],
    ["dog", "play"],
    ["cat", "feline"],
    [],
]


def test_vocabulary_is_ordered_union():
    space = build_tfidf(DOCS)
    assert space.vocabulary == ["cat", "sleep", "dog", "play", "feline"]
    assert set(space.vocabulary) == {t for doc in DOCS for t in doc}


def test_idf_values():
    space = build_tfidf(DOCS)
    n = len(DOCS)
    assert space.idf["cat"] == pytest.approx(math.log((n + 1) / 3) + 1)
    assert space.idf["dog"] == pytest.approx(math.log((n + 1) / 2) + 1)
    assert all(v >= 1 and math.isfinite(v) for v in space.idf.values())
    # more documents -> lower idf
    assert space.idf["cat"] < space.idf["dog"]


def test_vectors_are_unit_or_zero():
    space = build_tfidf(DOCS)
    for vec in space.vectors[:3]:
        assert np.linalg.norm(list(vec.values())) == pytest.approx(1.0)
    assert space.vectors[3] == {}


def test_tf_is_raw_count():
    space = build_tfidf([["a", "a", "b"], ["b"]])
    vec = space.vectors[0]
    ratio = (2 * space.idf["a"]) / space.idf["b"]
    assert vec["a"] / vec["b"] == pytest.approx(ratio)


def test_empty_collection():
    space = build_tfidf([[], []])
    assert space.vocabulary == []
    assert space.vectors == [{}, {}]
    assert build_tfidf([]).vectors == []


def test_dtm_counts():
    dtm = build_document_term_matrix(DOCS)
    assert dtm.count(0, "cat") == 2
    assert dtm.count(1, "cat") == 0
    assert dtm.row(1) == [0, 0, 1, 1, 0]
    assert dtm.document_frequencies()["cat"] == 2


def test_dtm_column_sums_match_direct_counts():
    dtm = build_document_term_matrix(DOCS)
    direct = Counter(t for doc in DOCS for t in doc)
    assert dtm.column_sums() == dict(direct)


def test_dtm_rejects_negative_counts():
    with pytest.raises(InvalidInputError):
        DocumentTermMatrix(vocabulary=["a"], rows=[{"a": -1}])


def test_rejects_non_string_tokens():
    with pytest.raises(InvalidInputError):
        build_tfidf([["ok", 3]])
    with pytest.raises(InvalidInputError):
        build_document_term_matrix(["not a token list"])


def test_cosine_similarity_properties():
    a = {"x": 0.6, "y": 0.8}
    b = {"y": 1.0, "z": 2.0}
    assert cosine_similarity(a, b) == cosine_similarity(b, a)
    assert cosine_similarity(a, a) == pytest.approx(1.0)
    assert cosine_similarity(a, {}) == 0.0
    assert cosine_similarity({"x": 0.0}, a) == 0.0
    assert cosine_similarity({"x": 1.0}, {"y": 1.0}) == 0.0


def test_similarity_matrix_symmetric_with_unit_diagonal():
    space = build_tfidf(DOCS)
    matrix = similarity_matrix(space.vectors)
    assert matrix.shape == (4, 4)
    assert np.array_equal(matrix, matrix.T)
    assert all(matrix[i, i] == 1.0 for i in range(4))
    assert matrix[0, 1] == 0.0
    assert 0 < matrix[0, 2] < 1
    assert ((matrix >= 0) & (matrix <= 1)).all()


def test_similarity_matrix_empty():
    assert similarity_matrix([]).shape == (0, 0)


def test_centroid_is_mean_over_vocabulary():
    mean = centroid([{"a": 1.0}, {"b": 1.0}], ["a", "b", "c"])
    assert mean == {"a": 0.5, "b": 0.5}
    assert centroid([], ["a"]) == {}
