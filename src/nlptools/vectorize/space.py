"""Document-term matrices, TF-IDF vector spaces and cosine similarity."""

import logging
from itertools import combinations

import numpy as np
from sklearn.feature_extraction.text import CountVectorizer, TfidfVectorizer

from ..errors import InvalidInputError
from ..models import DocumentTermMatrix, Vector, VectorSpace

logger = logging.getLogger(__name__)


def _identity(tokens: list[str]) -> list[str]:
    return tokens


def _check_token_lists(token_lists: list[list[str]]) -> list[list[str]]:
    checked = []
    for doc_id, tokens in enumerate(token_lists):
        if isinstance(tokens, str) or not all(isinstance(t, str) for t in tokens):
            raise InvalidInputError(f"Document {doc_id} is not a sequence of string tokens")
        checked.append(list(tokens))
    return checked


def build_vocabulary(token_lists: list[list[str]]) -> list[str]:
    """Distinct terms in order of first occurrence."""
    return list(dict.fromkeys(t for tokens in token_lists for t in tokens))


def _sparse_rows(matrix, vocabulary: list[str], cast) -> list[dict]:
    matrix = matrix.tocsr()
    matrix.sort_indices()
    rows = []
    for i in range(matrix.shape[0]):
        start, end = matrix.indptr[i], matrix.indptr[i + 1]
        rows.append({
            vocabulary[j]: cast(v)
            for j, v in zip(matrix.indices[start:end], matrix.data[start:end])
            if v != 0
        })
    return rows


def build_document_term_matrix(token_lists: list[list[str]]) -> DocumentTermMatrix:
    """Raw term counts per document over the collection's vocabulary."""
    token_lists = _check_token_lists(token_lists)
    vocabulary = build_vocabulary(token_lists)
    if not vocabulary:
        return DocumentTermMatrix(vocabulary=[], rows=[{} for _ in token_lists])

    vectorizer = CountVectorizer(
        analyzer=_identity, vocabulary=vocabulary, lowercase=False, token_pattern=None,
    )
    counts = vectorizer.fit_transform(token_lists)
    return DocumentTermMatrix(vocabulary=vocabulary, rows=_sparse_rows(counts, vocabulary, int))


def build_tfidf(token_lists: list[list[str]]) -> VectorSpace:
    """TF-IDF weighted, L2-normalized vectors.

    TF is the raw count and IDF is ``ln((N + 1) / (df + 1)) + 1``.
    Documents without tokens get the zero vector.
    """
    token_lists = _check_token_lists(token_lists)
    vocabulary = build_vocabulary(token_lists)
    if not vocabulary:
        logger.debug(f"Empty vocabulary across {len(token_lists)} document(s)")
        return VectorSpace(vectors=[{} for _ in token_lists], vocabulary=[], idf={})

    vectorizer = TfidfVectorizer(
        analyzer=_identity,
        vocabulary=vocabulary,
        lowercase=False,
        token_pattern=None,
        norm="l2",
        use_idf=True,
        smooth_idf=True,
        sublinear_tf=False,
    )
    weights = vectorizer.fit_transform(token_lists)
    idf = {term: float(value) for term, value in zip(vocabulary, vectorizer.idf_)}
    return VectorSpace(
        vectors=_sparse_rows(weights, vocabulary, float),
        vocabulary=vocabulary,
        idf=idf,
    )


def cosine_similarity(a: Vector, b: Vector) -> float:
    """Cosine similarity over the union of both vectors' terms.

    Zero-magnitude vectors have similarity 0 with everything.
    """
    keys = sorted(a.keys() | b.keys())
    if not keys:
        return 0.0
    va = np.fromiter((a.get(k, 0.0) for k in keys), dtype=float, count=len(keys))
    vb = np.fromiter((b.get(k, 0.0) for k in keys), dtype=float, count=len(keys))
    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    sim = float(np.dot(va, vb) / (norm_a * norm_b))
    return min(1.0, max(0.0, sim))


def similarity_matrix(vectors: list[Vector]) -> np.ndarray:
    """Pairwise cosine similarities with a diagonal of exactly 1.0."""
    n = len(vectors)
    matrix = np.zeros((n, n), dtype=float)
    np.fill_diagonal(matrix, 1.0)
    for i, j in combinations(range(n), 2):
        sim = cosine_similarity(vectors[i], vectors[j])
        matrix[i, j] = sim
        matrix[j, i] = sim
    return matrix


def centroid(vectors: list[Vector], vocabulary: list[str]) -> Vector:
    """Element-wise mean over the full vocabulary, zero entries dropped."""
    if not vectors:
        return {}
    dense = np.array([[v.get(term, 0.0) for term in vocabulary] for v in vectors], dtype=float)
    mean = dense.mean(axis=0)
    return {term: float(w) for term, w in zip(vocabulary, mean) if w != 0}
