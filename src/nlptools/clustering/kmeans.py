"""K-means over TF-IDF vectors with cosine similarity."""

import logging

import numpy as np

from ..errors import InvalidInputError
from ..models import ClusterResult, KMeansResult, Vector, VectorSpace
from ..vectorize.space import centroid, cosine_similarity
from .coherence import coherence

logger = logging.getLogger(__name__)

Partition = tuple[tuple[int, ...], ...]


def _initial_indices(n: int, k: int, seed: int | None, initial_ids: list[int] | None) -> list[int]:
    if initial_ids is None:
        rng = np.random.default_rng(seed)
        return [int(i) for i in rng.choice(n, size=k, replace=False)]

    ids = [int(i) for i in initial_ids]
    if len(ids) != k or len(set(ids)) != k or any(i < 0 or i >= n for i in ids):
        raise InvalidInputError(
            f"initial_ids must be {k} distinct document ids in [0, {n}), got {list(initial_ids)}"
        )
    return ids


def _assign(vectors: list[Vector], centroids: list[Vector]) -> list[list[int]]:
    """Nearest centroid by cosine similarity; ties go to the lowest index."""
    members: list[list[int]] = [[] for _ in centroids]
    for doc_id, vec in enumerate(vectors):
        best, best_sim = 0, -1.0
        for c, cent in enumerate(centroids):
            sim = cosine_similarity(vec, cent)
            if sim > best_sim:
                best, best_sim = c, sim
        members[best].append(doc_id)
    return members


def _snapshot(members: list[list[int]]) -> Partition:
    return tuple(tuple(sorted(m)) for m in members)


def kmeans(
    space: VectorSpace,
    k: int,
    max_iterations: int = 100,
    seed: int | None = None,
    initial_ids: list[int] | None = None,
    texts: list[str] | None = None,
) -> KMeansResult:
    """Partition the vector space into ``k`` clusters.

    Initial centroids are ``k`` distinct documents drawn uniformly at random
    (or ``initial_ids`` when given). Iteration stops once the partition is
    unchanged from the previous pass or after ``max_iterations`` passes.
    Empty clusters keep their previous centroid.

    Returns an empty result when ``k`` is not in ``1..len(space)`` or
    ``max_iterations`` is below 1.
    """
    vectors = space.vectors
    n = len(vectors)
    if n == 0 or k <= 0 or k > n or max_iterations < 1:
        logger.debug(f"K-means skipped: k={k}, documents={n}, max_iterations={max_iterations}")
        return KMeansResult()

    centroids = [dict(vectors[i]) for i in _initial_indices(n, k, seed, initial_ids)]
    previous: Partition | None = None
    members: list[list[int]] = []
    converged = False
    iterations = 0

    while iterations < max_iterations:
        iterations += 1
        members = _assign(vectors, centroids)
        current = _snapshot(members)
        if current == previous:
            converged = True
            break
        previous = current
        centroids = [
            centroid([vectors[i] for i in ids], space.vocabulary) if ids else centroids[c]
            for c, ids in enumerate(members)
        ]

    if not converged:
        logger.warning(f"K-means stopped at the iteration cap ({max_iterations}) without converging")

    clusters = [
        ClusterResult(
            cluster_id=c,
            document_ids=sorted(ids),
            texts={i: texts[i] for i in sorted(ids)} if texts else {},
            centroid=centroids[c],
            coherence=coherence([vectors[i] for i in ids]),
        )
        for c, ids in enumerate(members)
    ]
    return KMeansResult(clusters=clusters, iterations=iterations, converged=converged)
