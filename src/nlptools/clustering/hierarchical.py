"""Agglomerative clustering with average linkage."""

import logging
from itertools import combinations

import numpy as np

from ..models import DendrogramNode, VectorSpace
from ..vectorize.space import similarity_matrix

logger = logging.getLogger(__name__)


def average_linkage(distances: np.ndarray, a: tuple[int, ...], b: tuple[int, ...]) -> float:
    """Mean distance over every pair of members drawn from ``a`` and ``b``."""
    return float(distances[np.ix_(list(a), list(b))].mean())


def hierarchical(
    space: VectorSpace,
    distance_threshold: float = 0.5,
    texts: list[str] | None = None,
) -> list[DendrogramNode]:
    """Merge the closest pair of clusters until none is within ``distance_threshold``.

    Distance between documents is ``1 - cosine similarity``. Returns the
    top-level nodes remaining when merging stops, which is a single root
    when everything merged.
    """
    n = len(space.vectors)
    if n == 0:
        return []

    distances = 1.0 - similarity_matrix(space.vectors)
    texts = texts or []

    def payload(ids):
        return {i: texts[i] for i in ids} if texts else {}

    active = [
        DendrogramNode(node_id=i, document_ids=(i,), texts=payload((i,)))
        for i in range(n)
    ]
    next_id = n

    while len(active) > 1:
        best_pair, best_dist = None, None
        for i, j in combinations(range(len(active)), 2):
            dist = average_linkage(distances, active[i].document_ids, active[j].document_ids)
            if best_dist is None or dist < best_dist:
                best_pair, best_dist = (i, j), dist

        if best_dist > distance_threshold:
            logger.debug(f"Stopping with {len(active)} clusters: closest pair at {best_dist:.3f}")
            break

        i, j = best_pair
        left, right = active[i], active[j]
        members = left.document_ids + right.document_ids
        merged = DendrogramNode(
            node_id=next_id,
            document_ids=members,
            children=(left, right),
            distance=best_dist,
            height=max(left.height, right.height) + 1,
            texts=payload(members),
        )
        next_id += 1
        active = [node for k, node in enumerate(active) if k not in (i, j)]
        active.append(merged)

    return active
