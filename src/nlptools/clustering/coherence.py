"""Cluster coherence: mean pairwise similarity among members."""

from itertools import combinations

import numpy as np

from ..models import Vector
from ..vectorize.space import cosine_similarity


def coherence(vectors: list[Vector]) -> float:
    """Mean pairwise cosine similarity, 1.0 for clusters of zero or one member."""
    if len(vectors) < 2:
        return 1.0
    sims = [cosine_similarity(a, b) for a, b in combinations(vectors, 2)]
    return float(np.mean(sims))

