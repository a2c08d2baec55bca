"""Greedy similarity-threshold grouping."""

from ..models import ClusterResult, VectorSpace
from ..vectorize.space import cosine_similarity
from .coherence import coherence


def group_by_similarity(
    space: VectorSpace,
    threshold: float = 0.7,
    texts: list[str] | None = None,
) -> list[ClusterResult]:
    """Single pass in collection order.

    Each unassigned document seeds a group and absorbs every later
    unassigned document whose similarity to the seed is >= ``threshold``.
    The result depends on document order.
    """
    vectors = space.vectors
    assigned = [False] * len(vectors)
    groups: list[ClusterResult] = []

    for seed, seed_vec in enumerate(vectors):
        if assigned[seed]:
            continue
        assigned[seed] = True
        members = [seed]
        for other in range(len(vectors)):
            if assigned[other]:
                continue
            if cosine_similarity(seed_vec, vectors[other]) >= threshold:
                assigned[other] = True
                members.append(other)

        groups.append(ClusterResult(
            cluster_id=len(groups),
            document_ids=members,
            texts={i: texts[i] for i in members} if texts else {},
            coherence=coherence([vectors[i] for i in members]),
        ))

    return groups
