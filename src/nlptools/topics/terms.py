"""Term importance scoring and clustering-based topic discovery."""

import logging
import math

from ..clustering.kmeans import kmeans
from ..models import DocumentTermMatrix, Topic, VectorSpace
from ..vectorize.space import build_document_term_matrix

logger = logging.getLogger(__name__)


def score_terms(dtm: DocumentTermMatrix, top_n: int = 10) -> list[tuple[str, float]]:
    """Rank terms by ``tf * (ln(N / df) + 1)``.

    ``tf`` is the term's total count across the collection. Ties keep
    vocabulary order.
    """
    n = dtm.n_documents
    if n == 0 or top_n <= 0:
        return []

    tf = dtm.column_sums()
    df = dtm.document_frequencies()
    scored = [
        (term, tf[term] * (math.log(n / df[term]) + 1.0))
        for term in dtm.vocabulary
        if df[term] > 0
    ]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    return scored[:top_n]


def discover_topics(
    space: VectorSpace,
    token_lists: list[list[str]],
    num_topics: int = 5,
    num_terms: int = 10,
    max_iterations: int = 100,
    seed: int | None = None,
    initial_ids: list[int] | None = None,
    texts: list[str] | None = None,
) -> list[Topic]:
    """Approximate topics by k-means over ``space``.

    Each non-empty cluster's member token lists are scored on their own,
    giving one ranked term list per cluster. Topics are ordered by member
    count, largest first.
    """
    result = kmeans(
        space, num_topics, max_iterations=max_iterations, seed=seed,
        initial_ids=initial_ids, texts=texts,
    )

    topics = []
    for cluster in result.clusters:
        if not cluster.document_ids:
            continue
        dtm = build_document_term_matrix([token_lists[i] for i in cluster.document_ids])
        topics.append(Topic(
            topic_id=f"topic_{cluster.cluster_id}",
            terms=score_terms(dtm, num_terms),
            document_ids=list(cluster.document_ids),
            texts=dict(cluster.texts),
            coherence=cluster.coherence,
        ))

    topics.sort(key=lambda t: len(t.document_ids), reverse=True)
    logger.debug(f"Discovered {len(topics)} topic(s) from {len(token_lists)} document(s)")
    return topics
