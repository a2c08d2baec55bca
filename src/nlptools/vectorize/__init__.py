"""Vector space construction and similarity."""

from .space import (
    build_document_term_matrix,
    build_tfidf,
    build_vocabulary,
    centroid,
    cosine_similarity,
    similarity_matrix,
)

__all__ = [
    "build_document_term_matrix", "build_tfidf", "build_vocabulary",
    "centroid", "cosine_similarity", "similarity_matrix",
]
