"""Clustering strategies over TF-IDF vector spaces."""

from .coherence import coherence
from .hierarchical import average_linkage, hierarchical
from .kmeans import kmeans
from .threshold import group_by_similarity

__all__ = ["coherence", "average_linkage", "hierarchical", "kmeans", "group_by_similarity"]
