"""Statistical text analytics: language detection, TF-IDF, clustering and topics."""

from .analyzer import TextAnalyzer
from .cache import InMemoryCache, MemoCache
from .errors import InvalidInputError
from .models import (
    ClusterResult,
    DendrogramNode,
    Document,
    DocumentTermMatrix,
    KMeansResult,
    LanguageGuess,
    Topic,
    VectorSpace,
)

__version__ = "0.1.0"

__all__ = [
    "TextAnalyzer", "InMemoryCache", "MemoCache", "InvalidInputError",
    "ClusterResult", "DendrogramNode", "Document", "DocumentTermMatrix",
    "KMeansResult", "LanguageGuess", "Topic", "VectorSpace",
]
