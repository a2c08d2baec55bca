"""Data models used throughout nlptools."""

from dataclasses import dataclass, field

from .errors import InvalidInputError

# term -> weight, zero entries omitted
Vector = dict[str, float]
# trigram -> count
TrigramProfile = dict[str, int]


@dataclass
class Document:
    """A raw input text and its position in the collection."""
    id: int
    text: str
    title: str = ""
    source_path: str = ""


@dataclass
class DocumentTermMatrix:
    """Raw term counts per document over a shared vocabulary.

    Rows are sparse: a term missing from a row has count 0, and every
    vocabulary term is still addressable through :meth:`count`.
    """
    vocabulary: list[str]
    rows: list[dict[str, int]]

    def __post_init__(self):
        for doc_id, row in enumerate(self.rows):
            for term, value in row.items():
                if value < 0:
                    raise InvalidInputError(
                        f"Negative count {value} for term {term!r} in document {doc_id}"
                    )

    @property
    def n_documents(self) -> int:
        return len(self.rows)

    def count(self, doc_id: int, term: str) -> int:
        return self.rows[doc_id].get(term, 0)

    def row(self, doc_id: int) -> list[int]:
        """Dense counts for one document, in vocabulary order."""
        counts = self.rows[doc_id]
        return [counts.get(term, 0) for term in self.vocabulary]

    def column_sums(self) -> dict[str, int]:
        totals = dict.fromkeys(self.vocabulary, 0)
        for row in self.rows:
            for term, value in row.items():
                totals[term] += value
        return totals

    def document_frequencies(self) -> dict[str, int]:
        df = dict.fromkeys(self.vocabulary, 0)
        for row in self.rows:
            for term, value in row.items():
                if value > 0:
                    df[term] += 1
        return df


@dataclass
class VectorSpace:
    """L2-normalized TF-IDF vectors plus the vocabulary and IDF table they share."""
    vectors: list[Vector]
    vocabulary: list[str]
    idf: dict[str, float]

    def __len__(self) -> int:
        return len(self.vectors)


@dataclass
class ClusterResult:
    """A group of documents produced by one of the clustering strategies."""
    cluster_id: int
    document_ids: list[int]
    texts: dict[int, str] = field(default_factory=dict)
    centroid: Vector | None = None
    coherence: float = 1.0

    @property
    def size(self) -> int:
        return len(self.document_ids)


@dataclass
class KMeansResult:
    clusters: list[ClusterResult] = field(default_factory=list)
    iterations: int = 0
    converged: bool = False

    @property
    def centroids(self) -> list[Vector]:
        return [c.centroid or {} for c in self.clusters]

    def labels(self) -> dict[int, int]:
        """Map each document id to the index of its cluster."""
        return {
            doc_id: cluster.cluster_id
            for cluster in self.clusters
            for doc_id in cluster.document_ids
        }


@dataclass(frozen=True)
class DendrogramNode:
    """A node in an agglomerative clustering tree.

    Leaves hold a single document with distance 0 and height 0. Internal
    nodes embed their two children by value.
    """
    node_id: int
    document_ids: tuple[int, ...]
    children: tuple["DendrogramNode", ...] = ()
    distance: float = 0.0
    height: int = 0
    texts: dict[int, str] = field(default_factory=dict, compare=False, hash=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def leaves(self) -> list["DendrogramNode"]:
        if self.is_leaf:
            return [self]
        return [leaf for child in self.children for leaf in child.leaves()]


@dataclass
class Topic:
    """A ranked term list describing one cluster of documents."""
    topic_id: str
    terms: list[tuple[str, float]]
    document_ids: list[int]
    texts: dict[int, str] = field(default_factory=dict)
    coherence: float = 1.0


@dataclass
class LanguageGuess:
    """Outcome of language identification.

    ``fallback`` is True when the language was not picked by score
    (``reason`` says why: too_short, no_profiles, no_match, low_confidence).
    """
    language: str
    scores: dict[str, float] = field(default_factory=dict)
    fallback: bool = False
    reason: str = "scored"
