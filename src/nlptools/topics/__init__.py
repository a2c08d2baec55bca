"""Term scoring, topic discovery and keyphrase extraction."""

from .keyphrases import candidate_phrases, extract_key_phrases
from .terms import discover_topics, score_terms

__all__ = ["candidate_phrases", "extract_key_phrases", "discover_topics", "score_terms"]
