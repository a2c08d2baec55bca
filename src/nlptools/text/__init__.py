"""Text cleaning, stop words and stemming."""

from .preprocess import preprocess, remove_stop_words, stem_tokens
from .stemmer import IdentityStemmer, SuffixStemmer, get_stemmer
from .stopwords import StopWords, get_stop_words
from .tokenizer import clean_text, split_sentences, strip_accents, tokenize

__all__ = [
    "preprocess", "remove_stop_words", "stem_tokens",
    "IdentityStemmer", "SuffixStemmer", "get_stemmer",
    "StopWords", "get_stop_words",
    "clean_text", "split_sentences", "strip_accents", "tokenize",
]
