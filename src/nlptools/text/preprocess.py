"""Token pipelines feeding the vector space builders."""

from .stemmer import get_stemmer
from .stopwords import get_stop_words
from .tokenizer import tokenize


def remove_stop_words(text: str, language: str | None) -> list[str]:
    """Tokenize text and drop the language's stop words."""
    stop_words = get_stop_words(language)
    return [t for t in tokenize(text) if not stop_words.is_stop_word(t)]


def stem_tokens(tokens: list[str], language: str | None) -> list[str]:
    stemmer = get_stemmer(language)
    return [stemmer.stem(t) for t in tokens]


def preprocess(text: str, language: str | None, stem: bool = True) -> list[str]:
    """Tokens for TF-IDF: stop words removed, then optionally stemmed."""
    tokens = remove_stop_words(text, language)
    if stem:
        tokens = stem_tokens(tokens, language)
    return tokens
