"""Exceptions raised by nlptools."""


class InvalidInputError(ValueError):
    """Input that cannot be processed into a meaningful result.

    Raised for non-text documents or tokens, negative term counts and
    inconsistent explicit k-means seeds. Every other degenerate case
    (empty collections, bad k, zero vectors) returns an empty or default
    result instead.
    """
