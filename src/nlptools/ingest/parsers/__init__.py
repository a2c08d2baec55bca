"""Document parsers keyed by file suffix."""

from .markdown import MarkdownParser
from .text import TextParser

PARSERS = {
    ".md": MarkdownParser,
    ".markdown": MarkdownParser,
    ".txt": TextParser,
    ".text": TextParser,
}

__all__ = ["PARSERS", "MarkdownParser", "TextParser"]
