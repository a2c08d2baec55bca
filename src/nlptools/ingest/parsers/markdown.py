"""Markdown file parser."""

import re
from pathlib import Path
from typing import Any

import yaml

_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*\n", re.DOTALL)
_MARKUP = [
    (re.compile(r"```.*?```", re.DOTALL), " "),
    (re.compile(r"`([^`]*)`"), r"\1"),
    (re.compile(r"!\[([^\]]*)\]\([^)]*\)"), r"\1"),
    (re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),
    (re.compile(r"^[ \t]{0,3}#{1,6}[ \t]*", re.MULTILINE), ""),
    (re.compile(r"^[ \t]*>[ \t]?", re.MULTILINE), ""),
    (re.compile(r"^[ \t]*(?:[-*+]|\d+\.)[ \t]+", re.MULTILINE), ""),
    (re.compile(r"(?<!\w)(\*\*|__|\*|_)(\S.*?\S|\S)\1(?!\w)"), r"\2"),
]


def strip_markdown(text: str) -> str:
    """Reduce Markdown to its readable text."""
    for pattern, repl in _MARKUP:
        text = pattern.sub(repl, text)
    return text.strip()


class MarkdownParser:
    """Parse markdown files, dropping frontmatter and markup."""

    def parse(self, file_path: Path) -> dict[str, Any]:
        text = file_path.read_text(encoding="utf-8", errors="replace")
        metadata: dict[str, Any] = {}

        fm_match = _FRONTMATTER_RE.match(text)
        if fm_match:
            try:
                metadata = yaml.safe_load(fm_match.group(1)) or {}
            except yaml.YAMLError:
                metadata = {}
            if not isinstance(metadata, dict):
                metadata = {}
            body = text[fm_match.end():]
        else:
            body = text

        title = metadata.get("title")
        if not title:
            title_match = re.search(r"^#\s+(.+)$", body, re.MULTILINE)
            title = title_match.group(1).strip() if title_match else file_path.stem

        return {"content": strip_markdown(body), "title": str(title)}
