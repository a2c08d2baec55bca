"""Load files from disk into Documents."""

import logging
from pathlib import Path

from ..models import Document
from .parsers import PARSERS

logger = logging.getLogger(__name__)


def load_file(file_path: Path, doc_id: int = 0) -> Document | None:
    """Parse a single file, or return None if its type is unsupported."""
    parser_cls = PARSERS.get(file_path.suffix.lower())
    if parser_cls is None:
        logger.debug(f"Skipping unsupported file {file_path}")
        return None

    result = parser_cls().parse(file_path)
    return Document(
        id=doc_id,
        text=result["content"],
        title=result.get("title", file_path.stem),
        source_path=str(file_path),
    )


def _expand(paths: list[str | Path]) -> list[Path]:
    files = []
    for p in map(Path, paths):
        if p.is_dir():
            files.extend(
                f for f in sorted(p.rglob("*"))
                if f.is_file() and not any(part.startswith(".") for part in f.relative_to(p).parts)
            )
        elif p.is_file():
            files.append(p)
        else:
            logger.warning(f"Path not found: {p}")
    return files


def load_documents(paths: list[str | Path]) -> list[Document]:
    """Load every supported file under ``paths``; ids follow load order."""
    docs: list[Document] = []
    for file_path in _expand(paths):
        doc = load_file(file_path, doc_id=len(docs))
        if doc is not None:
            docs.append(doc)
    return docs
