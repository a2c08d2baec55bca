"""File ingestion."""

from .loader import load_documents, load_file

__all__ = ["load_documents", "load_file"]
