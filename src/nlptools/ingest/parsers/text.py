"""Plain text file parser."""

from pathlib import Path
from typing import Any

MAX_TITLE_LENGTH = 120


class TextParser:
    """Plain text; the first non-blank line doubles as the title when short."""

    def parse(self, file_path: Path) -> dict[str, Any]:
        text = file_path.read_text(encoding="utf-8-sig", errors="replace").strip()
        first_line = next((line.strip() for line in text.splitlines() if line.strip()), "")
        title = first_line if 0 < len(first_line) < MAX_TITLE_LENGTH else file_path.stem
        return {"content": text, "title": title}
