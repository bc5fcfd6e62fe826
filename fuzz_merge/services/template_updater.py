from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fuzz_merge.config.ini_config import DEFAULT_END_MARKER, DEFAULT_START_MARKER
from fuzz_merge.domain.errors import MarkerNotFoundError


@dataclass(frozen=True)
class TemplateUpdater:
    start_marker: str = DEFAULT_START_MARKER
    end_marker: str = DEFAULT_END_MARKER

    def splice(self, document: str, table: str) -> str:
        start = document.find(self.start_marker)
        if start == -1:
            raise MarkerNotFoundError(self.start_marker)
        body_start = start + len(self.start_marker)

        end = document.find(self.end_marker, body_start)
        if end == -1:
            raise MarkerNotFoundError(self.end_marker)

        return f"{document[:body_start]}\n\n{table}\n{document[end:]}"

    def update_file(self, path: Path, table: str) -> None:
        """
        Rewrites the text between the markers in place.
        Raises FileNotFoundError / MarkerNotFoundError without touching the file.
        """
        # newline="" keeps line endings outside the markers byte-for-byte
        with open(path, "r", encoding="utf-8", newline="") as f:
            document = f.read()

        updated = self.splice(document, table)

        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(updated)
