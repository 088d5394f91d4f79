"""File-backed repository for the TP reference table."""
from __future__ import annotations

from pathlib import Path

from tp_ranker.domain.errors import ReferenceUnavailableError
from tp_ranker.domain.repositories import ReferenceRepository


class CsvReferenceRepository(ReferenceRepository):
    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def read_text(self) -> str:
        try:
            return self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReferenceUnavailableError(str(self._path), f"Cannot read TP reference {self._path}: {e}") from e
