"""Persistent table of player scores stored as ``name:score`` lines."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import platformdirs

APP_NAME = "mushroomhunt"
RECORDS_FILENAME = "records.txt"
DEFAULT_LIMIT = 10
NO_RECORDS_TEXT = "Рекорды пока отсутствуют"

_log = logging.getLogger(__name__)
_INT_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def default_records_path() -> Path:
    """Location of the records file in the user's data directory."""
    return Path(platformdirs.user_data_dir(APP_NAME)) / RECORDS_FILENAME


def parse_record_line(line: str) -> tuple[str, int] | None:
    """Parse one ``name:score`` line; return ``None`` when it is malformed."""
    parts = line.strip().split(":")
    if len(parts) != 2:
        return None
    name, raw_score = parts
    if not _INT_PATTERN.fullmatch(raw_score):
        return None
    score = int(raw_score)
    if not _INT_MIN <= score <= _INT_MAX:
        return None
    return name, score


def format_record(rank: int, name: str, score: int) -> str:
    """Text of one row of the records table."""
    return f"{rank}. {name} - {score} очков"


class RecordsManager:
    """Appends scores to the records file and reads them back."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else default_records_path()

    def save_record(self, name: str, score: int) -> None:
        """Append a score for the named player."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as stream:
            stream.write(f"{name}:{score}\n")
        _log.debug("Record saved: %s with score %d", name, score)

    def _read_entries(self) -> list[tuple[str, int]] | None:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError:
            _log.debug("Failed to open records file for reading: %s", self.path)
            return None
        return [
            entry
            for line in text.splitlines()
            if (entry := parse_record_line(line)) is not None
        ]

    def get_records(self) -> dict[int, str]:
        """Map of score to player name, ascending by score.

        When several players share a score the one saved last wins.
        """
        records: dict[int, str] = {}
        for name, score in self._read_entries() or []:
            records[score] = name
        return dict(sorted(records.items()))

    def top_records(self, limit: int = DEFAULT_LIMIT) -> list[tuple[str, int]]:
        """The best ``limit`` entries as ``(name, score)``, highest first."""
        entries = self._read_entries() or []
        ranked = sorted(entries, key=lambda entry: entry[1], reverse=True)
        return ranked[: max(limit, 0)]

    def table_lines(self, limit: int = DEFAULT_LIMIT) -> list[str]:
        """Rows of the records table, or a notice when there is no file."""
        if self._read_entries() is None:
            return [NO_RECORDS_TEXT]
        return [
            format_record(rank, name, score)
            for rank, (name, score) in enumerate(self.top_records(limit), start=1)
        ]