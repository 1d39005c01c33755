"""Per-level high-score tables kept as JSON files."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, Union

PathArg = Union[str, PathLike]


@dataclass(frozen=True)
class ScoreEntry:
    """One line of a score table: a player's name and score."""

    name: str
    score: int


def _entry_from_json(value: Any) -> ScoreEntry:
    data = value if isinstance(value, dict) else {}
    name = data.get("name")
    score = data.get("score")
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        score = 0
    elif isinstance(score, float):
        score = int(score) if score.is_integer() else 0
    return ScoreEntry(name if isinstance(name, str) else "", score)


def _entry_to_json(entry: ScoreEntry) -> dict[str, Any]:
    return {"name": entry.name, "score": entry.score}


def _dump(entries: Iterable[ScoreEntry]) -> str:
    document = {"players": [_entry_to_json(entry) for entry in entries]}
    return json.dumps(document, indent=4, ensure_ascii=False) + "\n"


class ScoreTable:
    """Scores for one level, best first."""

    def __init__(self, entries: Iterable[ScoreEntry] = ()) -> None:
        self._entries: list[ScoreEntry] = list(entries)

    @classmethod
    def load(cls, path: PathArg) -> ScoreTable:
        """Read a table from ``path``.

        A missing file raises FileNotFoundError. An empty file is an empty
        table; any other content that is not valid JSON raises ValueError.
        """
        text = Path(path).read_text(encoding="utf-8")
        if not text.strip():
            return cls()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid score table {path}: {exc}") from exc
        players = data.get("players", []) if isinstance(data, dict) else []
        if not isinstance(players, list):
            players = []
        return cls(_entry_from_json(player) for player in players)

    @classmethod
    def open_or_create(cls, path: PathArg) -> ScoreTable:
        """Load the table at ``path``, first writing an empty one if it is missing."""
        target = Path(path)
        if not target.exists():
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(_dump(()), encoding="utf-8")
        return cls.load(target)

    def insertion_row(self, score: int) -> int:
        """The row a new ``score`` takes: before the first entry it matches or beats."""
        return next(
            (row for row, entry in enumerate(self._entries) if score >= entry.score),
            len(self._entries),
        )

    def insert(self, row: int, entry: ScoreEntry) -> None:
        """Put ``entry`` at ``row``, shifting later entries down."""
        if not 0 <= row <= len(self._entries):
            raise IndexError(f"row {row} is outside the table")
        self._entries.insert(row, entry)

    def save(self, path: PathArg) -> None:
        """Write the table to ``path``, replacing what was there."""
        Path(path).write_text(_dump(self._entries), encoding="utf-8")

    def __iter__(self) -> Iterator[ScoreEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)