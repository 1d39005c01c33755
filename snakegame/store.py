"""On-disk layout of level maps and score tables."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Union

from .board import Level

DEFAULT_LEVEL_NAME = "безымянный"
LEVEL_INDEX = "levels.json"


def default_data_dir() -> Path:
    """The data directory next to the working directory: ``../data``."""
    return Path.cwd().parent / "data"


class DataStore:
    """Level maps, the level index and score tables kept in one directory."""

    def __init__(self, root: Union[str, PathLike, None] = None) -> None:
        self.root = Path(root) if root is not None else default_data_dir()

    def card_path(self, name: str) -> Path:
        """Path of the map file for the level called ``name``."""
        return self.root / f"card_{name}.json"

    def scores_path(self, name: str) -> Path:
        """Path of the score table for the level called ``name``."""
        return self.root / f"scores_{name}.json"

    def listed_levels(self) -> list[str]:
        """Names of the levels in the index file, in index order.

        A missing index gives an empty list; an index that is not valid
        JSON raises ValueError.
        """
        index = self.root / LEVEL_INDEX
        if not index.exists():
            return []
        text = index.read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid level index {index}: {exc}") from exc
        entries = data.get("level", []) if isinstance(data, dict) else []
        if not isinstance(entries, list):
            return []
        return [f"level{entry if isinstance(entry, str) else ''}" for entry in entries]

    def playable_levels(self) -> list[str]:
        """Listed levels whose map file exists."""
        return [name for name in self.listed_levels() if self.card_path(name).exists()]

    def save_level(self, name: str, level: Level, overwrite: bool = False) -> Path:
        """Write ``level`` as ``card_level<name>.json`` and return the path used.

        An empty name becomes the default name. If the file exists and
        ``overwrite`` is set, it is replaced and the level's score table is
        emptied; otherwise ``_copy`` is appended to the name until it is free.
        """
        name = name or DEFAULT_LEVEL_NAME
        self.root.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(level.to_dict(), indent=4, ensure_ascii=False) + "\n"

        path = self.card_path(f"level{name}")
        if path.exists():
            if overwrite:
                path.write_text(payload, encoding="utf-8")
                self.scores_path(f"level{name}").write_text("", encoding="utf-8")
                return path
            while path.exists():
                name += "_copy"
                path = self.card_path(f"level{name}")

        path.write_text(payload, encoding="utf-8")
        return path