"""High score persistence. Failures never interrupt play."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import HIGHSCORE_FILE

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Single integer kept in a small text file."""

    def __init__(self, path: Path = HIGHSCORE_FILE) -> None:
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No high score file at %s, starting from 0", self.path)
            return 0
        except OSError as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0
        try:
            return max(0, int(text.strip() or "0"))
        except ValueError:
            logger.warning("Ignoring malformed high score file %s", self.path)
            return 0

    def save(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(value), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)


class MemoryHighScoreStore:
    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.saves += 1
