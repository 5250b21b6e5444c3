from __future__ import annotations

import os
import random
import sys
from pathlib import Path

# Headless pygame for the renderer tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Ensure `src/` is importable (so `import classic_snake` works without installing)
SRC = Path(__file__).resolve().parent.parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

from classic_snake.game import SnakeGame  # noqa: E402
from classic_snake.storage import MemoryHighScoreStore  # noqa: E402


class RecordingRenderer:
    def __init__(self) -> None:
        self.frames = []
        self.game_overs = []

    def render(self, frame) -> None:
        self.frames.append(frame)

    def render_game_over(self, score: int) -> None:
        self.game_overs.append(score)


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def store() -> MemoryHighScoreStore:
    return MemoryHighScoreStore()


@pytest.fixture
def game(renderer, store) -> SnakeGame:
    return SnakeGame(renderer, store, rng=random.Random(7))
