"""Snake game state machine: one owned state advanced a grid cell per tick."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Protocol

from .config import (
    CELL_SIZE,
    DIRECTIONS,
    FOOD_REWARD,
    GRID_HEIGHT,
    GRID_WIDTH,
    MIN_INTERVAL_MS,
    NONE,
    OPPOSITE,
    SPEED_STEP_MS,
    SPEED_UP_EVERY,
    START_INTERVAL_MS,
)
from .scheduler import RepeatingTimer
from .storage import MemoryHighScoreStore

logger = logging.getLogger(__name__)

Cell = tuple[int, int]

IDLE = "idle"
RUNNING = "running"
GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class Frame:
    """Read-only snapshot handed to the render sink after each change."""

    snake: tuple[Cell, ...]
    food: Cell | None
    score: int
    high_score: int
    direction: str
    state: str


class RenderSink(Protocol):
    def render(self, frame: Frame) -> None: ...

    def render_game_over(self, score: int) -> None: ...


class ScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, value: int) -> None: ...


class SnakeGame:
    """Owns snake, food, score and speed; driven by ticks and direction input."""

    def __init__(
        self,
        renderer: RenderSink,
        store: ScoreStore | None = None,
        *,
        rng: random.Random | None = None,
        grid_width: int = GRID_WIDTH,
        grid_height: int = GRID_HEIGHT,
        cell_size: int = CELL_SIZE,
    ) -> None:
        if grid_width < 1 or grid_height < 1:
            raise ValueError(f"grid must be at least 1x1, got {grid_width}x{grid_height}")
        self.renderer = renderer
        self.store = store if store is not None else MemoryHighScoreStore()
        self.rng = rng or random.Random()
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.cell_size = cell_size
        self.timer = RepeatingTimer(self.tick)
        # the speed ramp carries over restarts
        self.speed = START_INTERVAL_MS

        self.high_score: int = self.store.load()
        self.initialize()

    @property
    def running(self) -> bool:
        return self.state == RUNNING

    # --- Lifecycle -----------------------------------------------------

    def initialize(self) -> None:
        """Centre a one-segment snake, drop food, zero the score and go idle."""
        self.snake: list[Cell] = [
            (
                (self.grid_width // 2) * self.cell_size,
                (self.grid_height // 2) * self.cell_size,
            )
        ]
        self.score = 0
        self.direction = NONE
        self.pending_direction = NONE
        self.state = IDLE
        self.food = self._place_food()
        self._render()

    def start(self) -> None:
        """Arm the tick source. No-op while running; a finished game is reset first."""
        if self.state == RUNNING:
            return
        if self.state == GAME_OVER:
            self.initialize()
        self.state = RUNNING
        self.timer.start(self.speed)
        logger.info("Game started (best %d)", self.high_score)

    def restart(self) -> None:
        self.timer.cancel()
        self.state = IDLE
        self.initialize()

    # --- Input ---------------------------------------------------------

    def request_direction(self, direction: str) -> bool:
        """Queue ``direction`` for the next tick, rejecting reversals.

        Only the latest accepted request before a tick is honoured. The first
        accepted request of an idle game starts it.
        """
        if self.state == GAME_OVER or direction not in DIRECTIONS:
            return False
        if direction == OPPOSITE[self.direction]:
            logger.debug("Ignoring reversal %s while moving %s", direction, self.direction)
            return False
        self.pending_direction = direction
        if self.state == IDLE:
            self.start()
        return True

    # --- Logic step ----------------------------------------------------

    def tick(self) -> None:
        """Advance the game state by exactly one grid cell."""
        if self.state != RUNNING:
            return
        self.direction = self.pending_direction
        if self.direction == NONE:
            self._render()
            return

        dx, dy = DIRECTIONS[self.direction]
        head_x, head_y = self.snake[0]
        new_head = (head_x + dx * self.cell_size, head_y + dy * self.cell_size)

        if not self._in_bounds(new_head):
            self._game_over()
            return
        eating = new_head == self.food
        # the tail moves out of the way unless we grow this tick
        body = self.snake if eating else self.snake[:-1]
        if new_head in body:
            self._game_over()
            return

        self.snake.insert(0, new_head)
        if eating:
            self._eat()
        else:
            self.snake.pop()

        if self.state == RUNNING:
            self._render()

    def _eat(self) -> None:
        self.score += FOOD_REWARD
        if self.score > self.high_score:
            self.high_score = self.score
            self.store.save(self.high_score)
            logger.debug("New high score %d", self.high_score)

        self.food = self._place_food()
        if self.food is None:
            logger.info("Board filled")
            self._game_over()
            return

        if self.score % SPEED_UP_EVERY == 0 and self.speed > MIN_INTERVAL_MS:
            self.speed -= SPEED_STEP_MS
            self.timer.start(self.speed)
            logger.debug("Speed up: tick every %d ms", self.speed)

    def _in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return (
            0 <= x < self.grid_width * self.cell_size
            and 0 <= y < self.grid_height * self.cell_size
        )

    # --- Food ----------------------------------------------------------

    def _place_food(self) -> Cell | None:
        """Return a random cell not covered by the snake, or None if the board is full.

        Random draws are capped at the number of cells; after that the free
        cells are listed and one is picked, so this always terminates.
        """
        occupied = set(self.snake)
        total = self.grid_width * self.grid_height
        if len(occupied) >= total:
            return None
        for _ in range(total):
            cell = (
                self.rng.randrange(self.grid_width) * self.cell_size,
                self.rng.randrange(self.grid_height) * self.cell_size,
            )
            if cell not in occupied:
                return cell
        free = [
            (x * self.cell_size, y * self.cell_size)
            for y in range(self.grid_height)
            for x in range(self.grid_width)
            if (x * self.cell_size, y * self.cell_size) not in occupied
        ]
        return self.rng.choice(free)

    # --- Rendering -----------------------------------------------------

    def frame(self) -> Frame:
        return Frame(
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            direction=self.direction,
            state=self.state,
        )

    def _render(self) -> None:
        self.renderer.render(self.frame())

    def _game_over(self) -> None:
        """Stop the tick source and show the final score."""
        self.state = GAME_OVER
        self.timer.cancel()
        logger.info("Game over with score %d (best %d)", self.score, self.high_score)
        self.renderer.render_game_over(self.score)
