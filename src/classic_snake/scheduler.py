"""Repeating tick source driven by the frame clock."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)


class RepeatingTimer:
    """Fire ``callback`` once per ``interval_ms`` of elapsed time while armed.

    The frame loop feeds elapsed milliseconds through :meth:`advance`. Arming
    and cancelling bump a generation counter, so a callback that cancels or
    re-arms the timer stops the remaining fires of the current ``advance``
    call immediately. There is only ever one live schedule.
    """

    def __init__(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._interval_ms: float = 0.0
        self._accumulator: float = 0.0
        self._active: bool = False
        self._generation: int = 0

    @property
    def active(self) -> bool:
        return self._active

    @property
    def interval_ms(self) -> float:
        return self._interval_ms

    def start(self, interval_ms: float) -> None:
        """Arm the timer, replacing any schedule that is already running."""
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms!r}")
        self._generation += 1
        self._interval_ms = float(interval_ms)
        self._accumulator = 0.0
        self._active = True
        logger.debug("Tick source armed at %.0f ms", self._interval_ms)

    def cancel(self) -> None:
        if not self._active:
            return
        self._generation += 1
        self._active = False
        self._accumulator = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Account for ``elapsed_ms`` and return how many times we fired."""
        if not self._active or elapsed_ms <= 0:
            return 0
        generation = self._generation
        self._accumulator += elapsed_ms
        fired = 0
        while self._accumulator >= self._interval_ms:
            self._accumulator -= self._interval_ms
            fired += 1
            self._callback()
            if self._generation != generation:
                break
        return fired
