"""Entry point for the Classic Snake game."""

from __future__ import annotations

from classic_snake.app import main

if __name__ == "__main__":
    main()
