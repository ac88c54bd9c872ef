"""
Snack Dash
==========
How to run: pip install -e .; snackdash   (or: python -m snackdash)
Controls: Left/Right or A/D to switch lanes; click or tap the left/right half of the window.
Enter / Space or the on-screen button starts a run. ESC quits.
Goal: keep the balance meter above zero. Good snacks top it up and score points,
junk drains it, and it slowly runs down on its own.
"""
from __future__ import annotations

import logging

from .game import Game


# --------------------------------------------------------------------------------------
# Entry point
# --------------------------------------------------------------------------------------
def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    game = Game()
    game.run()


if __name__ == "__main__":
    main()
