"""
Session configuration for Connect-6 play.

Board size and win length are fixed module constants in connect6.board and
are intentionally not part of this configuration.
"""

import logging

import numpy as np

from .board import Player
from .game import GameMode


class GameConfig:
    """Configuration for a play session."""

    def __init__(self):
        # Game setup
        self.mode = GameMode.PVP
        self.ai_player = Player.TWO   # AI plays second, as white
        self.seed = None              # None for a fresh random seed

        # Pacing (seconds), console front end only
        self.ai_think_delay = (0.5, 1.0)
        self.human_move_pause = 0.3

        # Logging
        self.log_level = logging.INFO
        self.log_format = '%(asctime)s - %(levelname)s - %(message)s'

    def draw_ai_delay(self, rng: np.random.Generator) -> float:
        """Seconds the console AI pauses before moving, drawn from ai_think_delay."""
        low, high = self.ai_think_delay
        return float(rng.uniform(low, high))


def setup_logging(config: GameConfig) -> None:
    """Configure root logging for an interactive session."""
    logging.basicConfig(level=config.log_level, format=config.log_format)
