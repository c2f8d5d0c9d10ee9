"""
AI move selection for Connect-6.

Three strategies, one per difficulty tier:

- RandomStrategy (easy): any empty cell, uniformly.
- HeuristicStrategy (medium): win if possible, block if necessary, else
  pick the cell with the best run/centre score.
- LookaheadStrategy (hard): same tactical checks, then score every
  candidate by the immediate wins it leaves for both sides one ply later.

Every strategy is deterministic apart from RandomStrategy, and ties are
broken in favour of the first cell in row-major order.
"""

from typing import Optional
from enum import Enum
import logging
import time

import numpy as np

from .board import Board, DIRECTIONS, Player, Position
from .patterns import center_bonus, evaluate_pattern

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """AI difficulty tiers."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class MoveSelector:
    """Base class for AI strategies."""

    name = "AI"

    def select_move(self, board: Board, player: Player) -> Position:
        """
        Choose a cell for player on board.

        Args:
            board: Current board; left unchanged on return
            player: The side the AI is playing

        Returns:
            Position: An empty cell

        Raises:
            ValueError: If the board has no empty cell
        """
        raise NotImplementedError


class RandomStrategy(MoveSelector):
    """Uniformly random empty cell."""

    name = "Random"

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def select_move(self, board: Board, player: Player) -> Position:
        empty = board.empty_cells()
        if not empty:
            raise ValueError("No empty cell left to play")
        return empty[int(self.rng.integers(len(empty)))]


class _TacticalStrategy(MoveSelector):
    """
    Shared skeleton for the scoring strategies.

    Takes an immediate win, then blocks an immediate loss, then falls back
    to the subclass's per-cell score.
    """

    def select_move(self, board: Board, player: Player) -> Position:
        empty = board.empty_cells()
        if not empty:
            raise ValueError("No empty cell left to play")

        win = self.find_winning_cell(board, player, empty)
        if win is not None:
            logger.debug(f"{self.name}: winning at {win.notation}")
            return win

        block = self.find_winning_cell(board, player.opponent, empty)
        if block is not None:
            logger.debug(f"{self.name}: blocking at {block.notation}")
            return block

        start = time.perf_counter()
        best_pos = None
        best_score = None
        for pos in empty:
            score = self.score_cell(board, pos, player)
            if best_score is None or score > best_score:
                best_score = score
                best_pos = pos

        logger.debug(f"{self.name}: chose {best_pos.notation} (score {best_score}) "
                     f"in {time.perf_counter() - start:.3f}s")
        return best_pos

    @staticmethod
    def find_winning_cell(board: Board, player: Player, empty=None) -> Optional[Position]:
        """First empty cell (row-major) where a stone of player wins outright."""
        if empty is None:
            empty = board.empty_cells()
        for pos in empty:
            with board.trial(pos.row, pos.col, player):
                if board.check_win(pos.row, pos.col, player):
                    return pos
        return None

    def score_cell(self, board: Board, pos: Position, player: Player) -> int:
        raise NotImplementedError


class HeuristicStrategy(_TacticalStrategy):
    """Pattern-based scoring of each empty cell."""

    name = "Heuristic"

    # Defence outweighs attack
    OPPONENT_WEIGHT = 2
    CENTER_WEIGHT = 2

    def score_cell(self, board: Board, pos: Position, player: Player) -> int:
        opponent = player.opponent
        score = 0
        for dr, dc in DIRECTIONS:
            own_length, own_open = board.run_through(pos.row, pos.col, dr, dc, player)
            score += evaluate_pattern(own_length, own_open)

            opp_length, opp_open = board.run_through(pos.row, pos.col, dr, dc, opponent)
            score += evaluate_pattern(opp_length, opp_open) * self.OPPONENT_WEIGHT

        score += center_bonus(pos.row, pos.col, self.CENTER_WEIGHT)
        return score


class LookaheadStrategy(_TacticalStrategy):
    """
    One-ply lookahead.

    For each candidate the AI stone is placed on a trial basis and the
    resulting board is scanned for every cell that would then win for
    either side. This is deliberately shallow: there is no recursion into
    replies. The scan costs O(cells^2) per move, which stays cheap only
    because the board is fixed at 15x15.
    """

    name = "Lookahead"

    THREAT_SCORE = 100
    DANGER_SCORE = -150
    CENTER_WEIGHT = 3
    OWN_NEIGHBOR_SCORE = 5
    OPPONENT_NEIGHBOR_SCORE = 3

    def score_cell(self, board: Board, pos: Position, player: Player) -> int:
        opponent = player.opponent
        with board.trial(pos.row, pos.col, player):
            score = board.count_winning_cells(player) * self.THREAT_SCORE
            score += board.count_winning_cells(opponent) * self.DANGER_SCORE
            score += center_bonus(pos.row, pos.col, self.CENTER_WEIGHT)
            score += board.count_neighbors(pos.row, pos.col, player) * self.OWN_NEIGHBOR_SCORE
            score += board.count_neighbors(pos.row, pos.col, opponent) * self.OPPONENT_NEIGHBOR_SCORE
        return score


def create_strategy(difficulty: Difficulty,
                    rng: Optional[np.random.Generator] = None) -> MoveSelector:
    """
    Build the strategy for a difficulty tier.

    Args:
        difficulty: Tier to play at
        rng: Random generator for the easy tier (ignored by the others)
    """
    if difficulty == Difficulty.EASY:
        return RandomStrategy(rng)
    if difficulty == Difficulty.MEDIUM:
        return HeuristicStrategy()
    if difficulty == Difficulty.HARD:
        return LookaheadStrategy()
    raise ValueError(f"Unknown difficulty: {difficulty!r}")
