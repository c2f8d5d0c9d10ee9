"""
Run scoring for the heuristic AIs.

A run is a contiguous line of one player's stones. It is "open" when at
least one of the cells just beyond its ends is empty, and "blocked" when
both ends hit the board edge or an opposing stone.
"""

from .board import BOARD_SIZE, CENTER, WIN_LENGTH

# Indexed by run length, capped at WIN_LENGTH
OPEN_RUN_SCORES = (0, 0, 1, 10, 100, 1000, 10000)
BLOCKED_RUN_SCORES = (0, 0, 0, 5, 50, 500, 5000)


def evaluate_pattern(run_length: int, has_open_end: bool) -> int:
    """
    Score a run of stones.

    Args:
        run_length: Number of contiguous stones, including the candidate cell
        has_open_end: Whether either end of the run can still be extended

    Returns:
        int: Heuristic value; longer is better, open beats blocked
    """
    length = min(max(run_length, 0), WIN_LENGTH)
    if has_open_end:
        return OPEN_RUN_SCORES[length]
    return BLOCKED_RUN_SCORES[length]


def center_bonus(row: int, col: int, weight: int) -> int:
    """Reward for cells near the middle: (BOARD_SIZE - manhattan distance) * weight."""
    distance = abs(row - CENTER) + abs(col - CENTER)
    return (BOARD_SIZE - distance) * weight
