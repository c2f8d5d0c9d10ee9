"""
Players and match running for Connect-6.

A player is any object with a ``name`` and a ``get_move(game)`` method
returning a Position. play_game() pits two players against each other and
evaluate_strength() measures one AI tier against another.
"""

from typing import Dict, Optional
import logging

import numpy as np

from .board import Board, Player, Position
from .game import Connect6, GameStatus
from .strategies import Difficulty, create_strategy

logger = logging.getLogger(__name__)


class InvalidMoveError(ValueError):
    """A player produced a move the engine refused."""


def parse_move(text: str) -> Position:
    """
    Parse human input: algebraic (``H8``) or two 1-based numbers (``8 8``, row then column).

    Raises:
        ValueError: If the text is not a coordinate on the board
    """
    parts = text.replace(",", " ").split()
    if len(parts) == 2 and all(p.isdigit() for p in parts):
        row, col = int(parts[0]) - 1, int(parts[1]) - 1
        if not Board.in_bounds(row, col):
            raise ValueError(f"Off the board: {text!r}")
        return Position(row, col)
    return Position.from_notation(text)


class AIPlayer:
    """Computer player backed by a difficulty tier's strategy."""

    def __init__(self, difficulty: Difficulty, rng: Optional[np.random.Generator] = None,
                 name: str = None):
        self.difficulty = difficulty
        self.strategy = create_strategy(difficulty, rng)
        self.name = name or f"AI ({difficulty.value})"

    def get_move(self, game: Connect6) -> Position:
        """Get the strategy's move for the player to move."""
        return self.strategy.select_move(game.board, game.current_player)


def play_game(player1, player2, game: Connect6 = None, verbose: bool = False) -> Connect6:
    """
    Play a game between two players.

    Args:
        player1: Player ONE (moves first)
        player2: Player TWO
        game: Game to play on; a fresh PvP game if None
        verbose: Print the board after each move

    Returns:
        Connect6: The finished game

    Raises:
        InvalidMoveError: If a player returns a move the engine rejects
    """
    if game is None:
        game = Connect6()

    players = {Player.ONE: player1, Player.TWO: player2}

    while not game.is_game_over():
        current = players[game.current_player]
        pos = current.get_move(game)

        result = game.apply_move(pos.row, pos.col)
        if not result:
            raise InvalidMoveError(f"Invalid move {pos.notation} by {current.name}: "
                                   f"{result.reason.value}")
        if verbose:
            print(str(game))

    logger.info(f"{player1.name} vs {player2.name}: {game.game_status.value} "
                f"in {game.get_move_count()} moves")
    return game


def evaluate_strength(difficulty: Difficulty,
                      baseline: Difficulty = Difficulty.EASY,
                      num_games: int = 10,
                      seed: Optional[int] = None) -> Dict[str, float]:
    """
    Evaluate one AI tier against another.

    Colours alternate every game so neither side keeps the first-move
    advantage.

    Args:
        difficulty: Tier to evaluate
        baseline: Opposing tier
        num_games: Number of games to play
        seed: Seed for the random tiers

    Returns:
        results: Dictionary with win rates and other metrics
    """
    logger.info(f"Evaluating {difficulty.value} against {baseline.value} over {num_games} games")

    rng = np.random.default_rng(seed)
    candidate = AIPlayer(difficulty, rng)
    opponent = AIPlayer(baseline, rng, name=f"Baseline ({baseline.value})")

    wins = 0
    draws = 0
    losses = 0

    for i in range(num_games):
        if i % 2 == 0:
            game = play_game(candidate, opponent)
            candidate_side = Player.ONE
        else:
            game = play_game(opponent, candidate)
            candidate_side = Player.TWO

        if game.game_status == GameStatus.DRAW:
            draws += 1
        elif game.get_winner() == candidate_side:
            wins += 1
        else:
            losses += 1

    win_rate = wins / num_games
    draw_rate = draws / num_games
    loss_rate = losses / num_games

    logger.info(f"Evaluation complete: Win rate = {win_rate:.3f}, "
                f"Draw rate = {draw_rate:.3f}, Loss rate = {loss_rate:.3f}")

    return {
        'win_rate': win_rate,
        'draw_rate': draw_rate,
        'loss_rate': loss_rate,
        'wins': wins,
        'draws': draws,
        'losses': losses,
        'total_games': num_games
    }
