"""
Connect-6 Game Implementation

Two players alternately place stones on a 15x15 board; the first to line
up 6 stones horizontally, vertically, or diagonally wins. A game can be
played human-vs-human or against an AI at one of three difficulty tiers.

The Connect6 class is the single owner of all game state: board, status,
whose turn it is and the game mode.
"""

from typing import Dict, List, Optional
from enum import Enum
import logging

import numpy as np

from .board import Board, Move, MoveResult, Player, Position, RejectReason
from .strategies import Difficulty, MoveSelector, create_strategy

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    """Enumeration for game states."""
    IN_PROGRESS = "in_progress"
    PLAYER_ONE_WINS = "player_one_wins"
    PLAYER_TWO_WINS = "player_two_wins"
    DRAW = "draw"


class GameMode(Enum):
    """Who plays against whom."""
    PVP = "pvp"
    PVE_EASY = "pve_easy"
    PVE_MEDIUM = "pve_medium"
    PVE_HARD = "pve_hard"

    @property
    def difficulty(self) -> Optional[Difficulty]:
        """AI tier for this mode, None for human-vs-human."""
        return _MODE_DIFFICULTY.get(self)

    @property
    def display_name(self) -> str:
        return _MODE_NAMES[self]


_MODE_DIFFICULTY = {
    GameMode.PVE_EASY: Difficulty.EASY,
    GameMode.PVE_MEDIUM: Difficulty.MEDIUM,
    GameMode.PVE_HARD: Difficulty.HARD,
}

_MODE_NAMES = {
    GameMode.PVP: "Human vs Human",
    GameMode.PVE_EASY: "Human vs AI (easy)",
    GameMode.PVE_MEDIUM: "Human vs AI (medium)",
    GameMode.PVE_HARD: "Human vs AI (hard)",
}


class Connect6:
    """
    Connect-6 game engine.

    Attributes:
        board (Board): The game board
        current_player (Player): The player to move
        game_status (GameStatus): Current state of the game
        mode (GameMode): Game mode, fixed until the next reset
    """

    def __init__(self, mode: GameMode = GameMode.PVP,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize a new Connect-6 game.

        Args:
            mode (GameMode): Human-vs-human or one of the AI tiers
            rng (np.random.Generator): Random source for the easy AI
        """
        self.board = Board()
        self.current_player = Player.ONE
        self.game_status = GameStatus.IN_PROGRESS
        self.mode = mode
        self._rng = rng if rng is not None else np.random.default_rng()
        self._strategies: Dict[Difficulty, MoveSelector] = {}

    @property
    def difficulty(self) -> Optional[Difficulty]:
        return self.mode.difficulty

    def apply_move(self, row: int, col: int, player: Optional[Player] = None) -> MoveResult:
        """
        Place a stone and advance the game.

        Args:
            row (int): Row index (0-based)
            col (int): Column index (0-based)
            player (Player): Stone owner; defaults to the player to move

        Returns:
            MoveResult: Truthy if applied, otherwise carries the RejectReason
        """
        if player is None:
            player = self.current_player

        if self.game_status != GameStatus.IN_PROGRESS:
            result = MoveResult.rejected(RejectReason.GAME_OVER)
        else:
            result = self.board.place(row, col, player)

        if not result:
            logger.debug(f"Rejected {player.name} at ({row}, {col}): {result.reason.value}")
            return result

        self._update_game_status(row, col, player)

        # Switch players if game is still in progress
        if self.game_status == GameStatus.IN_PROGRESS:
            self.current_player = player.opponent

        return result

    def _update_game_status(self, last_row: int, last_col: int, player: Player) -> None:
        """
        Update the game status after a move.

        Args:
            last_row (int): Row of the last placed stone
            last_col (int): Column of the last placed stone
            player (Player): Owner of that stone
        """
        if self.board.check_win(last_row, last_col, player):
            if player == Player.ONE:
                self.game_status = GameStatus.PLAYER_ONE_WINS
            else:
                self.game_status = GameStatus.PLAYER_TWO_WINS
            logger.info(f"{player.name} wins after {self.board.move_count} moves")
            return

        if self.board.is_full():
            self.game_status = GameStatus.DRAW
            logger.info("Board full, game drawn")

    def select_ai_move(self, difficulty: Optional[Difficulty] = None) -> Position:
        """
        Ask the AI for a move on behalf of the player to move.

        Args:
            difficulty: Tier to use; defaults to the tier of the game mode

        Returns:
            Position: An empty cell

        Raises:
            ValueError: In PvP mode with no difficulty given, once the game is over,
                or on a full board
        """
        if self.is_game_over():
            raise ValueError(f"Game is over: {self.game_status.value}")
        difficulty = difficulty or self.difficulty
        if difficulty is None:
            raise ValueError("No AI difficulty in human-vs-human mode")
        return self._strategy(difficulty).select_move(self.board, self.current_player)

    def play_ai_move(self, difficulty: Optional[Difficulty] = None) -> Optional[Position]:
        """
        Select and apply an AI move for the player to move.

        Returns:
            Optional[Position]: The cell played, or None if the game is already over
        """
        if self.is_game_over():
            return None
        pos = self.select_ai_move(difficulty)
        self.apply_move(pos.row, pos.col)
        return pos

    def _strategy(self, difficulty: Difficulty) -> MoveSelector:
        if difficulty not in self._strategies:
            self._strategies[difficulty] = create_strategy(difficulty, self._rng)
        return self._strategies[difficulty]

    def get_status(self) -> GameStatus:
        return self.game_status

    def get_last_move(self) -> Optional[Position]:
        return self.board.last_move

    def get_move_count(self) -> int:
        return self.board.move_count

    def get_move_history(self) -> List[Move]:
        return self.board.get_move_history()

    def get_current_player(self) -> Player:
        return self.current_player

    def get_board(self) -> List[List[int]]:
        """
        Get a copy of the current board state.

        Returns:
            List[List[int]]: A copy of the board
        """
        return self.board.get_board()

    def get_valid_moves(self) -> List[Position]:
        """
        Get all empty cells, in row-major order.

        Returns:
            List[Position]: Empty cells, or [] once the game is over
        """
        if self.game_status != GameStatus.IN_PROGRESS:
            return []
        return self.board.empty_cells()

    def is_valid_move(self, row: int, col: int) -> bool:
        if self.game_status != GameStatus.IN_PROGRESS:
            return False
        return self.board.is_empty(row, col)

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            Optional[Player]: The winning player, or None if no winner yet
        """
        if self.game_status == GameStatus.PLAYER_ONE_WINS:
            return Player.ONE
        elif self.game_status == GameStatus.PLAYER_TWO_WINS:
            return Player.TWO
        return None

    def is_game_over(self) -> bool:
        return self.game_status != GameStatus.IN_PROGRESS

    def reset(self, mode: Optional[GameMode] = None) -> None:
        """Start a new game, optionally switching the game mode."""
        self.board.reset()
        self.current_player = Player.ONE
        self.game_status = GameStatus.IN_PROGRESS
        if mode is not None:
            self.mode = mode
        logger.info(f"New game: {self.mode.display_name}")

    def __str__(self) -> str:
        """
        String representation of the game.

        Returns:
            str: The board followed by a status line
        """
        result = [str(self.board)]

        info = f"Moves: {self.board.move_count}"
        if self.board.last_move is not None:
            info += f"  Last: {self.board.last_move.notation}"
        info += f"  Mode: {self.mode.display_name}"
        result.append(info)

        if self.game_status == GameStatus.IN_PROGRESS:
            result.append(f"Current player: {self.current_player.name} ({self.current_player.symbol})")
        elif self.game_status == GameStatus.DRAW:
            result.append("Game ended in a draw!")
        else:
            winner = self.get_winner()
            result.append(f"Player {winner.name} wins!")

        return "\n".join(result)
