"""
Connect-6 Board

The 15x15 grid, its move log and the win check. Players take turns placing
one stone on any empty intersection; the first to connect 6 stones in a row
(horizontally, vertically, or diagonally) wins.

The hot loops (win check, run measurement and the whole-board threat scan
used by the lookahead AI) are numba-compiled kernels operating directly on
the numpy grid.
"""

from typing import List, NamedTuple, Optional, Tuple
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
import logging

import numpy as np
from numba import jit

logger = logging.getLogger(__name__)

BOARD_SIZE = 15
WIN_LENGTH = 6
MAX_MOVES = BOARD_SIZE * BOARD_SIZE
CENTER = BOARD_SIZE // 2

EMPTY = 0

# Horizontal, vertical, main diagonal, anti-diagonal
DIRECTIONS = np.array([[0, 1], [1, 0], [1, 1], [1, -1]], dtype=np.int64)

COLUMN_LETTERS = "ABCDEFGHIJKLMNO"


class Player(Enum):
    """Enumeration for players in the game."""
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> 'Player':
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def symbol(self) -> str:
        return "X" if self is Player.ONE else "O"


class Position(NamedTuple):
    """A board intersection."""
    row: int
    col: int

    @property
    def notation(self) -> str:
        """Column letter plus 1-based row, e.g. ``H8`` for the centre."""
        return f"{COLUMN_LETTERS[self.col]}{self.row + 1}"

    @classmethod
    def from_notation(cls, text: str) -> 'Position':
        """
        Parse algebraic notation such as ``h8`` or ``O15``.

        Raises:
            ValueError: If the text is not a coordinate on the board
        """
        text = text.strip().upper()
        if len(text) < 2 or text[0] not in COLUMN_LETTERS or not text[1:].isdigit():
            raise ValueError(f"Not a board coordinate: {text!r}")
        row = int(text[1:]) - 1
        if not 0 <= row < BOARD_SIZE:
            raise ValueError(f"Row out of range: {text!r}")
        return cls(row, COLUMN_LETTERS.index(text[0]))


class Move(NamedTuple):
    """An applied placement, as recorded in the move log."""
    row: int
    col: int
    player: Player


class RejectReason(Enum):
    """Why a placement was refused."""
    OUT_OF_RANGE = "out_of_range"
    OCCUPIED = "occupied"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of a placement attempt.

    Truthy when the move was applied, so callers can keep writing
    ``if game.apply_move(r, c): ...``.
    """
    applied: bool
    reason: Optional[RejectReason] = None

    def __bool__(self) -> bool:
        return self.applied

    @classmethod
    def ok(cls) -> 'MoveResult':
        return cls(True)

    @classmethod
    def rejected(cls, reason: RejectReason) -> 'MoveResult':
        return cls(False, reason)


# JIT-compiled kernels
@jit(nopython=True, cache=True)
def _jit_check_win(board: np.ndarray, row: int, col: int, player_value: int,
                   win_length: int, size: int) -> bool:
    """
    JIT-compiled check whether a stone at (row, col) completes a winning run.

    The cell at (row, col) itself is never read, so the answer is the same
    whether the stone is already on the board or only hypothetical.

    Args:
        board: The game board as numpy array
        row: Row of the placed piece
        col: Column of the placed piece
        player_value: Value representing the player (1 or 2)
        win_length: Number of stones needed to win
        size: Board side length

    Returns:
        bool: True if the run through (row, col) reaches win_length
    """
    for i in range(4):
        dr = DIRECTIONS[i, 0]
        dc = DIRECTIONS[i, 1]
        count = 1

        r, c = row + dr, col + dc
        while 0 <= r < size and 0 <= c < size and board[r, c] == player_value:
            count += 1
            r, c = r + dr, c + dc

        r, c = row - dr, col - dc
        while 0 <= r < size and 0 <= c < size and board[r, c] == player_value:
            count += 1
            r, c = r - dr, c - dc

        if count >= win_length:
            return True

    return False


@jit(nopython=True, cache=True)
def _jit_run_through(board: np.ndarray, row: int, col: int, dr: int, dc: int,
                     player_value: int, size: int) -> Tuple[int, bool]:
    """
    JIT-compiled measurement of the contiguous run through (row, col).

    Counts the stone at (row, col) as the player's, walks both ways along
    (dr, dc) and reports whether either cell just beyond the run is empty.

    Returns:
        (length, has_open_end)
    """
    length = 1
    open_end = False

    r, c = row + dr, col + dc
    while 0 <= r < size and 0 <= c < size and board[r, c] == player_value:
        length += 1
        r, c = r + dr, c + dc
    if 0 <= r < size and 0 <= c < size and board[r, c] == 0:
        open_end = True

    r, c = row - dr, col - dc
    while 0 <= r < size and 0 <= c < size and board[r, c] == player_value:
        length += 1
        r, c = r - dr, c - dc
    if 0 <= r < size and 0 <= c < size and board[r, c] == 0:
        open_end = True

    return length, open_end


@jit(nopython=True, cache=True)
def _jit_count_winning_cells(board: np.ndarray, player_value: int,
                             win_length: int, size: int) -> int:
    """
    JIT-compiled count of empty cells where a stone of player_value would win.

    This is the quadratic inner scan of the lookahead AI: it is called once
    per candidate, and each call visits the whole board.
    """
    count = 0
    for r in range(size):
        for c in range(size):
            if board[r, c] == 0 and _jit_check_win(board, r, c, player_value,
                                                   win_length, size):
                count += 1
    return count


class Board:
    """
    The Connect-6 grid.

    The grid is a numpy array where:
    - 0 represents an empty cell
    - 1 represents player ONE's stone
    - 2 represents player TWO's stone

    All writes go through place() or the reversible trial() context.

    Attributes:
        size (int): Board side length (always BOARD_SIZE)
        cells (np.ndarray): The grid
        move_count (int): Number of stones on the board
        last_move (Optional[Position]): Most recent accepted placement
    """

    def __init__(self):
        self.size = BOARD_SIZE
        self.cells = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        self.move_count = 0
        self.last_move: Optional[Position] = None
        self._history: List[Move] = []

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def get_cell(self, row: int, col: int) -> int:
        return int(self.cells[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and bool(self.cells[row, col] == EMPTY)

    def place(self, row: int, col: int, player: Player) -> MoveResult:
        """
        Place a stone for player at (row, col).

        Args:
            row (int): Row index (0-based)
            col (int): Column index (0-based)
            player (Player): Owner of the stone

        Returns:
            MoveResult: Applied, or rejected with OUT_OF_RANGE / OCCUPIED
        """
        if not self.in_bounds(row, col):
            return MoveResult.rejected(RejectReason.OUT_OF_RANGE)
        if self.cells[row, col] != EMPTY:
            return MoveResult.rejected(RejectReason.OCCUPIED)

        self.cells[row, col] = player.value
        self._history.append(Move(row, col, player))
        self.move_count += 1
        self.last_move = Position(row, col)
        return MoveResult.ok()

    @contextmanager
    def trial(self, row: int, col: int, player: Player):
        """
        Temporarily place a stone, restoring the empty cell on exit.

        The move log and counter are left untouched.

        Raises:
            ValueError: If (row, col) is off the board or not empty
        """
        if not self.is_empty(row, col):
            raise ValueError(f"Cannot trial a stone on ({row}, {col})")
        self.cells[row, col] = player.value
        try:
            yield self
        finally:
            self.cells[row, col] = EMPTY

    def check_win(self, row: int, col: int, player: Player) -> bool:
        """
        Check whether the stone at (row, col) gives player six in a row.

        Only valid for the cell just placed (or about to be placed): the
        search is local to the four lines through that cell.
        """
        return bool(_jit_check_win(self.cells, row, col, player.value,
                                   WIN_LENGTH, BOARD_SIZE))

    def run_through(self, row: int, col: int, dr: int, dc: int,
                    player: Player) -> Tuple[int, bool]:
        """Length and openness of player's run through (row, col) along (dr, dc)."""
        length, open_end = _jit_run_through(self.cells, row, col, dr, dc,
                                            player.value, BOARD_SIZE)
        return int(length), bool(open_end)

    def count_winning_cells(self, player: Player) -> int:
        """Number of empty cells where a stone of player would complete six."""
        return int(_jit_count_winning_cells(self.cells, player.value,
                                            WIN_LENGTH, BOARD_SIZE))

    def count_neighbors(self, row: int, col: int, player: Player) -> int:
        """Stones of player among the 8 cells around (row, col)."""
        window = self.cells[max(row - 1, 0):row + 2, max(col - 1, 0):col + 2]
        count = int(np.count_nonzero(window == player.value))
        if self.cells[row, col] == player.value:
            count -= 1
        return count

    def empty_cells(self) -> List[Position]:
        """All empty cells in row-major order."""
        return [Position(int(r), int(c)) for r, c in np.argwhere(self.cells == EMPTY)]

    def is_full(self) -> bool:
        return self.move_count >= MAX_MOVES

    def get_board(self) -> List[List[int]]:
        """
        Get a copy of the current grid.

        Returns:
            List[List[int]]: A copy of the board
        """
        return self.cells.tolist()

    def get_move_history(self) -> List[Move]:
        return list(self._history)

    def reset(self) -> None:
        """Clear every cell and the move log."""
        self.cells.fill(EMPTY)
        self.move_count = 0
        self.last_move = None
        self._history = []

    def __str__(self) -> str:
        """
        String representation of the grid.

        Returns:
            str: Column letters across the top, 1-based row numbers down the side
        """
        result = ["   " + " ".join(COLUMN_LETTERS[:self.size])]
        for r in range(self.size):
            row_str = []
            for c in range(self.size):
                cell = self.cells[r, c]
                if cell == EMPTY:
                    row_str.append(".")
                else:
                    row_str.append(Player(int(cell)).symbol)
            result.append(f"{r + 1:>2} " + " ".join(row_str))
        return "\n".join(result)
