"""
Test suite for the Connect-6 board, win check and pattern scoring.
"""

import numpy as np
import pytest

from connect6.board import (
    BOARD_SIZE, MAX_MOVES, Board, Move, Player, Position, RejectReason
)
from connect6.patterns import center_bonus, evaluate_pattern


def brute_force_win(cells, row, col, player_value):
    """Reference win check: scan each full line through (row, col)."""
    for dr, dc in [(0, 1), (1, 0), (1, 1), (1, -1)]:
        # Walk back to the start of the line, then forwards across the board
        r, c = row, col
        while 0 <= r - dr < BOARD_SIZE and 0 <= c - dc < BOARD_SIZE:
            r, c = r - dr, c - dc
        run = 0
        covers = False
        while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
            if cells[r][c] == player_value:
                run += 1
                if (r, c) == (row, col):
                    covers = True
            else:
                if covers and run >= 6:
                    return True
                run = 0
                covers = False
            r, c = r + dr, c + dc
        if covers and run >= 6:
            return True
    return False


class TestBoardInitialization:
    """Test a fresh board."""

    def test_empty_board(self):
        """Test that the board starts with 225 empty cells."""
        board = Board()
        grid = board.get_board()
        assert len(grid) == 15
        assert all(len(row) == 15 for row in grid)
        assert all(cell == 0 for row in grid for cell in row)
        assert board.move_count == 0
        assert board.last_move is None
        assert len(board.empty_cells()) == MAX_MOVES

    def test_get_board_copy(self):
        """Test that get_board returns a copy."""
        board = Board()
        grid = board.get_board()
        grid[0][0] = 99
        assert board.get_cell(0, 0) == 0


class TestPlacement:
    """Test place() validation and bookkeeping."""

    def test_place_records_move(self):
        """Test that a placement updates the cell, log, counter and last move."""
        board = Board()
        result = board.place(3, 4, Player.ONE)

        assert result
        assert result.applied is True
        assert result.reason is None
        assert board.get_cell(3, 4) == Player.ONE.value
        assert board.move_count == 1
        assert board.last_move == Position(3, 4)
        assert board.get_move_history() == [Move(3, 4, Player.ONE)]

    def test_is_empty_returns_plain_bool(self):
        """Test that is_empty answers with Python bools, not numpy scalars."""
        board = Board()
        assert board.is_empty(0, 0) is True
        board.place(0, 0, Player.TWO)
        assert board.is_empty(0, 0) is False
        assert board.is_empty(-1, 0) is False
        assert board.is_empty(0, 15) is False

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (15, 0), (0, 15), (20, 20)])
    def test_out_of_range_rejected(self, row, col):
        """Test that off-board coordinates are rejected."""
        board = Board()
        result = board.place(row, col, Player.ONE)
        assert not result
        assert result.reason == RejectReason.OUT_OF_RANGE
        assert board.move_count == 0

    def test_occupied_rejected_and_unchanged(self):
        """Test that a cell can never be written twice."""
        board = Board()
        board.place(7, 7, Player.ONE)
        result = board.place(7, 7, Player.TWO)

        assert not result
        assert result.reason == RejectReason.OCCUPIED
        assert board.get_cell(7, 7) == Player.ONE.value
        assert board.move_count == 1
        assert board.last_move == Position(7, 7)

    def test_move_count_matches_stones(self):
        """Test that the counter equals the number of stones after mixed attempts."""
        board = Board()
        rng = np.random.default_rng(3)
        for i in range(300):
            row, col = rng.integers(-1, 16, size=2)
            board.place(int(row), int(col), Player.ONE if i % 2 else Player.TWO)
        assert board.move_count == int(np.count_nonzero(board.cells))
        assert len(board.get_move_history()) == board.move_count

    def test_is_full(self):
        """Test full-board detection."""
        board = Board()
        for r in range(BOARD_SIZE):
            for c in range(BOARD_SIZE):
                assert not board.is_full()
                board.place(r, c, Player.ONE if (r + c) % 2 else Player.TWO)
        assert board.is_full()
        assert board.empty_cells() == []

    def test_reset(self):
        """Test that reset clears everything."""
        board = Board()
        board.place(1, 1, Player.ONE)
        board.place(2, 2, Player.TWO)
        board.reset()

        assert board.move_count == 0
        assert board.last_move is None
        assert board.get_move_history() == []
        assert not board.cells.any()


class TestTrialPlacement:
    """Test the reversible trial() context."""

    def test_trial_places_and_restores(self):
        """Test that the stone exists only inside the context."""
        board = Board()
        with board.trial(5, 5, Player.TWO):
            assert board.get_cell(5, 5) == Player.TWO.value
        assert board.get_cell(5, 5) == 0
        assert board.move_count == 0
        assert board.get_move_history() == []

    def test_trial_restores_on_exception(self):
        """Test that the cell is restored when the body raises."""
        board = Board()
        with pytest.raises(RuntimeError):
            with board.trial(5, 5, Player.ONE):
                raise RuntimeError("boom")
        assert board.get_cell(5, 5) == 0

    def test_trial_restores_on_early_return(self):
        """Test that returning from inside the context restores the cell."""
        board = Board()

        def probe():
            with board.trial(0, 0, Player.ONE):
                return board.get_cell(0, 0)

        assert probe() == Player.ONE.value
        assert board.get_cell(0, 0) == 0

    def test_trial_on_occupied_cell(self):
        """Test that trial refuses occupied and off-board cells."""
        board = Board()
        board.place(4, 4, Player.ONE)
        with pytest.raises(ValueError):
            with board.trial(4, 4, Player.TWO):
                pass
        with pytest.raises(ValueError):
            with board.trial(-1, 4, Player.TWO):
                pass
        assert board.get_cell(4, 4) == Player.ONE.value


class TestWinDetection:
    """Test the local six-in-a-row check."""

    def test_horizontal_six(self):
        """Test horizontal win detection."""
        board = Board()
        for c in range(6):
            board.place(7, c, Player.ONE)
        assert board.check_win(7, 5, Player.ONE)
        assert board.check_win(7, 2, Player.ONE)

    def test_five_is_not_a_win(self):
        """Test that five in a row never wins, open or blocked."""
        board = Board()
        for c in range(5):
            board.place(7, c, Player.ONE)
        assert not board.check_win(7, 4, Player.ONE)
        board.place(7, 5, Player.TWO)
        assert not board.check_win(7, 4, Player.ONE)

    def test_vertical_six(self):
        """Test vertical win detection."""
        board = Board()
        for r in range(9, 15):
            board.place(r, 14, Player.TWO)
        assert board.check_win(14, 14, Player.TWO)
        assert not board.check_win(14, 14, Player.ONE)

    def test_diagonal_six(self):
        """Test main-diagonal win detection."""
        board = Board()
        for i in range(6):
            board.place(2 + i, 3 + i, Player.ONE)
        assert board.check_win(4, 5, Player.ONE)

    def test_anti_diagonal_six(self):
        """Test anti-diagonal win detection."""
        board = Board()
        for i in range(6):
            board.place(i, 14 - i, Player.TWO)
        assert board.check_win(0, 14, Player.TWO)

    def test_overline_wins(self):
        """Test that seven in a row also counts as a win."""
        board = Board()
        for c in range(7):
            board.place(0, c, Player.ONE)
        assert board.check_win(0, 3, Player.ONE)

    def test_gap_breaks_run(self):
        """Test that an opposing stone splits a line."""
        board = Board()
        for c in [0, 1, 2, 4, 5, 6]:
            board.place(7, c, Player.ONE)
        board.place(7, 3, Player.TWO)
        assert not board.check_win(7, 2, Player.ONE)
        assert not board.check_win(7, 4, Player.ONE)

    def test_hypothetical_check_on_empty_cell(self):
        """Test that the check answers for an empty cell as if a stone were there."""
        board = Board()
        for c in range(5):
            board.place(7, c, Player.ONE)
        assert board.check_win(7, 5, Player.ONE)
        assert board.get_cell(7, 5) == 0

    def test_matches_brute_force(self):
        """Test the local check against a full-line scan on random boards."""
        rng = np.random.default_rng(11)
        for _ in range(20):
            board = Board()
            # Dense, lopsided boards so that long runs actually occur
            fill = rng.random((BOARD_SIZE, BOARD_SIZE))
            for r in range(BOARD_SIZE):
                for c in range(BOARD_SIZE):
                    if fill[r, c] < 0.6:
                        board.place(r, c, Player.ONE)
                    elif fill[r, c] < 0.75:
                        board.place(r, c, Player.TWO)

            grid = board.get_board()
            for r in range(BOARD_SIZE):
                for c in range(BOARD_SIZE):
                    value = grid[r][c]
                    if value == 0:
                        continue
                    player = Player(value)
                    assert board.check_win(r, c, player) == brute_force_win(grid, r, c, value)


class TestRunMeasurement:
    """Test run_through, count_winning_cells and count_neighbors."""

    def test_open_run(self):
        """Test a run with empty cells beyond both ends."""
        board = Board()
        board.place(7, 5, Player.ONE)
        board.place(7, 6, Player.ONE)
        assert board.run_through(7, 7, 0, 1, Player.ONE) == (3, True)

    def test_blocked_run(self):
        """Test a run against the edge on one side and an opponent on the other."""
        board = Board()
        board.place(0, 0, Player.ONE)
        board.place(0, 1, Player.ONE)
        board.place(0, 3, Player.TWO)
        assert board.run_through(0, 2, 0, 1, Player.ONE) == (3, False)

    def test_lone_cell(self):
        """Test that a cell with no neighbours is a run of one."""
        board = Board()
        assert board.run_through(7, 7, 1, 1, Player.TWO) == (1, True)

    def test_count_winning_cells(self):
        """Test counting cells that would complete six."""
        board = Board()
        for c in range(3, 8):
            board.place(7, c, Player.ONE)
        assert board.count_winning_cells(Player.ONE) == 2
        assert board.count_winning_cells(Player.TWO) == 0
        board.place(7, 2, Player.TWO)
        assert board.count_winning_cells(Player.ONE) == 1

    def test_count_neighbors(self):
        """Test neighbour counting including the board corner."""
        board = Board()
        board.place(0, 1, Player.ONE)
        board.place(1, 1, Player.ONE)
        board.place(1, 0, Player.TWO)
        assert board.count_neighbors(0, 0, Player.ONE) == 2
        assert board.count_neighbors(0, 0, Player.TWO) == 1
        # The centre cell itself is not its own neighbour
        assert board.count_neighbors(1, 1, Player.ONE) == 1


class TestPosition:
    """Test coordinates and notation."""

    def test_notation(self):
        """Test algebraic notation of a few cells."""
        assert Position(0, 0).notation == "A1"
        assert Position(7, 7).notation == "H8"
        assert Position(14, 14).notation == "O15"

    def test_from_notation(self):
        """Test parsing notation, case-insensitively."""
        assert Position.from_notation("h8") == Position(7, 7)
        assert Position.from_notation(" O15 ") == Position(14, 14)
        assert Position.from_notation(Position(3, 9).notation) == Position(3, 9)

    @pytest.mark.parametrize("text", ["", "Z1", "A0", "A16", "88", "H"])
    def test_bad_notation(self, text):
        """Test that malformed coordinates raise ValueError."""
        with pytest.raises(ValueError):
            Position.from_notation(text)

    def test_string_representation(self):
        """Test the board rendering."""
        board = Board()
        board.place(0, 0, Player.ONE)
        board.place(14, 14, Player.TWO)
        text = str(board)
        assert "A B C" in text
        assert "X" in text
        assert "O" in text.splitlines()[-1]


class TestPatternScorer:
    """Test run scoring."""

    def test_table(self):
        """Test the scoring table."""
        assert evaluate_pattern(1, True) == 0
        assert evaluate_pattern(2, True) == 1
        assert evaluate_pattern(2, False) == 0
        assert evaluate_pattern(3, True) == 10
        assert evaluate_pattern(3, False) == 5
        assert evaluate_pattern(4, True) == 100
        assert evaluate_pattern(4, False) == 50
        assert evaluate_pattern(5, True) == 1000
        assert evaluate_pattern(5, False) == 500
        assert evaluate_pattern(6, True) == 10000
        assert evaluate_pattern(6, False) == 5000

    def test_long_runs_capped(self):
        """Test that runs longer than six score like six."""
        assert evaluate_pattern(9, True) == evaluate_pattern(6, True)
        assert evaluate_pattern(9, False) == evaluate_pattern(6, False)

    def test_monotone_and_open_beats_blocked(self):
        """Test ordering properties of the table."""
        for length in range(2, 6):
            assert evaluate_pattern(length + 1, True) > evaluate_pattern(length, True)
            assert evaluate_pattern(length + 1, False) > evaluate_pattern(length, False)
        for length in range(2, 7):
            assert evaluate_pattern(length, True) > evaluate_pattern(length, False)

    def test_center_bonus(self):
        """Test the centre-proximity bonus."""
        assert center_bonus(7, 7, 2) == 30
        assert center_bonus(7, 7, 3) == 45
        assert center_bonus(0, 0, 2) == 2
        assert center_bonus(6, 7, 2) == 28


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
