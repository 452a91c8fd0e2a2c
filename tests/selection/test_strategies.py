"""
Tests for tictactoe_engine.selection

Tests the Easy / Medium / Hard strategies and difficulty dispatch.
Randomized choices are checked for membership in the valid candidate set
across many seeds; single-candidate cases must be hit every time.
"""

import random
from typing import List

import pytest

from tictactoe_engine.core.types import Difficulty
from tictactoe_engine.games.board import Board
from tictactoe_engine.selection import STRATEGIES, select_cell
from tictactoe_engine.selection.strategies import easy_move, hard_move, medium_move


def _choices(strategy, board: Board, player_id: int, seeds: List[int]) -> set:
    return {strategy(board, player_id, random.Random(s)) for s in seeds}


class TestEasy:
    """Easy strategy tests."""

    def test_empty_board_takes_first(self, empty_board: Board, rng):
        assert easy_move(empty_board, 2, rng) == 0

    def test_lowest_empty_index(self, rng):
        board = Board.from_marks([1, 2, 1, 0, 2, 0, 0, 0, 0])
        assert easy_move(board, 2, rng) == 3

    def test_deterministic(self, seeds):
        board = Board.from_marks([1, 1, 2, 2, 0, 1, 0, 0, 0])
        assert _choices(easy_move, board, 2, seeds) == {4}

    def test_does_not_mutate(self, rng):
        board = Board.from_marks([1, 0, 0, 0, 0, 0, 0, 0, 0])
        before = board.marks.copy()
        easy_move(board, 2, rng)
        assert (board.marks == before).all()

    def test_full_board(self, draw_board: Board, rng):
        assert easy_move(draw_board, 2, rng) is None


class TestMedium:
    """Medium strategy tests."""

    def test_blocks_only_threat(self, seeds):
        """Opponent owns {0,1}: cell 2 is chosen every time."""
        board = Board.from_marks([1, 1, 0, 0, 2, 0, 0, 0, 0])
        assert _choices(medium_move, board, 2, seeds) == {2}

    def test_symmetric_for_player_1(self, seeds):
        """Computer as player 1 blocks player 2 the same way."""
        board = Board.from_marks([2, 2, 0, 0, 1, 0, 0, 0, 0])
        assert _choices(medium_move, board, 1, seeds) == {2}

    @pytest.mark.parametrize("computer", [1, 2])
    def test_mirrored_boards_mirror_choices(self, computer, seeds):
        """Swapping every mark and the computer's id yields the same choice."""
        opponent = 3 - computer
        board = Board.from_marks([opponent, 0, 0, 0, computer, 0, 0, 0, opponent])
        mirrored = Board.from_marks([computer, 0, 0, 0, opponent, 0, 0, 0, computer])
        for s in seeds:
            assert (medium_move(board, computer, random.Random(s))
                    == medium_move(mirrored, opponent, random.Random(s)))

    def test_two_threats_random_between(self, seeds):
        """Opponent threatens row 0 and column 0: either block is chosen."""
        board = Board.from_marks([1, 1, 0, 1, 2, 0, 0, 0, 0])
        choices = _choices(medium_move, board, 2, seeds)
        assert choices <= {2, 6}
        assert choices == {2, 6}

    def test_single_opponent_cell(self, seeds):
        """One opponent cell: choice is an empty cell on a line through it."""
        board = Board.from_marks([1, 0, 0, 0, 0, 0, 0, 0, 0])
        choices = _choices(medium_move, board, 2, seeds)
        assert choices <= {1, 2, 3, 4, 6, 8}

    def test_blocked_threat_ignored(self, seeds):
        """A two-cell line already blocked is not a threat."""
        board = Board.from_marks([1, 1, 2, 0, 0, 0, 0, 0, 0])
        choices = _choices(medium_move, board, 2, seeds)
        # Open lines through opponent cells: (0,3,6) (1,4,7) (0,4,8)
        assert choices <= {3, 4, 6, 7, 8}

    def test_no_opponent_falls_back_to_easy(self, empty_board: Board, seeds):
        assert _choices(medium_move, empty_board, 2, seeds) == {0}

    def test_only_empty_cells(self, seeds):
        board = Board.from_marks([1, 2, 1, 2, 1, 0, 2, 0, 0])
        for cell in _choices(medium_move, board, 2, seeds):
            assert board.is_empty(cell)

    def test_full_board(self, draw_board: Board, rng):
        assert medium_move(draw_board, 2, rng) is None


class TestHard:
    """Hard strategy tests."""

    def test_completes_own_line(self, seeds):
        """Computer owns {0,1}: takes 2 even though the opponent threatens 5."""
        board = Board.from_marks([2, 2, 0, 1, 1, 0, 1, 0, 0])
        assert _choices(hard_move, board, 2, seeds) == {2}

    @pytest.mark.parametrize("computer", [1, 2])
    def test_completes_line_either_player(self, computer, rng):
        opponent = 3 - computer
        board = Board.from_marks([computer, computer, 0, opponent, opponent, 0, 0, 0, 0])
        assert hard_move(board, computer, rng) == 2

    def test_win_before_block(self, seeds):
        """Own row (3,4,5) beats blocking the opponent's row (0,1,2)."""
        board = Board.from_marks([1, 1, 0, 2, 2, 0, 1, 0, 0])
        assert _choices(hard_move, board, 2, seeds) == {5}

    def test_first_line_in_table_order(self, rng):
        """Two winning options: the column is listed before the row."""
        # Column (0,3,6) needs 6; row (0,1,2) needs 2.
        board = Board.from_marks([2, 2, 0, 2, 1, 1, 0, 0, 1])
        assert hard_move(board, 2, rng) == 6

    def test_takes_centre(self, rng):
        board = Board.from_marks([1, 0, 0, 0, 0, 0, 0, 0, 0])
        assert hard_move(board, 2, rng) == 4

    def test_takes_centre_on_empty_board(self, empty_board: Board, rng):
        assert hard_move(empty_board, 2, rng) == 4

    def test_falls_back_to_block(self, seeds):
        """Centre taken, no own win: blocks like medium."""
        board = Board.from_marks([1, 1, 0, 0, 2, 0, 0, 0, 0])
        assert _choices(hard_move, board, 2, seeds) == {2}

    def test_blocked_own_line_not_a_win(self, rng):
        """Two own cells with the third taken do not count."""
        board = Board.from_marks([2, 2, 1, 0, 1, 0, 0, 0, 0])
        # Opponent threatens (2,4,6) -> block 6
        assert hard_move(board, 2, rng) == 6

    def test_full_board(self, draw_board: Board, rng):
        assert hard_move(draw_board, 2, rng) is None


class TestSelectCell:
    """Difficulty dispatch tests."""

    def test_every_difficulty_registered(self):
        assert set(STRATEGIES) == set(Difficulty)

    @pytest.mark.parametrize("difficulty,expected", [
        (Difficulty.EASY, 0),
        (Difficulty.MEDIUM, 2),
        (Difficulty.HARD, 4),
    ])
    def test_dispatch(self, difficulty, expected, rng):
        board = Board.from_marks([0, 1, 0, 0, 0, 0, 0, 0, 0])
        if difficulty == Difficulty.MEDIUM:
            board = Board.from_marks([1, 1, 0, 0, 0, 0, 0, 0, 0])
        assert select_cell(board, 2, difficulty, rng) == expected

    def test_unknown_difficulty_uses_medium(self, seeds):
        board = Board.from_marks([1, 1, 0, 0, 2, 0, 0, 0, 0])
        for s in seeds:
            assert select_cell(board, 2, "impossible", random.Random(s)) == 2
