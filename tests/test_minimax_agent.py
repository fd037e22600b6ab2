"""Tests for the alpha-beta search and the MinimaxAgent."""

import logging

import pytest

from gomokuai.agent import minimax_agent
from gomokuai.agent.minimax_agent import (
    DEFAULT_DEPTH,
    INF,
    MinimaxAgent,
    alphabeta,
    candidate_moves,
    choose_move,
    choose_move_exhaustive,
    choose_move_with_value,
    minimax,
)
from gomokuai.game.board import CENTER, Board
from gomokuai.game.state import GomokuGameState
from gomokuai.game.types import Player, Point


def _board(ai=(), human=()) -> Board:
    b = Board()
    for p in ai:
        b.place(Point(*p), Player.AI)
    for p in human:
        b.place(Point(*p), Player.HUMAN)
    return b


# Small positions, each with the human's last stone as the anchor
SMALL_POSITIONS = [
    ({"human": [(7, 7)]}, Point(7, 7)),
    ({"ai": [(7, 8)], "human": [(7, 7), (8, 8)]}, Point(8, 8)),
    ({"ai": [(7, 7), (6, 6)], "human": [(8, 8), (7, 8)]}, Point(7, 8)),
    ({"ai": [(0, 1)], "human": [(0, 0), (1, 1)]}, Point(1, 1)),
]


# ---------------------------------------------------------------------------
# Candidate generation
# ---------------------------------------------------------------------------

class TestCandidateMoves:
    def test_empty_board_has_none(self):
        assert candidate_moves(Board()) == []

    def test_single_stone_ring_in_row_major_order(self):
        b = _board(human=[(7, 7)])
        assert candidate_moves(b) == [
            Point(6, 6), Point(6, 7), Point(6, 8),
            Point(7, 6), Point(7, 8),
            Point(8, 6), Point(8, 7), Point(8, 8),
        ]

    def test_no_occupied_cells(self):
        b = _board(ai=[(7, 8)], human=[(7, 7)])
        candidates = candidate_moves(b)
        assert Point(7, 7) not in candidates
        assert Point(7, 8) not in candidates
        assert len(candidates) == 10

    def test_corner_is_bounds_checked(self):
        b = _board(human=[(0, 0)])
        assert candidate_moves(b) == [Point(0, 1), Point(1, 0), Point(1, 1)]


# ---------------------------------------------------------------------------
# Pruning correctness
# ---------------------------------------------------------------------------

class TestAlphaBetaMatchesMinimax:
    @pytest.mark.parametrize("stones,last", SMALL_POSITIONS)
    def test_full_window_value(self, stones, last):
        b = _board(**stones)
        pruned = alphabeta(b, last, DEFAULT_DEPTH, -INF, INF, False)
        exact = minimax(b, last, DEFAULT_DEPTH, False)
        assert pruned == exact

    @pytest.mark.parametrize("stones,last", SMALL_POSITIONS)
    def test_root_choice_and_value(self, stones, last):
        b = _board(**stones)
        assert choose_move_with_value(b, last) == choose_move_exhaustive(b, last)

    def test_fail_low_never_exceeds_bound(self):
        b = _board(human=[(7, 7)])
        exact = minimax(b, Point(7, 7), 1, False)
        # A window above the true value can only report something at or below it.
        assert alphabeta(b, Point(7, 7), 1, exact + 1000, INF, False) <= exact + 1000


# ---------------------------------------------------------------------------
# Search behaviour
# ---------------------------------------------------------------------------

class TestSearch:
    def test_empty_board_plays_center(self):
        assert choose_move(Board(), None) == CENTER
        assert choose_move_exhaustive(Board(), None) == (CENTER, 0.0)

    def test_empty_board_ignores_stale_last_move(self):
        assert choose_move(Board(), Point(3, 3)) == CENTER
        assert choose_move_exhaustive(Board(), Point(3, 3)) == (CENTER, 0.0)

    def test_blocks_four_at_open_end(self):
        """Human four on row 7 blocked at (7, 2): the AI must take (7, 7)."""
        b = _board(
            ai=[(7, 2), (8, 5)],
            human=[(7, 3), (7, 4), (7, 5), (7, 6)],
        )
        assert choose_move(b, Point(7, 6)) == Point(7, 7)

    def test_completes_own_five(self):
        b = _board(
            ai=[(3, 3), (3, 4), (3, 5), (3, 6)],
            human=[(3, 2), (4, 3), (10, 10)],
        )
        move, value = choose_move_with_value(b, Point(10, 10))
        assert move == Point(3, 7)
        assert value > 100_000

    def test_search_restores_board(self):
        b = _board(ai=[(7, 7), (6, 6)], human=[(8, 8), (7, 8)])
        before = b.copy()
        choose_move(b, Point(7, 8))
        assert b == before
        assert b.occupied_count == before.occupied_count

    def test_returns_adjacent_empty_cell(self):
        b = _board(ai=[(7, 8)], human=[(7, 7), (8, 8)])
        move = choose_move(b, Point(8, 8))
        assert b.is_empty(move)
        assert b.has_neighbor(move)

    def test_ties_keep_first_candidate(self, monkeypatch):
        monkeypatch.setattr(minimax_agent, "evaluate", lambda board: 0.0)
        b = _board(human=[(7, 7)])
        assert choose_move(b, Point(7, 7)) == Point(6, 6)
        assert choose_move_exhaustive(b, Point(7, 7)) == (Point(6, 6), 0.0)

    def test_terminal_position_is_a_leaf(self, monkeypatch):
        calls = []

        def fake_evaluate(board):
            calls.append(board.occupied_count)
            return 1.0

        monkeypatch.setattr(minimax_agent, "evaluate", fake_evaluate)
        b = _board(human=[(7, c) for c in range(2, 7)])
        assert alphabeta(b, Point(7, 6), 3, -INF, INF, False) == 1.0
        assert calls == [5]


# ---------------------------------------------------------------------------
# Agent
# ---------------------------------------------------------------------------

class TestMinimaxAgent:
    def test_default_depth(self):
        assert MinimaxAgent().depth == DEFAULT_DEPTH == 2

    def test_name(self):
        assert MinimaxAgent(depth=1).name == "MinimaxAgent(d=1)"

    def test_opening_move_is_center(self):
        g = GomokuGameState(first_player=Player.AI)
        assert MinimaxAgent().select_move(g) == CENTER

    def test_reply_is_legal(self):
        g = GomokuGameState()
        g.apply_move(Point(7, 7))
        move = MinimaxAgent(depth=1).select_move(g)
        assert g.board.is_empty(move)
        assert g.board.has_neighbor(move)
        assert len(g.moves) == 1

    def test_logs_decision(self, caplog):
        g = GomokuGameState()
        g.apply_move(Point(7, 7))
        with caplog.at_level(logging.INFO, logger="gomokuai.agent.minimax_agent"):
            MinimaxAgent(depth=1).select_move(g)
        assert "MinimaxAgent(d=1) chose" in caplog.text

    def test_refuses_finished_game(self):
        g = GomokuGameState()
        for c in range(5):
            g.place_stone(Point(0, c), Player.HUMAN)
            if c < 4:
                g.place_stone(Point(5, c), Player.AI)
        assert g.is_over
        with pytest.raises(AssertionError):
            MinimaxAgent().select_move(g)
