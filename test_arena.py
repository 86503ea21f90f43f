"""
Tests for the arena, its standings and the tournament script.
"""
import json
import os
import sys
import time
from pathlib import Path

import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.arena import Arena, compute_move, play_out
from othello.game import BoardState
from othello.search import GreedyPlayer, LookaheadPlayer, RandomPlayer

import run_tournament

DATA_DIR = Path(__file__).parent / "test_data"


def test_play_out_finishes_game():
    game = play_out(RandomPlayer(seed=1), GreedyPlayer(seed=2))

    assert game.is_game_over()
    black, white = game.get_score()
    assert black + white <= 64
    assert black + white + game.board.empty_count() == 64


def test_play_out_from_custom_board():
    board = BoardState(6)
    game = play_out(LookaheadPlayer(turns=1, seed=3), RandomPlayer(seed=4), board=board)
    assert game.is_game_over()
    assert board == BoardState(6), "Starting board must not be modified"


def test_compute_move_waits_for_minimum_duration():
    board = BoardState()
    start = time.monotonic()
    move = compute_move(GreedyPlayer(seed=0), board, min_duration=0.05)
    elapsed = time.monotonic() - start

    assert move in board.legal_moves()
    assert elapsed >= 0.05


def test_compute_move_does_not_share_board():
    board = BoardState()
    before = board.copy()
    compute_move(LookaheadPlayer(turns=1, seed=0), board, min_duration=0.01)
    assert board == before


class PassingPlayer(RandomPlayer):
    """Always passes, even when it has a move."""

    def choose_move(self, board):
        return None


def test_play_out_rejects_pass_with_legal_moves():
    with pytest.raises(RuntimeError, match="chose to pass with legal moves available"):
        play_out(PassingPlayer(seed=0), RandomPlayer(seed=1))


def test_play_out_accepts_forced_pass():
    board = BoardState.load(str(DATA_DIR / "no_move_board.txt"))
    game = play_out(GreedyPlayer(seed=0), PassingPlayer(seed=1), board=board)
    assert game.is_game_over()
    assert game.get_score() == (3, 0)
    assert game.get_move_history()[0].is_pass


def test_play_game_updates_standings():
    arena = Arena(board_size=4)
    arena.add_player("greedy", GreedyPlayer(seed=1))
    arena.add_player("random", RandomPlayer(seed=2))

    record = arena.play_game("greedy", "random")

    greedy, random_ = arena.standings["greedy"], arena.standings["random"]
    assert greedy['games_played'] == random_['games_played'] == 1
    assert greedy['points'] == record['score']
    assert greedy['points'] + random_['points'] == 1.0
    assert greedy['disc_difference'] == record['black_count'] - record['white_count']
    assert greedy['disc_difference'] == -random_['disc_difference']
    assert greedy['wins'] + greedy['draws'] + greedy['losses'] == 1


def test_leaderboard_ranks_by_points_then_discs():
    arena = Arena()
    for player_id in ("a", "b", "c"):
        arena.add_player(player_id, RandomPlayer())
    arena._record("a", 0.5, 0)
    arena._record("b", 1.0, 4)
    arena._record("c", 1.0, 10)

    leaderboard = arena.get_leaderboard()
    assert [p['player_id'] for p in leaderboard] == ["c", "b", "a"]
    assert leaderboard[2]['draws'] == 1


def test_tournament_tallies(tmp_path):
    arena = Arena(board_size=4)
    arena.add_player("random", RandomPlayer(seed=1))
    arena.add_player("greedy", GreedyPlayer(seed=2))
    arena.add_player("lookahead", LookaheadPlayer(turns=2, seed=3))

    results = arena.run_tournament(rounds=2, show_progress=False)

    assert results['games_played'] == 6
    for tally in results['matchups'].values():
        assert tally['games_played'] == 2
        assert tally['wins1'] + tally['wins2'] + tally['draws'] == 2

    leaderboard = results['leaderboard']
    assert len(leaderboard) == 3
    assert sum(p['points'] for p in leaderboard) == pytest.approx(6.0)
    assert sum(p['games_played'] for p in leaderboard) == 12
    assert "lookahead" in arena.format_leaderboard()

    results_path = tmp_path / "results.json"
    arena.save_results(str(results_path), results)
    assert results_path.exists()
    with open(results_path) as f:
        assert len(json.load(f)['games']) == 6


def test_arena_rejects_bad_setup():
    arena = Arena()
    arena.add_player("solo", RandomPlayer())
    with pytest.raises(ValueError):
        arena.add_player("solo", RandomPlayer())
    with pytest.raises(ValueError):
        arena.run_tournament(rounds=1)
    with pytest.raises(ValueError):
        arena.play_game("solo", "missing")


def test_run_tournament_script(tmp_path):
    output_dir = tmp_path / "results"
    exit_code = run_tournament.main([
        '--rounds', '1',
        '--board-size', '4',
        '--output-dir', str(output_dir),
    ])

    assert exit_code == 0
    files = os.listdir(output_dir)
    results_files = [f for f in files if f.startswith('tournament_')]
    assert len(results_files) == 1

    with open(output_dir / results_files[0]) as f:
        results = json.load(f)
    assert results['board_size'] == 4
    assert len(results['participants']) == 3
