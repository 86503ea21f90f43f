"""
Tests for game tree expansion and scoring.
"""
import logging
import sys
from pathlib import Path

import numpy as np
import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.game import BoardState, Stone
from othello.search import GameTree

DATA_DIR = Path(__file__).parent / "test_data"


def test_constructor_copies_root():
    board = BoardState()
    tree = GameTree(board)

    assert tree.state == board
    assert tree.state is not board
    assert tree.parent is None
    assert tree.size() == 0
    assert tree.is_leaf()
    assert tree.previous_move is None

    board.apply_move(2, 3)
    assert tree.state == BoardState()


def test_expand_one_level():
    board = BoardState()
    tree = GameTree(board)

    assert tree.expand_one_level() == 4
    assert tree.size() == 4
    assert len(tree) == 4
    assert tree.state == board

    for child in tree:
        row, col = child.previous_move
        assert (row, col) in board.legal_moves()
        assert child.state.stone_at(row, col) is Stone.BLACK
        assert child.state.side_to_move is Stone.WHITE
        assert child.parent is tree

    assert [child.previous_move for child in tree] == [(2, 3), (3, 2), (4, 5), (5, 4)]


def test_expand_one_level_skips_duplicates():
    tree = GameTree(BoardState())
    tree.expand_one_level()

    assert tree.expand_one_level() == 0
    assert tree.size() == 4

    states = [child.state for child in tree]
    for i, a in enumerate(states):
        for b in states[i + 1:]:
            assert a != b


def test_expand_with_no_move_adds_pass():
    board = BoardState.load(str(DATA_DIR / "no_move_board.txt"))
    tree = GameTree(board)

    assert tree.expand_one_level() == 1
    assert tree.size() == 1

    child = tree.child(0)
    assert child.parent is tree
    assert child.previous_move is None
    assert child.state.side_to_move is Stone.BLACK
    assert child.state.count(Stone.WHITE) == board.count(Stone.WHITE)
    assert child.state.count(Stone.BLACK) == board.count(Stone.BLACK)


def test_pass_child_is_always_added():
    board = BoardState.load(str(DATA_DIR / "no_move_board.txt"))
    tree = GameTree(board)
    tree.expand_one_level()

    assert tree.expand_one_level() == 1
    assert tree.size() == 2
    assert tree.child(0).state == tree.child(1).state


def test_child_index_out_of_range():
    tree = GameTree(BoardState())
    with pytest.raises(IndexError):
        tree.child(0)


def test_expand_all_leaves_only_grows_leaves():
    tree = GameTree(BoardState())
    tree.expand_one_level()
    tree.child(0).expand_one_level()
    tree.expand_all_leaves()

    for i in (1, 2, 3):
        assert tree.child(i).size() > 0
        assert tree.child(i).child(0).size() == 0

    assert tree.child(0).child(0).size() > 0
    assert tree.child(0).child(0).child(0).size() == 0


def test_expand_all_leaves_counts():
    """Distinct moves give distinct positions, so the counts match perft."""
    tree = GameTree(BoardState())

    assert tree.expand_all_leaves() == 4
    assert tree.expand_all_leaves() == 12
    assert tree.expand_all_leaves() == 56

    leaves = list(tree.leaves())
    assert len(leaves) == 56
    assert all(leaf.depth() == 3 for leaf in leaves)
    assert tree.node_count() == 1 + 4 + 12 + 56


def test_expand_all_leaves_logs_growth(caplog):
    tree = GameTree(BoardState())
    tree.expand_all_leaves()

    with caplog.at_level(logging.DEBUG, logger="othello.search.tree"):
        tree.expand_all_leaves()

    assert "Expanded 4 leaves, added 12 children" in caplog.text


def test_terminal_board_grows_pass_chain():
    board = BoardState.load(str(DATA_DIR / "full_board.txt"))
    tree = GameTree(board)

    for _ in range(3):
        assert tree.expand_all_leaves() == 1

    leaves = list(tree.leaves())
    assert len(leaves) == 1
    assert leaves[0].depth() == 3
    assert leaves[0].state.side_to_move is board.side_to_move.opposite()


def test_leaf_score_is_stone_count():
    tree = GameTree(BoardState())
    assert tree.score(Stone.BLACK) == 2.0

    tree.expand_one_level()
    assert tree.child_scores(Stone.BLACK) == [4.0, 4.0, 4.0, 4.0]
    assert tree.child_scores(Stone.WHITE) == [1.0, 1.0, 1.0, 1.0]
    assert tree.score(Stone.BLACK) == 4.0


def test_internal_score_is_mean_of_children():
    tree = GameTree(BoardState())
    tree.expand_all_leaves()
    tree.expand_all_leaves()

    for child in tree:
        expected = np.mean([grandchild.state.count(Stone.BLACK) for grandchild in child])
        assert child.score(Stone.BLACK) == pytest.approx(expected)

    assert tree.score(Stone.BLACK) == pytest.approx(np.mean(tree.child_scores(Stone.BLACK)))
