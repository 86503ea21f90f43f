"""
Othello rules engine with game-tree search players.
"""
from .exceptions import OthelloError, BoardSizeError, SnapshotFormatError, GameOverError
from .game import Stone, Direction, BoardState, ReversiGame
from .search import GameTree, RandomPlayer, GreedyPlayer, LookaheadPlayer, create_player

__version__ = "0.1"

__all__ = [
    'OthelloError',
    'BoardSizeError',
    'SnapshotFormatError',
    'GameOverError',
    'Stone',
    'Direction',
    'BoardState',
    'ReversiGame',
    'GameTree',
    'RandomPlayer',
    'GreedyPlayer',
    'LookaheadPlayer',
    'create_player',
]
