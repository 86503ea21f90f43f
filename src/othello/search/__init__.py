"""
Game-tree search and automated players.
"""
from .tree import GameTree
from .players import (
    Player,
    RandomPlayer,
    GreedyPlayer,
    LookaheadPlayer,
    PLAYER_TYPES,
    create_player,
)

__all__ = [
    'GameTree',
    'Player',
    'RandomPlayer',
    'GreedyPlayer',
    'LookaheadPlayer',
    'PLAYER_TYPES',
    'create_player',
]
