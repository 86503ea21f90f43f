"""
Othello game module.
This package contains the rules engine and the game driver.
"""

from .stone import Stone
from .direction import Direction
from .board import BoardState
from .history import MoveHistory, MoveRecord
from .game import ReversiGame

__all__ = ['Stone', 'Direction', 'BoardState', 'MoveHistory', 'MoveRecord', 'ReversiGame']
