"""
Arena module for running matches and tournaments between players.
"""
from .arena import Arena, compute_move, play_out

__all__ = ['Arena', 'compute_move', 'play_out']
