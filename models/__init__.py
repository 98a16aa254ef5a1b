"""
Models package for the Euchred scoreboard.

This package contains the data models and exceptions used throughout the system.
"""

from .player import PlayerRecord, new_player_id
from .leader import LeaderState, LeaderResult
from .errors import EuchredError, PlayerNotFoundError, InvalidPlayerNameError

__all__ = [
    'PlayerRecord', 'new_player_id', 'LeaderState', 'LeaderResult',
    'EuchredError', 'PlayerNotFoundError', 'InvalidPlayerNameError'
]
