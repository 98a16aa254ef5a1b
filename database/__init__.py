"""
Database package for the Euchred scoreboard.
"""

from .database_manager import DatabaseManager
from .player_manager import PlayerManager
from .player_store import PlayerStore

__all__ = ['DatabaseManager', 'PlayerManager', 'PlayerStore']
