"""
Ranking package for the Euchred scoreboard.
"""

from .leader_tracker import LeaderTracker
from .scoreboard import Scoreboard

__all__ = ['LeaderTracker', 'Scoreboard']
