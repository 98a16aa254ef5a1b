"""
Reports package for the Euchred scoreboard.
"""

from .scoreboard_report import ScoreboardReport

__all__ = ['ScoreboardReport']
