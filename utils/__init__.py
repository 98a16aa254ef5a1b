"""
Utility functions package for the Euchred scoreboard.
"""

from .text_utils import TextUtils

__all__ = ['TextUtils']
