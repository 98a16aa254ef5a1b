"""
Configuration package for the Euchred scoreboard.
"""

from .config_manager import ConfigManager

__all__ = ['ConfigManager']
