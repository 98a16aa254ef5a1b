"""
Text processing utilities for the Euchred scoreboard.
"""

from models.errors import InvalidPlayerNameError

DEFAULT_MAX_NAME_LENGTH = 20


class TextUtils:
    """Utilities for cleaning user-entered text."""
    
    @staticmethod
    def clean_player_name(name: str, max_length: int = DEFAULT_MAX_NAME_LENGTH) -> str:
        """
        Trim and truncate a player name.
        Raises InvalidPlayerNameError if nothing is left after trimming.
        """
        if name is None:
            raise InvalidPlayerNameError(name)
        
        cleaned = str(name).strip()
        if not cleaned:
            raise InvalidPlayerNameError(name)
        
        # Truncation can expose inner whitespace at the cut
        return cleaned[:max_length].rstrip()
    
    @staticmethod
    def pluralize(count: int, singular: str, plural: str = None) -> str:
        """Return '<count> <word>' with the word matching the count."""
        word = singular if count == 1 else (plural or f"{singular}s")
        return f"{count} {word}"
