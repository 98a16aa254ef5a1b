"""
Custom exceptions for the Euchred scoreboard with user-friendly messages.
"""


class EuchredError(Exception):
    """Base exception for scoreboard errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message


class PlayerNotFoundError(EuchredError):
    """Raised when a player id or position is not on the roster."""
    def __init__(self, player_ref):
        super().__init__(
            f"Player '{player_ref}' not found",
            f"No player '{player_ref}' on the roster."
        )
        self.player_ref = player_ref


class InvalidPlayerNameError(EuchredError):
    """Raised when a player name is empty after trimming."""
    def __init__(self, raw_name: str):
        super().__init__(
            f"Invalid player name {raw_name!r}",
            "Player names cannot be blank."
        )
        self.raw_name = raw_name
