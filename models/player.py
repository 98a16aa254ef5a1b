"""
Player data models for the Euchred scoreboard.
"""

from dataclasses import dataclass, field
from typing import Optional
import uuid


def new_player_id() -> str:
    """Generate a new opaque player identifier."""
    return str(uuid.uuid4())


@dataclass
class PlayerRecord:
    """Database record for a player on the roster."""
    name: str
    order: int
    score: int = 0
    id: str = field(default_factory=new_player_id)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
