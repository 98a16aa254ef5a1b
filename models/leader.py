"""
Leader state models for the Euchred scoreboard.
"""

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class LeaderState:
    """Leader set remembered between recomputes. Never persisted."""
    leader_keys: FrozenSet[str] = frozenset()
    leader_score: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.leader_keys


@dataclass(frozen=True)
class LeaderResult:
    """Outcome of a leader recompute."""
    leaders: FrozenSet[str] = frozenset()
    score: int = 0
    celebrate: bool = False

    @property
    def has_leader(self) -> bool:
        return bool(self.leaders)
