"""
Scoreboard for the Euchred system.

Wires the roster to the leader tracker: every change goes through the
store and is immediately followed by a recompute, under one lock.
"""

import logging
from threading import RLock
from typing import List, Optional, Sequence
from database.player_store import PlayerStore
from models.errors import PlayerNotFoundError
from models.leader import LeaderResult
from models.player import PlayerRecord
from ranking.leader_tracker import LeaderTracker

logger = logging.getLogger(__name__)


class Scoreboard:
    """Runs roster mutations and leader recomputes as single steps."""

    def __init__(self, player_store: PlayerStore, default_names: Sequence[str],
                 leader_tracker: Optional[LeaderTracker] = None):
        self.player_store = player_store
        self.default_names = list(default_names)
        self.leader_tracker = leader_tracker or LeaderTracker()
        self.last_result = LeaderResult()
        self._lock = RLock()

    def open(self) -> LeaderResult:
        """Create the default roster if needed and prime the tracker from saved scores."""
        with self._lock:
            self.player_store.initialize_if_empty(self.default_names)
            self.last_result = self.leader_tracker.prime(self.player_store.score_snapshot())
            return self.last_result

    def players(self) -> List[PlayerRecord]:
        return self.player_store.get_players()

    def player_at(self, position: int) -> PlayerRecord:
        """Get a player by 1-based display position."""
        players = self.players()
        if not 1 <= position <= len(players):
            raise PlayerNotFoundError(position)
        return players[position - 1]

    def leaders(self) -> List[PlayerRecord]:
        """Players in the last computed leader set, in roster order."""
        leader_ids = self.last_result.leaders
        return [player for player in self.players() if player.id in leader_ids]

    def record_win(self, player_id: str) -> LeaderResult:
        with self._lock:
            self.player_store.increment(player_id)
            return self._recompute()

    def undo_win(self, player_id: str) -> LeaderResult:
        with self._lock:
            self.player_store.decrement(player_id)
            return self._recompute()

    def clear_scores(self) -> LeaderResult:
        with self._lock:
            self.player_store.reset_all_scores()
            return self._recompute()

    def rename_player(self, player_id: str, new_name: str) -> bool:
        with self._lock:
            return self.player_store.rename(player_id, new_name)

    def reset_names(self) -> None:
        with self._lock:
            self.player_store.reset_all_names(self.default_names)

    def _recompute(self) -> LeaderResult:
        self.last_result = self.leader_tracker.recompute(self.player_store.score_snapshot())
        return self.last_result
