"""
Roster rules for the Euchred scoreboard.

PlayerStore owns how players are created, scored and renamed. It reads and
writes through a PlayerManager and never recomputes leaders on its own;
callers pass score_snapshot() to the LeaderTracker after each change.
"""

import logging
from typing import Dict, List, Optional, Sequence
from database.player_manager import PlayerManager
from models.errors import PlayerNotFoundError, InvalidPlayerNameError
from models.player import PlayerRecord
from utils.text_utils import TextUtils, DEFAULT_MAX_NAME_LENGTH

logger = logging.getLogger(__name__)


class PlayerStore:
    """Holds the ordered roster and enforces its mutation rules."""

    def __init__(self, player_manager: PlayerManager, max_name_length: Optional[int] = None):
        self.player_manager = player_manager
        if max_name_length is None:
            max_name_length = player_manager.config.get('max_name_length', DEFAULT_MAX_NAME_LENGTH)
        if not isinstance(max_name_length, int) or max_name_length < 1:
            logger.warning(f"Invalid max_name_length {max_name_length!r}, using {DEFAULT_MAX_NAME_LENGTH}")
            max_name_length = DEFAULT_MAX_NAME_LENGTH
        self.max_name_length = max_name_length

    def initialize_if_empty(self, default_names: Sequence[str]) -> int:
        """
        Create one player per default name if the roster is empty.
        Returns the number of players created.
        """
        if self.player_manager.count_players() > 0:
            logger.debug("Roster already initialized")
            return 0

        created = 0
        for order, name in enumerate(default_names):
            try:
                clean_name = TextUtils.clean_player_name(name, self.max_name_length)
            except InvalidPlayerNameError:
                # Keep the position so order stays aligned with default_names
                logger.warning(f"Blank default name at position {order}, using placeholder")
                clean_name = f"Player {order + 1}"
            self.player_manager.insert_player(PlayerRecord(name=clean_name, order=order))
            created += 1

        logger.info(f"Initialized roster with {created} players")
        return created

    def get_players(self) -> List[PlayerRecord]:
        """Get the roster in display order."""
        return self.player_manager.get_all_players()

    def get_player(self, player_id: str) -> PlayerRecord:
        """Get a player, raising PlayerNotFoundError for an unknown id."""
        player = self.player_manager.get_player(player_id)
        if player is None:
            raise PlayerNotFoundError(player_id)
        return player

    def score_snapshot(self) -> Dict[str, int]:
        """Current scores keyed by player id."""
        return {player.id: player.score for player in self.get_players()}

    def increment(self, player_id: str) -> PlayerRecord:
        """Add one win to a player."""
        player = self.get_player(player_id)
        player.score += 1
        self.player_manager.update_player_field(player.id, 'score', player.score)
        logger.info(f"{player.name} now has {player.score}")
        return player

    def decrement(self, player_id: str) -> PlayerRecord:
        """Remove one win from a player. No-op at zero."""
        player = self.get_player(player_id)
        if player.score <= 0:
            logger.debug(f"{player.name} is already at 0, nothing to undo")
            return player
        player.score -= 1
        self.player_manager.update_player_field(player.id, 'score', player.score)
        logger.info(f"{player.name} now has {player.score}")
        return player

    def rename(self, player_id: str, new_name: str) -> bool:
        """
        Rename a player.
        Returns False and leaves the name unchanged if the new name is blank.
        """
        player = self.get_player(player_id)
        try:
            clean_name = TextUtils.clean_player_name(new_name, self.max_name_length)
        except InvalidPlayerNameError as e:
            logger.warning(f"Rejected rename of {player.name}: {e}")
            return False

        if clean_name != player.name:
            self.player_manager.update_player_field(player.id, 'name', clean_name)
            logger.info(f"Renamed {player.name} to {clean_name}")
        return True

    def reset_all_scores(self) -> None:
        """Set every score back to zero."""
        for player in self.get_players():
            if player.score != 0:
                self.player_manager.update_player_field(player.id, 'score', 0)
        logger.info("Cleared all scores")

    def reset_all_names(self, default_names: Sequence[str]) -> None:
        """Reassign default names by position. Scores are untouched."""
        for player in self.get_players():
            if 0 <= player.order < len(default_names):
                try:
                    clean_name = TextUtils.clean_player_name(default_names[player.order], self.max_name_length)
                except InvalidPlayerNameError:
                    logger.warning(f"Blank default name at position {player.order}, keeping {player.name}")
                    continue
                if clean_name != player.name:
                    self.player_manager.update_player_field(player.id, 'name', clean_name)
        logger.info("Reset player names to defaults")
