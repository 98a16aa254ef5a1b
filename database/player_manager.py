"""
Player persistence for the Euchred database.
"""

import sqlite3
import logging
from typing import List, Optional, Tuple
from models.player import PlayerRecord

logger = logging.getLogger(__name__)


class PlayerManager:
    """Manages player-related database operations."""

    # Columns a caller may change after the row is created
    UPDATABLE_FIELDS = ('name', 'score')
    
    def __init__(self, database_manager):
        self.db_manager = database_manager
        self.config = database_manager.config
    
    def get_all_players(self) -> List[PlayerRecord]:
        """Get all players ordered by their display position."""
        with sqlite3.connect(self.db_manager.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                SELECT id, name, score, player_order, created_at, updated_at
                FROM players
                ORDER BY player_order, created_at
            """)
            return [self._row_to_record(row) for row in cursor.fetchall()]
    
    def get_player(self, player_id: str) -> Optional[PlayerRecord]:
        """Get a single player by id."""
        with sqlite3.connect(self.db_manager.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                SELECT id, name, score, player_order, created_at, updated_at
                FROM players WHERE id = ?
            """, (player_id,))
            row = cursor.fetchone()
            return self._row_to_record(row) if row else None
    
    def count_players(self) -> int:
        """Count players on the roster."""
        with sqlite3.connect(self.db_manager.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) FROM players")
            return cursor.fetchone()[0]
    
    def insert_player(self, player_record: PlayerRecord) -> None:
        """Insert a new player row."""
        with sqlite3.connect(self.db_manager.db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                INSERT INTO players (id, name, score, player_order)
                VALUES (?, ?, ?, ?)
            """, (player_record.id, player_record.name, player_record.score, player_record.order))
            conn.commit()
            logger.info(f"Added new player {player_record.name} at position {player_record.order}")
    
    def update_player_field(self, player_id: str, field: str, value) -> bool:
        """
        Update a single field of a player row.
        Returns True if a row was updated.
        """
        if field not in self.UPDATABLE_FIELDS:
            raise ValueError(f"Field '{field}' cannot be updated")

        with sqlite3.connect(self.db_manager.db_path) as conn:
            cursor = conn.cursor()
            # field is checked against UPDATABLE_FIELDS above
            cursor.execute(f"""
                UPDATE players SET {field} = ?, updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
            """, (value, player_id))
            conn.commit()

            updated = cursor.rowcount > 0
            if updated:
                logger.debug(f"Updated {field} of player {player_id} to {value!r}")
            else:
                logger.debug(f"No player {player_id} to update")
            return updated
    
    @staticmethod
    def _row_to_record(row: Tuple) -> PlayerRecord:
        """Convert a players row into a PlayerRecord."""
        return PlayerRecord(
            id=row[0],
            name=row[1],
            score=row[2],
            order=row[3],
            created_at=row[4],
            updated_at=row[5]
        )
