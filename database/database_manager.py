"""
Core database management for the Euchred scoreboard.
"""

import sqlite3
import logging
from typing import Dict, Any, Optional
from config.config_manager import ConfigManager

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages core database operations and initialization."""
    
    def __init__(self, db_path: Optional[str] = None, config_file: str = "config.yaml",
                 config: Optional[Dict[str, Any]] = None):
        self.config = config if config is not None else ConfigManager.load_config(config_file)
        self.db_path = db_path or self.config.get('database_path', 'euchred.db')
        self.init_database()
    
    def init_database(self) -> None:
        """Initialize the database with required tables."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS players (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    score INTEGER NOT NULL DEFAULT 0 CHECK (score >= 0),
                    player_order INTEGER NOT NULL,
                    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                )
            """)

            cursor.execute("""
                CREATE INDEX IF NOT EXISTS idx_players_order ON players(player_order)
            """)

            conn.commit()
            logger.info(f"Database initialized successfully: {self.db_path}")
    
    def get_database_stats(self) -> Dict[str, int]:
        """Get basic database statistics."""
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.cursor()
            
            cursor.execute("SELECT COUNT(*), COALESCE(SUM(score), 0), COALESCE(MAX(score), 0) FROM players")
            players, total_score, top_score = cursor.fetchone()
            
            return {
                'players': players,
                'total_score': total_score,
                'top_score': top_score
            }
