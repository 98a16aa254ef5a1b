#!/usr/bin/env python3
"""
Tests for the roster: persistence, mutation rules and configuration.

This test file covers:
- Database initialization
- Roster creation from configured default names
- Increment, decrement, rename and reset rules
- Configuration loading and fallbacks
"""

import unittest
import tempfile
import os
import shutil
import sqlite3
import yaml

from config.config_manager import ConfigManager
from database.database_manager import DatabaseManager
from database.player_manager import PlayerManager
from database.player_store import PlayerStore
from models.errors import PlayerNotFoundError, InvalidPlayerNameError
from models.player import PlayerRecord
from utils.text_utils import TextUtils


DEFAULT_NAMES = ['Player One', 'Player Two', 'Player Three', 'Player Four']


class TestPlayerManager(unittest.TestCase):
    """Test cases for the SQLite persistence layer."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.test_db_path = os.path.join(self.test_dir, "test_euchred.db")
        self.db_manager = DatabaseManager(self.test_db_path, config=ConfigManager.get_default_config())
        self.player_manager = PlayerManager(self.db_manager)

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)

    def test_database_initialization(self):
        """Test that the players table and index exist."""
        with sqlite3.connect(self.test_db_path) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                SELECT name FROM sqlite_master
                WHERE type='table' AND name='players'
            """)
            self.assertIsNotNone(cursor.fetchone())

            cursor.execute("SELECT name FROM sqlite_master WHERE type='index'")
            indexes = [row[0] for row in cursor.fetchall()]
            self.assertIn('idx_players_order', indexes)

    def test_insert_and_list_in_order(self):
        """Test that players come back sorted by order, not insertion."""
        self.player_manager.insert_player(PlayerRecord(name='Second', order=1))
        self.player_manager.insert_player(PlayerRecord(name='First', order=0))

        players = self.player_manager.get_all_players()
        self.assertEqual([p.name for p in players], ['First', 'Second'])
        self.assertEqual([p.order for p in players], [0, 1])
        self.assertEqual(self.player_manager.count_players(), 2)

    def test_update_player_field(self):
        """Test updating name and score fields."""
        record = PlayerRecord(name='Alice', order=0)
        self.player_manager.insert_player(record)

        self.assertTrue(self.player_manager.update_player_field(record.id, 'score', 4))
        self.assertTrue(self.player_manager.update_player_field(record.id, 'name', 'Alicia'))

        stored = self.player_manager.get_player(record.id)
        self.assertEqual(stored.score, 4)
        self.assertEqual(stored.name, 'Alicia')
        self.assertEqual(stored.order, 0)

    def test_update_unknown_player(self):
        """Test that updating a missing row reports no change."""
        self.assertFalse(self.player_manager.update_player_field('missing', 'score', 1))
        self.assertIsNone(self.player_manager.get_player('missing'))

    def test_update_rejects_other_fields(self):
        """Test that only name and score can be updated."""
        record = PlayerRecord(name='Alice', order=0)
        self.player_manager.insert_player(record)
        with self.assertRaises(ValueError):
            self.player_manager.update_player_field(record.id, 'player_order', 3)

    def test_negative_score_rejected_by_schema(self):
        """Test that the schema refuses negative scores."""
        record = PlayerRecord(name='Alice', order=0)
        self.player_manager.insert_player(record)
        with self.assertRaises(sqlite3.IntegrityError):
            self.player_manager.update_player_field(record.id, 'score', -1)

    def test_database_stats(self):
        """Test basic database statistics."""
        self.player_manager.insert_player(PlayerRecord(name='Alice', order=0, score=3))
        self.player_manager.insert_player(PlayerRecord(name='Bob', order=1, score=2))
        stats = self.db_manager.get_database_stats()
        self.assertEqual(stats, {'players': 2, 'total_score': 5, 'top_score': 3})


class TestPlayerStore(unittest.TestCase):
    """Test cases for PlayerStore roster rules."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.test_db_path = os.path.join(self.test_dir, "test_euchred.db")
        self.db_manager = DatabaseManager(self.test_db_path, config=ConfigManager.get_default_config())
        self.store = PlayerStore(PlayerManager(self.db_manager))
        self.store.initialize_if_empty(DEFAULT_NAMES)
        self.players = self.store.get_players()

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)

    def test_initialize_creates_roster(self):
        """Test that the default roster is created in order with zero scores."""
        self.assertEqual([p.name for p in self.players], DEFAULT_NAMES)
        self.assertEqual([p.order for p in self.players], [0, 1, 2, 3])
        self.assertTrue(all(p.score == 0 for p in self.players))
        self.assertEqual(len({p.id for p in self.players}), 4)

    def test_initialize_is_idempotent(self):
        """Test that a second initialize leaves the roster alone."""
        self.store.increment(self.players[0].id)
        created = self.store.initialize_if_empty(['Someone Else'])
        self.assertEqual(created, 0)

        players = self.store.get_players()
        self.assertEqual([p.name for p in players], DEFAULT_NAMES)
        self.assertEqual(players[0].score, 1)

    def test_initialize_any_roster_size(self):
        """Test that the roster size follows the configured names."""
        other_db = DatabaseManager(os.path.join(self.test_dir, "six.db"), config=ConfigManager.get_default_config())
        store = PlayerStore(PlayerManager(other_db))
        names = ['A', 'B', 'C', 'D', 'E', 'F']
        self.assertEqual(store.initialize_if_empty(names), 6)
        self.assertEqual([p.name for p in store.get_players()], names)

    def test_increment(self):
        """Test that increment adds one win."""
        player_id = self.players[1].id
        self.store.increment(player_id)
        updated = self.store.increment(player_id)
        self.assertEqual(updated.score, 2)
        self.assertEqual(self.store.get_player(player_id).score, 2)

    def test_decrement(self):
        """Test that decrement removes one win."""
        player_id = self.players[2].id
        self.store.increment(player_id)
        self.store.increment(player_id)
        self.assertEqual(self.store.decrement(player_id).score, 1)

    def test_decrement_at_zero_is_noop(self):
        """Test that scores never go negative."""
        player_id = self.players[0].id
        self.assertEqual(self.store.decrement(player_id).score, 0)
        self.assertEqual(self.store.get_player(player_id).score, 0)

    def test_unknown_player_raises(self):
        """Test that mutations on an unknown id raise PlayerNotFoundError."""
        for operation in (self.store.increment, self.store.decrement):
            with self.assertRaises(PlayerNotFoundError):
                operation('no-such-player')
        with self.assertRaises(PlayerNotFoundError):
            self.store.rename('no-such-player', 'Bob')

    def test_rename_trims_whitespace(self):
        """Test that surrounding whitespace is trimmed."""
        player_id = self.players[0].id
        self.assertTrue(self.store.rename(player_id, ' Bob '))
        self.assertEqual(self.store.get_player(player_id).name, 'Bob')

    def test_rename_blank_is_rejected(self):
        """Test that a blank name leaves the old name in place."""
        player_id = self.players[0].id
        self.assertFalse(self.store.rename(player_id, '   '))
        self.assertFalse(self.store.rename(player_id, ''))
        self.assertEqual(self.store.get_player(player_id).name, 'Player One')

    def test_rename_truncates_long_names(self):
        """Test that names are truncated to 20 characters."""
        player_id = self.players[0].id
        self.assertTrue(self.store.rename(player_id, 'A' * 25))
        self.assertEqual(self.store.get_player(player_id).name, 'A' * 20)

    def test_rename_keeps_score(self):
        """Test that renaming does not touch the score."""
        player_id = self.players[3].id
        self.store.increment(player_id)
        self.store.rename(player_id, 'Dana')
        player = self.store.get_player(player_id)
        self.assertEqual((player.name, player.score), ('Dana', 1))

    def test_duplicate_names_stay_distinct(self):
        """Test that two players may share a name and keep separate scores."""
        first, second = self.players[0].id, self.players[1].id
        self.store.rename(first, 'Sam')
        self.store.rename(second, 'Sam')
        self.store.increment(first)

        snapshot = self.store.score_snapshot()
        self.assertEqual(snapshot[first], 1)
        self.assertEqual(snapshot[second], 0)

    def test_reset_all_scores(self):
        """Test that every score is cleared."""
        for player in self.players:
            self.store.increment(player.id)
        self.store.reset_all_scores()
        self.assertEqual(set(self.store.score_snapshot().values()), {0})

    def test_reset_all_names(self):
        """Test that names go back to defaults by position and scores are kept."""
        self.store.rename(self.players[0].id, 'Alice')
        self.store.rename(self.players[3].id, 'Dave')
        self.store.increment(self.players[3].id)

        self.store.reset_all_names(DEFAULT_NAMES)

        players = self.store.get_players()
        self.assertEqual([p.name for p in players], DEFAULT_NAMES)
        self.assertEqual(players[3].score, 1)

    def test_reset_all_names_with_short_list(self):
        """Test that players without a default name keep their name."""
        self.store.rename(self.players[3].id, 'Dave')
        self.store.reset_all_names(['North', 'East'])
        self.assertEqual([p.name for p in self.store.get_players()],
                         ['North', 'East', 'Player Three', 'Dave'])

    def test_score_snapshot_keys_by_id(self):
        """Test that the snapshot covers the whole roster by id."""
        snapshot = self.store.score_snapshot()
        self.assertEqual(set(snapshot), {p.id for p in self.players})

    def test_state_survives_new_store(self):
        """Test that scores and names are persisted across store instances."""
        self.store.increment(self.players[0].id)
        self.store.rename(self.players[0].id, 'Alice')

        reopened = PlayerStore(PlayerManager(DatabaseManager(self.test_db_path, config=ConfigManager.get_default_config())))
        player = reopened.get_player(self.players[0].id)
        self.assertEqual((player.name, player.score), ('Alice', 1))


class TestTextUtils(unittest.TestCase):
    """Test cases for name cleaning."""

    def test_clean_player_name(self):
        self.assertEqual(TextUtils.clean_player_name('  Bob  '), 'Bob')
        self.assertEqual(TextUtils.clean_player_name('x' * 30, 10), 'x' * 10)

    def test_clean_player_name_strips_cut_whitespace(self):
        """Test that truncation does not leave trailing whitespace."""
        self.assertEqual(TextUtils.clean_player_name('Anna Maria', 5), 'Anna')

    def test_clean_player_name_rejects_blank(self):
        for raw in ('', '   ', '\t', None):
            with self.assertRaises(InvalidPlayerNameError):
                TextUtils.clean_player_name(raw)

    def test_pluralize(self):
        self.assertEqual(TextUtils.pluralize(1, 'player'), '1 player')
        self.assertEqual(TextUtils.pluralize(4, 'player'), '4 players')


class TestConfigManager(unittest.TestCase):
    """Test cases for configuration loading."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.test_config_path = os.path.join(self.test_dir, "test_config.yaml")

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)

    def test_config_loading(self):
        """Test configuration loading from YAML file."""
        with open(self.test_config_path, 'w') as f:
            yaml.dump({'default_names': ['North', 'South'], 'max_name_length': 12}, f)

        config = ConfigManager.load_config(self.test_config_path)
        self.assertEqual(config['default_names'], ['North', 'South'])
        self.assertEqual(config['max_name_length'], 12)
        # Missing keys come from the defaults
        self.assertEqual(config['database_path'], 'euchred.db')

    def test_default_config_fallback(self):
        """Test fallback to default config when file is missing."""
        config = ConfigManager.load_config(os.path.join(self.test_dir, "nonexistent.yaml"))
        self.assertEqual(config, ConfigManager.get_default_config())

    def test_malformed_config_fallback(self):
        """Test fallback to default config when the YAML is broken."""
        with open(self.test_config_path, 'w') as f:
            f.write("default_names: [unclosed\n")
        config = ConfigManager.load_config(self.test_config_path)
        self.assertEqual(config, ConfigManager.get_default_config())

    def test_blank_default_names_dropped(self):
        """Test that blank roster entries are removed."""
        with open(self.test_config_path, 'w') as f:
            yaml.dump({'default_names': ['North', '  ', None, 'South']}, f)
        config = ConfigManager.load_config(self.test_config_path)
        self.assertEqual(config['default_names'], ['North', 'South'])

    def test_invalid_max_name_length_falls_back(self):
        """Test that PlayerStore ignores a nonsense name length."""
        config = ConfigManager.get_default_config()
        config['max_name_length'] = 0
        db_manager = DatabaseManager(os.path.join(self.test_dir, "len.db"), config=config)
        store = PlayerStore(PlayerManager(db_manager))
        self.assertEqual(store.max_name_length, 20)


if __name__ == '__main__':
    unittest.main()
