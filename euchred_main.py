#!/usr/bin/env python3
"""
Main application for the Euchred scoreboard.

Each run opens the saved roster, applies one command and prints the board.
"""

import logging
import sys
from typing import List, Optional, Tuple

from config.config_manager import ConfigManager
from database.database_manager import DatabaseManager
from database.player_manager import PlayerManager
from database.player_store import PlayerStore
from models.errors import EuchredError
from models.leader import LeaderResult
from ranking.scoreboard import Scoreboard
from reports.scoreboard_report import ScoreboardReport
from utils.text_utils import TextUtils

__version__ = "1.0.0"

DEFAULT_CONFIG_FILE = "config.yaml"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)

USAGE = """Euchred scoreboard usage:

  python euchred_main.py [--config FILE] [command]

Commands:
  show                - Show the board (default)
  win N               - Record a euchre for player N
  undo N              - Take one euchre away from player N
  rename N NAME       - Rename player N (blank names are ignored)
  clear               - Clear all scores
  reset-names         - Reset player names to the configured defaults
  export FILE         - Write standings to a CSV file
  version             - Show the version
  help                - Show this help message

Players are numbered by their position on the board, starting at 1.
"""


def configure_logging(level_name: str) -> None:
    """Configure root logging once for the process."""
    level = getattr(logging, str(level_name).upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def build_scoreboard(config_file: str = DEFAULT_CONFIG_FILE) -> Tuple[Scoreboard, ScoreboardReport]:
    """Open the database, load the roster and prime the leaders."""
    config = ConfigManager.load_config(config_file)
    configure_logging(config.get('log_level', 'INFO'))

    db_manager = DatabaseManager(config=config)
    player_store = PlayerStore(PlayerManager(db_manager))
    scoreboard = Scoreboard(player_store, config.get('default_names', []))
    scoreboard.open()
    logger.debug(f"Database statistics: {db_manager.get_database_stats()}")

    return scoreboard, ScoreboardReport(scoreboard)


def parse_position(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Player number must be a whole number, got '{value}'")


def print_result(report: ScoreboardReport, scoreboard: Scoreboard, result: LeaderResult) -> None:
    if result.celebrate:
        print(report.render_celebration(scoreboard.leaders()))
        print()
    print(report.render_board(result))


def run_command(scoreboard: Scoreboard, report: ScoreboardReport, command: str, args: List[str]) -> int:
    """Apply a single command. Returns the process exit code."""
    if command == 'show':
        print(report.render_board())
        return 0

    if command in ('win', 'undo'):
        if len(args) != 1:
            print(f"Usage: {command} N")
            return 1
        player = scoreboard.player_at(parse_position(args[0]))
        if command == 'win':
            result = scoreboard.record_win(player.id)
        else:
            result = scoreboard.undo_win(player.id)
        print_result(report, scoreboard, result)
        return 0

    if command == 'rename':
        if len(args) < 1:
            print("Usage: rename N NAME")
            return 1
        player = scoreboard.player_at(parse_position(args[0]))
        if not scoreboard.rename_player(player.id, " ".join(args[1:])):
            print(f"Player names cannot be blank. {player.name} keeps their name.")
        print(report.render_board())
        return 0

    if command == 'clear':
        result = scoreboard.clear_scores()
        print(f"Cleared scores for {TextUtils.pluralize(len(scoreboard.players()), 'player')}.")
        print(report.render_board(result))
        return 0

    if command == 'reset-names':
        scoreboard.reset_names()
        print(report.render_board())
        return 0

    if command == 'export':
        if len(args) != 1:
            print("Usage: export FILE")
            return 1
        count = report.export_standings(args[0])
        print(f"Exported standings for {TextUtils.pluralize(count, 'player')} to {args[0]}")
        return 0

    print(f"Unknown command: {command}")
    print("Use 'python euchred_main.py help' for usage information.")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)

    config_file = DEFAULT_CONFIG_FILE
    if args and args[0] == '--config':
        if len(args) < 2:
            print("Usage: --config FILE")
            return 1
        config_file = args[1]
        args = args[2:]

    command = args[0].lower() if args else 'show'
    if command == 'help':
        print(USAGE)
        return 0
    if command == 'version':
        print(f"Euchred {__version__}")
        return 0

    scoreboard, report = build_scoreboard(config_file)
    try:
        return run_command(scoreboard, report, command, args[1:])
    except EuchredError as e:
        logger.debug(f"Command {command} failed: {e}")
        print(e.user_message)
        return 1
    except ValueError as e:
        print(e)
        return 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error in Euchred scoreboard: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
