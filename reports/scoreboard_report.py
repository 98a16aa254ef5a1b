"""
Report generator for the Euchred scoreboard.
"""

import logging
import pandas as pd
from typing import Iterable, Optional
from models.leader import LeaderResult
from models.player import PlayerRecord
from ranking.scoreboard import Scoreboard

logger = logging.getLogger(__name__)

NO_LEADER_TEXT = "No Leader Yet"
CONFETTI = "* . o * . o * . o * . o * . o *"


class ScoreboardReport:
    """Renders the board as text and exports standings."""

    STANDINGS_COLUMNS = ['Position', 'Name', 'Score', 'Leader']

    def __init__(self, scoreboard: Scoreboard):
        self.scoreboard = scoreboard

    def render_board(self, result: Optional[LeaderResult] = None) -> str:
        """Leader heading followed by one line per player."""
        if result is None:
            result = self.scoreboard.last_result
        players = self.scoreboard.players()
        leaders = [player for player in players if player.id in result.leaders]

        lines = []
        if leaders and result.score > 0:
            lines.extend(player.name for player in leaders)
        else:
            lines.append(NO_LEADER_TEXT)
        lines.append("-" * 30)

        name_width = max([len(player.name) for player in players] + [4])
        for position, player in enumerate(players, 1):
            marker = "*" if player.id in result.leaders else " "
            lines.append(f"{marker} {position}. {player.name:<{name_width}}  {player.score:>3}")

        return "\n".join(lines)

    def render_celebration(self, leaders: Iterable[PlayerRecord]) -> str:
        """Banner shown when a new leader emerges."""
        names = [player.name for player in leaders]
        if not names:
            return ""
        if len(names) == 1:
            headline = f"{names[0]} takes the lead!"
        else:
            headline = f"{', '.join(names[:-1])} and {names[-1]} share the lead!"
        return "\n".join([CONFETTI, headline, CONFETTI])

    def build_standings_frame(self) -> pd.DataFrame:
        """Standings as a DataFrame, highest score first, ties in roster order."""
        result = self.scoreboard.last_result
        data = []
        for position, player in enumerate(self.scoreboard.players(), 1):
            data.append({
                'Position': position,
                'Name': player.name,
                'Score': player.score,
                'Leader': player.id in result.leaders
            })

        df = pd.DataFrame(data, columns=self.STANDINGS_COLUMNS)
        if not df.empty:
            df = df.sort_values(by=['Score', 'Position'], ascending=[False, True], kind='stable')
        return df.reset_index(drop=True)

    def export_standings(self, output_file: str) -> int:
        """
        Write standings to CSV.
        Returns the number of players written.
        """
        df = self.build_standings_frame()
        if df.empty:
            logger.warning("No players found for standings export")
        df.to_csv(output_file, index=False, encoding='utf-8')

        logger.info(f"Exported standings for {len(df)} players: {output_file}")
        return len(df)

