"""
Leader tracking for the Euchred scoreboard.

The tracker remembers who led after the previous score change and compares
each new snapshot against it:

* nobody above zero             -> no leader, state cleared
* no leader remembered yet      -> adopt, celebrate
* higher maximum than before    -> adopt, celebrate
* same maximum, new player tied -> adopt, celebrate
* anything else                 -> adopt quietly

"Anything else" covers a leader dropping out of a tie and a falling
maximum. Leadership still follows the current top scores but nothing is
celebrated when a score goes down.
"""

import logging
from typing import Dict, FrozenSet, Mapping
from models.leader import LeaderState, LeaderResult

logger = logging.getLogger(__name__)

NO_LEADER = LeaderResult(leaders=frozenset(), score=0, celebrate=False)


class LeaderTracker:
    """Derives the leader set from score snapshots and decides when to celebrate."""

    def __init__(self):
        self._state = LeaderState()

    @property
    def state(self) -> LeaderState:
        return self._state

    def reset(self) -> None:
        """Forget the remembered leaders."""
        self._state = LeaderState()

    def prime(self, current_scores: Mapping[str, int]) -> LeaderResult:
        """
        Adopt the current leaders without celebrating.
        Used on start-up so a restored roster does not replay a celebration.
        """
        scores = self._clean_scores(current_scores)
        max_score = max(scores.values(), default=0)
        if max_score <= 0:
            self.reset()
            return NO_LEADER

        top_keys = self._top_keys(scores, max_score)
        self._state = LeaderState(leader_keys=top_keys, leader_score=max_score)
        logger.debug(f"Primed leaders {sorted(top_keys)} at {max_score}")
        return LeaderResult(leaders=top_keys, score=max_score, celebrate=False)

    def recompute(self, current_scores: Mapping[str, int]) -> LeaderResult:
        """Recompute leaders from a full score snapshot. Never raises."""
        scores = self._clean_scores(current_scores)
        max_score = max(scores.values(), default=0)
        if max_score <= 0:
            if not self._state.is_empty:
                logger.info("No leader: all scores are zero")
            self.reset()
            return NO_LEADER

        top_keys = self._top_keys(scores, max_score)
        previous = self._state

        if previous.is_empty:
            celebrate = True
            logger.info(f"First leader(s) {sorted(top_keys)} at {max_score}")
        elif max_score > previous.leader_score:
            celebrate = True
            logger.info(f"New high score {max_score} by {sorted(top_keys)}")
        elif max_score == previous.leader_score and top_keys != previous.leader_keys:
            # Only a player joining the top counts; dropping out of a tie is quiet
            celebrate = bool(top_keys - previous.leader_keys)
            logger.info(f"Leaders at {max_score} changed to {sorted(top_keys)}")
        else:
            celebrate = False
            if top_keys != previous.leader_keys:
                logger.info(f"Leadership passed to {sorted(top_keys)} at {max_score}")

        self._state = LeaderState(leader_keys=top_keys, leader_score=max_score)
        return LeaderResult(leaders=top_keys, score=max_score, celebrate=celebrate)

    @staticmethod
    def _top_keys(scores: Dict[str, int], max_score: int) -> FrozenSet[str]:
        return frozenset(key for key, score in scores.items() if score == max_score)

    @staticmethod
    def _clean_scores(current_scores: Mapping[str, int]) -> Dict[str, int]:
        """Drop entries that are not integer scores."""
        if not current_scores:
            return {}

        scores = {}
        try:
            items = list(current_scores.items())
        except AttributeError:
            logger.warning(f"Ignoring score snapshot of type {type(current_scores).__name__}")
            return {}

        for key, score in items:
            if isinstance(score, bool) or not isinstance(score, int):
                logger.warning(f"Ignoring non-integer score {score!r} for {key}")
                continue
            scores[key] = score
        return scores
