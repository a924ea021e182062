"""
In-memory registry of live matches.
"""

import logging
from typing import Any, Dict, List, Optional

from .errors import InvalidArgumentError
from .match import Match, MatchSnapshot
from .sequence import MatchSequence

logger = logging.getLogger(__name__)


def match_key(
    home_team: Any,
    away_team: Any,
) -> str:
    """
    Build the registry key for a pairing.

    Names are trimmed and lowercased, then joined with a hyphen, so
    " Mexico " vs "CANADA" gives "mexico-canada".

    @param home_team: Name of the home team
    @param away_team: Name of the away team
    @return: Normalized "home-away" key
    @raise InvalidArgumentError: If either name is None or not a string
    """
    if not isinstance(home_team, str) or not isinstance(away_team, str):
        raise InvalidArgumentError(
            f"Team names must be strings: {home_team!r}, {away_team!r}"
        )
    return f"{home_team.strip().lower()}-{away_team.strip().lower()}"


class Scoreboard:
    """
    Tracks started matches and ranks the ones still in progress.

    A finished match keeps its key: the same pairing cannot be started again
    on this scoreboard.

    Not thread-safe. Callers sharing one instance across threads must
    serialize access themselves.
    """

    def __init__(
        self,
        sequence: Optional[MatchSequence] = None,
    ) -> None:
        """
        Create an empty scoreboard.

        @param sequence: Start-order counter to use (default: a fresh one)
        """
        self._sequence = sequence if sequence is not None else MatchSequence()
        self._matches: Dict[str, Match] = {}

    def __len__(self) -> int:
        return len(self._matches)

    def __contains__(self, key: object) -> bool:
        return key in self._matches

    def start_match(
        self,
        home_team: str,
        away_team: str,
    ) -> str:
        """
        Start a new match between the given teams.

        @param home_team: Name of the home team
        @param away_team: Name of the away team
        @return: Key of the started match
        @raise InvalidArgumentError: If a name is missing or blank, or the
            pairing has already been started (finished or not)
        """
        key = match_key(home_team, away_team)

        if key in self._matches:
            logger.info("Rejected start of %s: already started", key)
            raise InvalidArgumentError(f"Match {key} has already been started.")

        self._matches[key] = Match(home_team, away_team, self._sequence)
        logger.debug("Started match %s", key)
        return key

    def update_score(
        self,
        home_team: str,
        away_team: str,
        home_score: int,
        away_score: int,
    ) -> str:
        """
        Update the score of a match looked up by team names.

        @param home_team: Name of the home team
        @param away_team: Name of the away team
        @param home_score: New home team score
        @param away_score: New away team score
        @return: Key of the updated match
        @raise InvalidArgumentError: If no such match exists or a score is negative
        @raise InvalidStateError: If the match has finished
        """
        return self.update_score_by_key(
            match_key(home_team, away_team), home_score, away_score
        )

    def update_score_by_key(
        self,
        key: str,
        home_score: int,
        away_score: int,
    ) -> str:
        """
        Update the score of a match looked up by key.

        @param key: Key returned by start_match
        @param home_score: New home team score
        @param away_score: New away team score
        @return: Key of the updated match
        @raise InvalidArgumentError: If no such match exists or a score is negative
        @raise InvalidStateError: If the match has finished
        """
        match = self._get(key)
        match.update_score(home_score, away_score)
        logger.debug("Updated %s to %d-%d", key, home_score, away_score)
        return key

    def finish_match(
        self,
        home_team: str,
        away_team: str,
    ) -> MatchSnapshot:
        """
        Finish a match looked up by team names.

        The match drops out of the summary but stays on the scoreboard.

        @param home_team: Name of the home team
        @param away_team: Name of the away team
        @return: Snapshot of the finished match
        @raise InvalidArgumentError: If no such match exists
        @raise InvalidStateError: If the match has already finished
        """
        return self.finish_match_by_key(match_key(home_team, away_team))

    def finish_match_by_key(
        self,
        key: str,
    ) -> MatchSnapshot:
        """
        Finish a match looked up by key.

        @param key: Key returned by start_match
        @return: Snapshot of the finished match
        @raise InvalidArgumentError: If no such match exists
        @raise InvalidStateError: If the match has already finished
        """
        match = self._get(key)
        match.finish()
        logger.debug("Finished match %s (%s)", key, match)
        return match.snapshot()

    def get_match(
        self,
        key: str,
    ) -> MatchSnapshot:
        """
        Look up any stored match, finished or not.

        @param key: Key returned by start_match
        @return: Snapshot of the match
        @raise InvalidArgumentError: If no such match exists
        """
        return self._get(key).snapshot()

    def get_summary(self) -> List[MatchSnapshot]:
        """
        Get the in-progress matches, best first.

        Ordered by total score (highest first), then by start order (most
        recently started first).

        @return: New list of match snapshots
        """
        in_progress = [m for m in self._matches.values() if m.is_in_progress]
        in_progress.sort(key=lambda m: (m.total_score, m.start_order), reverse=True)
        return [m.snapshot() for m in in_progress]

    def _get(
        self,
        key: str,
    ) -> Match:
        match = self._matches.get(key)
        if match is None:
            logger.info("No match found for key %r", key)
            raise InvalidArgumentError(f"No match {key} was found.")
        return match
