"""
Match entity and the read-only snapshots handed out by the scoreboard.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .errors import InvalidArgumentError, InvalidStateError
from .sequence import MatchSequence


class MatchStatus(Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass(frozen=True)
class Score:
    """Home and away goals."""

    home: int = 0
    away: int = 0

    @property
    def total(self) -> int:
        return self.home + self.away


@dataclass(frozen=True)
class MatchSnapshot:
    """Immutable view of a match at the moment it was taken."""

    home_team: str
    away_team: str
    score: Score
    start_order: int
    status: MatchStatus

    @property
    def total_score(self) -> int:
        return self.score.total

    @property
    def is_finished(self) -> bool:
        return self.status is MatchStatus.FINISHED

    @property
    def is_in_progress(self) -> bool:
        return self.status is MatchStatus.IN_PROGRESS

    def __str__(self) -> str:
        return (
            f"{self.home_team} {self.score.home} - "
            f"{self.away_team} {self.score.away}"
        )


def _check_team_name(name: Any) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidArgumentError(f"Team name cannot be null or empty: {name!r}")


def _check_goals(value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"Score must be an integer: {value!r}")


class Match:
    """
    A contest between two teams.

    Two matches compare equal when their team names match, regardless of
    score or status. Matches live inside a Scoreboard; callers get
    MatchSnapshot values instead.
    """

    def __init__(
        self,
        home_team: str,
        away_team: str,
        sequence: MatchSequence,
    ) -> None:
        """
        Create an in-progress match with a 0-0 score.

        @param home_team: Name of the home team
        @param away_team: Name of the away team
        @param sequence: Counter the start order is drawn from
        @raise InvalidArgumentError: If either name is missing or blank
        """
        _check_team_name(home_team)
        _check_team_name(away_team)

        self._home_team = home_team
        self._away_team = away_team
        self._start_order = sequence.next_order()
        self._score = Score()
        self._status = MatchStatus.IN_PROGRESS

    @property
    def home_team(self) -> str:
        return self._home_team

    @property
    def away_team(self) -> str:
        return self._away_team

    @property
    def start_order(self) -> int:
        return self._start_order

    @property
    def score(self) -> Score:
        return self._score

    @property
    def status(self) -> MatchStatus:
        return self._status

    @property
    def total_score(self) -> int:
        return self._score.total

    @property
    def is_finished(self) -> bool:
        return self._status is MatchStatus.FINISHED

    @property
    def is_in_progress(self) -> bool:
        return self._status is MatchStatus.IN_PROGRESS

    def update_score(
        self,
        home_score: int,
        away_score: int,
    ) -> None:
        """
        Replace both sides of the score.

        @param home_score: New home team score
        @param away_score: New away team score
        @raise InvalidArgumentError: If either value is negative or not an int
        @raise InvalidStateError: If the match has already finished
        """
        _check_goals(home_score)
        _check_goals(away_score)

        if home_score < 0 or away_score < 0:
            raise InvalidArgumentError(
                f"Score cannot be smaller than 0: {self._home_team} {home_score}"
                f" - {self._away_team} {away_score}"
            )
        if self.is_finished:
            raise InvalidStateError(f"Match {self} has already been finished.")

        self._score = Score(home_score, away_score)

    def finish(self) -> None:
        """
        Mark the match as finished. There is no way back.

        @raise InvalidStateError: If the match has already finished
        """
        if self.is_finished:
            raise InvalidStateError(f"Match {self} is already finished.")
        self._status = MatchStatus.FINISHED

    def snapshot(self) -> MatchSnapshot:
        return MatchSnapshot(
            home_team=self._home_team,
            away_team=self._away_team,
            score=self._score,
            start_order=self._start_order,
            status=self._status,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Match):
            return NotImplemented
        return (self._home_team, self._away_team) == (
            other._home_team,
            other._away_team,
        )

    def __hash__(self) -> int:
        return hash((self._home_team, self._away_team))

    def __str__(self) -> str:
        return (
            f"{self._home_team} {self._score.home} - "
            f"{self._away_team} {self._score.away}"
        )

    def __repr__(self) -> str:
        return (
            f"Match({self._home_team!r}, {self._away_team!r}, "
            f"score={self._score.home}-{self._score.away}, "
            f"status={self._status.name}, start_order={self._start_order})"
        )
