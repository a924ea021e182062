"""
Live Scoreboard - tracks live football matches and ranks the ones in progress.

This package provides:
- An in-memory scoreboard keyed by normalized team pairing
- Match entities with a one-way in-progress -> finished lifecycle
- Summary ordering by total score, then most recently started
- JSON/env configuration and a plain-text summary renderer
"""

from .errors import InvalidArgumentError, InvalidStateError, ScoreboardError
from .sequence import MatchSequence
from .match import Match, MatchSnapshot, MatchStatus, Score
from .scoreboard import Scoreboard, match_key
from .config import ScoreboardConfig, setup_logging
from .report import SummaryRenderer

__version__ = "1.0.0"

__all__ = [
    "InvalidArgumentError",
    "InvalidStateError",
    "Match",
    "MatchSequence",
    "MatchSnapshot",
    "MatchStatus",
    "Score",
    "Scoreboard",
    "ScoreboardConfig",
    "ScoreboardError",
    "SummaryRenderer",
    "match_key",
    "setup_logging",
]
