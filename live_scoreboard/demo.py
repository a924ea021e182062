"""
Demo driver: plays a fixed set of matches and prints the summary board.
"""

import argparse
import os
from typing import List, Optional, Sequence, Tuple

from .config import LOG_LEVELS, ScoreboardConfig, setup_logging
from .errors import ScoreboardError
from .match import MatchSnapshot
from .report import SummaryRenderer
from .scoreboard import Scoreboard

# (home, away, home score, away score)
DEMO_FIXTURES: List[Tuple[str, str, int, int]] = [
    ("Mexico", "Canada", 0, 5),
    ("Spain", "Brazil", 10, 2),
    ("Germany", "France", 2, 2),
    ("Uruguay", "Italy", 6, 6),
    ("Argentina", "Australia", 3, 1),
]


def run_demo(scoreboard: Scoreboard) -> List[MatchSnapshot]:
    """
    Start and score the demo fixtures, then finish Mexico v Canada.

    @param scoreboard: Scoreboard to play the fixtures on
    @return: Resulting summary
    """
    for home_team, away_team, home_score, away_score in DEMO_FIXTURES:
        scoreboard.start_match(home_team, away_team)
        scoreboard.update_score(home_team, away_team, home_score, away_score)

    scoreboard.finish_match("Mexico", "Canada")
    return scoreboard.get_summary()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main function with command line interface."""

    parser = argparse.ArgumentParser(
        description="Live football scoreboard demo",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--config",
        default=os.getenv("CONFIG_PATH"),
        help="JSON configuration file path (env: CONFIG_PATH)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level, overrides the config file (env: LOG_LEVEL)",
    )

    args = parser.parse_args(argv)

    config = ScoreboardConfig(args.config)
    setup_logging(args.log_level or config.get("logging", "level"))

    try:
        summary = run_demo(Scoreboard())
    except ScoreboardError as e:
        print(f"Error: {e}")
        return 1

    print(SummaryRenderer(config).render(summary), end="")
    return 0
