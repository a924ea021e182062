"""
Text rendering of the scoreboard summary.
"""

from pathlib import Path
from typing import Sequence, Union

from jinja2 import Environment, FileSystemLoader

from .config import ScoreboardConfig
from .match import MatchSnapshot

TEMPLATES_PATH = Path(__file__).parent / "templates"


class SummaryRenderer:
    """Renders a summary as the plain-text board printed by the driver."""

    def __init__(
        self,
        config: ScoreboardConfig,
        templates_path: Union[str, Path] = TEMPLATES_PATH,
    ) -> None:
        self.config = config

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            auto_reload=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(
        self,
        summary: Sequence[MatchSnapshot],
    ) -> str:
        """
        Render the summary board.

        @param summary: Matches as returned by Scoreboard.get_summary()
        @return: Board text, one match per line
        """
        max_entries = self.config.get("summary", "max_entries")
        matches = list(summary)
        if max_entries:
            matches = matches[:max_entries]

        template = self.jinja_env.get_template("summary.txt.j2")
        return template.render(
            board_name=self.config.get("board_name"),
            show_header=self.config.is_enabled("summary", "show_header"),
            matches=matches,
        )
