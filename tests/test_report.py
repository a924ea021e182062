from live_scoreboard import ScoreboardConfig, SummaryRenderer


def _board(scoreboard):
    scoreboard.start_match("Mexico", "Canada")
    scoreboard.update_score("Mexico", "Canada", 0, 5)
    scoreboard.start_match("Spain", "Brazil")
    scoreboard.update_score("Spain", "Brazil", 10, 2)
    return scoreboard.get_summary()


def test_render_with_header(scoreboard, config):
    text = SummaryRenderer(config).render(_board(scoreboard))

    assert text.splitlines() == [
        "Live Football World Cup Score Board",
        "=" * len("Live Football World Cup Score Board"),
        "Spain 10 - Brazil 2",
        "Mexico 0 - Canada 5",
    ]


def test_render_without_header(scoreboard, monkeypatch):
    monkeypatch.setenv("SHOW_HEADER", "false")
    text = SummaryRenderer(ScoreboardConfig()).render(_board(scoreboard))
    assert text.splitlines() == ["Spain 10 - Brazil 2", "Mexico 0 - Canada 5"]


def test_render_truncates_to_max_entries(scoreboard, monkeypatch):
    monkeypatch.setenv("SUMMARY_MAX_ENTRIES", "1")
    text = SummaryRenderer(ScoreboardConfig()).render(_board(scoreboard))
    assert "Spain 10 - Brazil 2" in text
    assert "Mexico" not in text


def test_render_empty_summary(config):
    text = SummaryRenderer(config).render([])
    assert text.splitlines()[-1] == "No matches in progress"
