from x_search.keywords import collect_keywords, normalize_text, parse_handles_csv


def test_normalize_text_collapses_spacing() -> None:
    assert normalize_text("  open   source\tai ") == "open source ai"


def test_csv_keywords_come_before_repeated_ones() -> None:
    assert collect_keywords(["gamma", " alpha "], "alpha, beta") == ["alpha", "beta", "gamma"]


def test_blank_keywords_are_dropped() -> None:
    assert collect_keywords(["", "   "], " , ,") == []


def test_handles_drop_at_prefix_and_duplicates() -> None:
    assert parse_handles_csv("@bob, alice,bob,,") == ["bob", "alice"]
