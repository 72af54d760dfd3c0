from __future__ import annotations

from collections.abc import Iterable

from x_search.duration import MAX_RECENT_WINDOW_MS, parse_duration_ms
from x_search.errors import ArgumentError, DurationError
from x_search.keywords import collect_keywords, parse_handles_csv
from x_search.models import SearchRequest

MIN_MAX_RESULTS = 1
MAX_MAX_RESULTS = 100
DEFAULT_SINCE = "24h"
DEFAULT_MAX_RESULTS = 20


def build_search_request(
    *,
    keyword: Iterable[str] | None = None,
    keywords_csv: str | None = None,
    since: str = DEFAULT_SINCE,
    max_results: int = DEFAULT_MAX_RESULTS,
    lang: str | None = None,
    include_retweets: bool = False,
    exclude_from_csv: str | None = None,
) -> SearchRequest:
    keywords = collect_keywords(keyword, keywords_csv)
    if not keywords:
        raise ArgumentError("No keywords provided. Use --keyword or --keywords.")

    window_ms = parse_duration_ms(since)
    if window_ms > MAX_RECENT_WINDOW_MS:
        raise DurationError(
            f"Invalid --since: {since}. Twitter/X recent search only supports up to 7d. "
            "Use --since 7d (or less) or switch to a different endpoint/plan for longer timeframes."
        )

    if not MIN_MAX_RESULTS <= max_results <= MAX_MAX_RESULTS:
        raise ArgumentError(
            f"Invalid --max: {max_results} (must be {MIN_MAX_RESULTS}..{MAX_MAX_RESULTS})"
        )

    return SearchRequest(
        keywords=tuple(keywords),
        since=since.strip(),
        window_ms=window_ms,
        max_results=max_results,
        lang=(lang or "").strip() or None,
        exclude_from=tuple(parse_handles_csv(exclude_from_csv)),
        include_retweets=include_retweets,
    )
