from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from x_search.models import AuthToken, ReportBundle, SearchRequest, SearchResult
from x_search.normalize import normalize_response
from x_search.query import build_query
from x_search.schema import RawSearchResponse

logger = logging.getLogger(__name__)

# (token, query, max_results, start_time) -> raw provider payload
Searcher = Callable[[AuthToken, str, int, str], RawSearchResponse]


def format_utc(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def run_search(
    request: SearchRequest,
    token: AuthToken,
    *,
    search: Searcher,
    now_utc: datetime | None = None,
) -> ReportBundle:
    """Search every keyword in order; any failure propagates and nothing is kept."""
    run_at_utc = now_utc or datetime.now(timezone.utc)
    start_time = format_utc(run_at_utc - request.window)

    results: dict[str, SearchResult] = {}
    for keyword in request.keywords:
        query = build_query(
            keyword,
            include_retweets=request.include_retweets,
            lang=request.lang,
            exclude_from=request.exclude_from,
        )
        logger.info("searching %r with query %r", keyword, query)
        raw = search(token, query, request.max_results, start_time)
        results[keyword] = normalize_response(query, raw)
        logger.info("%r returned %d posts", keyword, len(results[keyword].posts))

    return ReportBundle(
        generated_at=format_utc(run_at_utc),
        start_time=start_time,
        request=request,
        results=results,
    )
