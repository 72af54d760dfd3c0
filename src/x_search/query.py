from __future__ import annotations

from collections.abc import Sequence


def build_query(
    keyword: str,
    *,
    include_retweets: bool = False,
    lang: str | None = None,
    exclude_from: Sequence[str] = (),
) -> str:
    """Compose a recent-search query, wrapping the expression so far before each filter."""
    query = keyword
    if not include_retweets:
        query = f"({query}) -is:retweet"
    if lang:
        query = f"({query}) lang:{lang}"
    if exclude_from:
        terms = " ".join(f"-from:{handle}" for handle in exclude_from)
        query = f"({query}) {terms}"
    return query
