from __future__ import annotations

from x_search.models import Author, Post, SearchResult
from x_search.schema import RawPost, RawSearchResponse, RawUser

SITE_BASE_URL = "https://x.com"


def post_url(post_id: str, handle: str | None) -> str:
    if handle:
        return f"{SITE_BASE_URL}/{handle}/status/{post_id}"
    return f"{SITE_BASE_URL}/i/web/status/{post_id}"


def _author_for(raw: RawPost, users_by_id: dict[str, RawUser]) -> Author | None:
    if raw.author_id is None:
        return None
    user = users_by_id.get(raw.author_id)
    if user is None or not user.username:
        return Author(id=raw.author_id)
    return Author(id=raw.author_id, handle=user.username, name=user.name)


def normalize_response(query: str, raw: RawSearchResponse) -> SearchResult:
    """Join expanded authors onto posts and give every post a canonical URL."""
    users = raw.includes.users if raw.includes else []
    users_by_id = {user.id: user for user in users}

    posts: list[Post] = []
    for item in raw.data:
        author = _author_for(item, users_by_id)
        posts.append(
            Post(
                id=item.id,
                text=item.text,
                url=post_url(item.id, author.handle if author else None),
                author=author,
                created_at=item.created_at,
                lang=item.lang,
                public_metrics=item.public_metrics,
            )
        )

    return SearchResult(query=query, posts=posts, meta=raw.meta)
