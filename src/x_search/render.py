from __future__ import annotations

import json
import re

from x_search.models import Post, ReportBundle, SearchRequest, SearchResult

DIGEST_POSTS_PER_KEYWORD = 10
SNIPPET_MAX_CHARS = 180
ELLIPSIS = "…"


def bundle_to_dict(bundle: ReportBundle) -> dict:
    request = bundle.request
    return {
        "generated_at": bundle.generated_at,
        "since": request.since,
        "start_time": bundle.start_time,
        "max": request.max_results,
        "lang": request.lang,
        "include_retweets": request.include_retweets,
        "exclude_from": list(request.exclude_from),
        "keywords": list(request.keywords),
        "results": {
            keyword: {
                "query": result.query,
                "meta": result.meta,
                "posts": [post.to_dict() for post in result.posts],
            }
            for keyword, result in bundle.results.items()
        },
    }


def render_json(bundle: ReportBundle) -> str:
    return json.dumps(bundle_to_dict(bundle), indent=2, ensure_ascii=False)


def make_snippet(text: str) -> str:
    collapsed = re.sub(r"\s+", " ", text or "").strip()
    if len(collapsed) <= SNIPPET_MAX_CHARS:
        return collapsed
    return collapsed[:SNIPPET_MAX_CHARS] + ELLIPSIS


def _post_line(post: Post) -> str:
    handle = f"@{post.author.handle}" if post.author and post.author.handle else "(unknown)"
    line = f"- {handle} — {make_snippet(post.text)} (<{post.url}>)"
    if post.created_at:
        line += f" — {post.created_at.replace('T', ' ')}"
    return line


def _empty_line(request: SearchRequest) -> str:
    lang = f"lang: {request.lang}, " if request.lang else ""
    retweets = "including retweets" if request.include_retweets else "excluding retweets"
    return f"- No recent results found in the last {request.since} ({lang}{retweets})."


def render_keyword(keyword: str, result: SearchResult, request: SearchRequest) -> list[str]:
    lines = ["", keyword]
    if not result.posts:
        lines.append(_empty_line(request))
        return lines
    for post in result.posts[:DIGEST_POSTS_PER_KEYWORD]:
        lines.append(_post_line(post))
    return lines


def render_digest(bundle: ReportBundle) -> str:
    request = bundle.request
    lines = [
        "Twitter/X keyword research",
        f"- since: {request.since} (start_time: {bundle.start_time})",
        f"- max per keyword: {request.max_results}",
        f"- lang: {request.lang or 'any'}",
        f"- retweets: {'included' if request.include_retweets else 'excluded'}",
        f"- exclude from: {', '.join(request.exclude_from) if request.exclude_from else 'none'}",
    ]
    for keyword in request.keywords:
        lines.extend(render_keyword(keyword, bundle.results[keyword], request))
    return "\n".join(lines)
