import json

from x_search.models import Author, Post, ReportBundle, SearchResult
from x_search.render import make_snippet, render_digest, render_json
from x_search.request import build_search_request


def _bundle(results: dict[str, SearchResult], **request_kwargs) -> ReportBundle:
    request = build_search_request(keyword=list(results), **request_kwargs)
    return ReportBundle(
        generated_at="2026-10-19T08:00:00Z",
        start_time="2026-10-18T08:00:00Z",
        request=request,
        results=results,
    )


def _post(post_id: str, text: str = "hello", handle: str | None = "ann") -> Post:
    author = Author(id="7", handle=handle, name="Ann") if handle else Author(id="7")
    url = f"https://x.com/{handle}/status/{post_id}" if handle else f"https://x.com/i/web/status/{post_id}"
    return Post(id=post_id, text=text, url=url, author=author, created_at="2026-10-18T10:00:00.000Z")


def test_snippet_collapses_whitespace_and_truncates() -> None:
    assert make_snippet("  a \n\n b\tc ") == "a b c"
    assert make_snippet("x" * 180) == "x" * 180
    assert make_snippet("x" * 181) == "x" * 180 + "…"


def test_empty_result_renders_only_sentinel_line() -> None:
    bundle = _bundle({"alpha": SearchResult(query="(alpha) -is:retweet", posts=[])}, lang="de")

    lines = render_digest(bundle).splitlines()

    index = lines.index("alpha")
    assert lines[index + 1:] == [
        "- No recent results found in the last 24h (lang: de, excluding retweets)."
    ]


def test_digest_post_line_format() -> None:
    bundle = _bundle({"alpha": SearchResult(query="q", posts=[_post("1"), _post("2", handle=None)])})

    lines = render_digest(bundle).splitlines()

    assert "- @ann — hello (<https://x.com/ann/status/1>) — 2026-10-18 10:00:00.000Z" in lines
    assert "- (unknown) — hello (<https://x.com/i/web/status/2>) — 2026-10-18 10:00:00.000Z" in lines


def test_digest_shows_at_most_ten_posts() -> None:
    posts = [_post(str(i)) for i in range(15)]
    bundle = _bundle({"alpha": SearchResult(query="q", posts=posts)})

    post_lines = [line for line in render_digest(bundle).splitlines() if line.startswith("- @ann")]

    assert len(post_lines) == 10


def test_digest_header_echoes_filters() -> None:
    bundle = _bundle(
        {"alpha": SearchResult(query="q", posts=[])},
        include_retweets=True,
        exclude_from_csv="bob,carol",
    )

    text = render_digest(bundle)

    assert text.startswith("Twitter/X keyword research\n")
    assert "- since: 24h (start_time: 2026-10-18T08:00:00Z)" in text
    assert "- retweets: included" in text
    assert "- exclude from: bob, carol" in text
    assert "(including retweets)" in text


def test_json_keeps_everything() -> None:
    long_text = "word " * 100
    post = Post(
        id="1",
        text=long_text,
        url="https://x.com/i/web/status/1",
        author=Author(id="9"),
        public_metrics={"like_count": 5},
    )
    bundle = _bundle({"alpha": SearchResult(query="q", posts=[post], meta={"result_count": 1})})

    payload = json.loads(render_json(bundle))

    assert payload["since"] == "24h"
    assert payload["max"] == 20
    assert payload["keywords"] == ["alpha"]
    rendered = payload["results"]["alpha"]
    assert rendered["meta"] == {"result_count": 1}
    assert rendered["posts"][0]["text"] == long_text
    assert rendered["posts"][0]["author"] == {"id": "9"}
    assert rendered["posts"][0]["public_metrics"] == {"like_count": 5}
