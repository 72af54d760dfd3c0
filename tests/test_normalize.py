from x_search.normalize import normalize_response
from x_search.schema import RawSearchResponse


def test_resolved_author_gets_handle_url() -> None:
    raw = RawSearchResponse.model_validate(
        {
            "data": [
                {
                    "id": "100",
                    "text": "hello",
                    "author_id": "7",
                    "created_at": "2026-10-18T10:00:00.000Z",
                    "lang": "en",
                    "public_metrics": {"like_count": 3, "retweet_count": 1},
                }
            ],
            "includes": {"users": [{"id": "7", "username": "ann", "name": "Ann A."}]},
            "meta": {"result_count": 1, "newest_id": "100"},
        }
    )

    result = normalize_response("q", raw)

    post = result.posts[0]
    assert post.url == "https://x.com/ann/status/100"
    assert post.author is not None and post.author.to_dict() == {"id": "7", "handle": "ann", "name": "Ann A."}
    assert post.public_metrics == {"like_count": 3, "retweet_count": 1}
    assert result.meta == {"result_count": 1, "newest_id": "100"}
    assert result.query == "q"


def test_unmatched_author_falls_back_to_web_status_url() -> None:
    raw = RawSearchResponse.model_validate(
        {
            "data": [{"id": "200", "text": "orphan", "author_id": "missing"}],
            "includes": {"users": [{"id": "7", "username": "ann", "name": "Ann"}]},
        }
    )

    post = normalize_response("q", raw).posts[0]

    assert post.url == "https://x.com/i/web/status/200"
    assert post.author is not None and post.author.to_dict() == {"id": "missing"}


def test_post_without_author_id_still_has_url() -> None:
    raw = RawSearchResponse.model_validate({"data": [{"id": "300", "text": "x"}]})

    post = normalize_response("q", raw).posts[0]

    assert post.author is None
    assert post.url == "https://x.com/i/web/status/300"


def test_provider_order_is_preserved() -> None:
    raw = RawSearchResponse.model_validate(
        {"data": [{"id": "3", "text": "c"}, {"id": "1", "text": "a"}, {"id": "2", "text": "b"}]}
    )

    assert [post.id for post in normalize_response("q", raw).posts] == ["3", "1", "2"]
