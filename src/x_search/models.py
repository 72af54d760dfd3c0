from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any


class TokenProvenance(str, Enum):
    ENVIRONMENT = "environment"
    EXTERNAL_PROVIDER = "external-provider"


@dataclass(frozen=True)
class AuthToken:
    value: str = field(repr=False)
    provenance: TokenProvenance


@dataclass(frozen=True)
class SearchRequest:
    keywords: tuple[str, ...]
    since: str
    window_ms: int
    max_results: int
    lang: str | None = None
    exclude_from: tuple[str, ...] = ()
    include_retweets: bool = False

    @property
    def window(self) -> timedelta:
        return timedelta(milliseconds=self.window_ms)


@dataclass(frozen=True)
class Author:
    id: str
    handle: str | None = None
    name: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.handle is None:
            return {"id": self.id}
        return {"id": self.id, "handle": self.handle, "name": self.name}


@dataclass(frozen=True)
class Post:
    id: str
    text: str
    url: str
    author: Author | None = None
    created_at: str | None = None
    lang: str | None = None
    public_metrics: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "created_at": self.created_at,
            "lang": self.lang,
            "text": self.text,
            "author": self.author.to_dict() if self.author else None,
            "public_metrics": self.public_metrics,
            "url": self.url,
        }


@dataclass(frozen=True)
class SearchResult:
    query: str
    posts: list[Post]
    meta: dict[str, Any] | None = None


@dataclass(frozen=True)
class ReportBundle:
    generated_at: str
    start_time: str
    request: SearchRequest
    results: dict[str, SearchResult]
