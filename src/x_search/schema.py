"""Subset of the recent-search payload that the normalizer consumes.

Anything else the provider sends is ignored; optional fields default to None.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class RawUser(_ProviderModel):
    id: str
    username: str | None = None
    name: str | None = None


class RawPost(_ProviderModel):
    id: str
    text: str = ""
    created_at: str | None = None
    lang: str | None = None
    author_id: str | None = None
    public_metrics: dict[str, Any] | None = None


class RawIncludes(_ProviderModel):
    users: list[RawUser] = Field(default_factory=list)


class RawSearchResponse(_ProviderModel):
    data: list[RawPost] = Field(default_factory=list)
    includes: RawIncludes | None = None
    meta: dict[str, Any] | None = None
