from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from x_search.errors import ArgumentError

BEARER_TOKEN_ENV = "TWITTER_BEARER_TOKEN"
DEFAULT_TOKEN_REF = "op://OpenClaw/X.com/Bearer Token"
DEFAULT_USER_AGENT = "x-search/0.1"


class Settings(BaseModel):
    token_ref: str = DEFAULT_TOKEN_REF
    op_binary: str = "op"
    request_timeout_seconds: float = Field(default=20.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT
    search_retry_attempts: int = Field(default=3, ge=1)
    search_retry_delay_seconds: float = Field(default=1.0, ge=0.0)

    @field_validator("token_ref")
    @classmethod
    def _validate_token_ref(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("X_SEARCH_TOKEN_REF must not be blank")
        return value.strip()


def _env_value(environ: Mapping[str, str], key: str) -> str:
    return environ.get(key, "").strip()


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    source = os.environ if environ is None else environ
    payload = {
        "token_ref": _env_value(source, "X_SEARCH_TOKEN_REF") or DEFAULT_TOKEN_REF,
        "op_binary": _env_value(source, "X_SEARCH_OP_BINARY") or "op",
        "request_timeout_seconds": _env_value(source, "REQUEST_TIMEOUT_SECONDS") or "20",
        "user_agent": _env_value(source, "USER_AGENT") or DEFAULT_USER_AGENT,
        "search_retry_attempts": _env_value(source, "SEARCH_RETRY_ATTEMPTS") or "3",
        "search_retry_delay_seconds": _env_value(source, "SEARCH_RETRY_DELAY_SECONDS") or "1",
    }
    try:
        return Settings(**payload)
    except ValidationError as exc:
        raise ArgumentError(str(exc)) from exc
