from __future__ import annotations

import json
import logging
from contextlib import AbstractContextManager

import httpx
from pydantic import ValidationError
from tenacity import (
    Retrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from x_search.config import Settings
from x_search.errors import ApiError
from x_search.models import AuthToken
from x_search.schema import RawSearchResponse

logger = logging.getLogger(__name__)

RECENT_SEARCH_URL = "https://api.twitter.com/2/tweets/search/recent"
TWEET_FIELDS = "created_at,public_metrics,lang,author_id"
EXPANSIONS = "author_id"
USER_FIELDS = "username,name"
RATE_LIMITED_STATUS = 429
RAW_BODY_PREVIEW_CHARS = 200


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, ApiError) and exc.status == RATE_LIMITED_STATUS


def _error_message(payload: object) -> str:
    if isinstance(payload, dict):
        detail = payload.get("detail") or payload.get("title")
        if detail:
            return str(detail)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def parse_search_response(response: httpx.Response) -> RawSearchResponse:
    try:
        payload = response.json()
    except ValueError as exc:
        raise ApiError(
            response.status_code,
            f"Twitter API returned non-JSON (status {response.status_code}): "
            f"{response.text[:RAW_BODY_PREVIEW_CHARS]}",
        ) from exc

    if not response.is_success:
        raise ApiError(response.status_code, _error_message(payload))

    try:
        return RawSearchResponse.model_validate(payload)
    except ValidationError as exc:
        raise ApiError(response.status_code, f"unexpected response shape: {exc}") from exc


class RecentSearchClient(AbstractContextManager["RecentSearchClient"]):
    def __init__(self, settings: Settings, http_client: httpx.Client | None = None):
        self.settings = settings
        self.http = http_client or httpx.Client(
            timeout=settings.request_timeout_seconds,
            follow_redirects=True,
        )

    def _retrying(self) -> Retrying:
        return Retrying(
            stop=stop_after_attempt(self.settings.search_retry_attempts),
            wait=wait_exponential(multiplier=self.settings.search_retry_delay_seconds, max=60),
            retry=retry_if_exception(_is_transient),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

    def _get(self, token: AuthToken, params: dict[str, str]) -> RawSearchResponse:
        response = self.http.get(
            RECENT_SEARCH_URL,
            params=params,
            headers={
                "Authorization": f"Bearer {token.value}",
                "User-Agent": self.settings.user_agent,
            },
        )
        return parse_search_response(response)

    def search(
        self,
        token: AuthToken,
        query: str,
        max_results: int,
        start_time: str,
    ) -> RawSearchResponse:
        params = {
            "query": query,
            "max_results": str(max_results),
            "tweet.fields": TWEET_FIELDS,
            "expansions": EXPANSIONS,
            "user.fields": USER_FIELDS,
            "start_time": start_time,
        }
        try:
            return self._retrying()(self._get, token, params)
        except httpx.TransportError as exc:
            raise ApiError(None, f"network error: {exc}") from exc

    def close(self) -> None:
        self.http.close()

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        self.close()
