from __future__ import annotations

import logging
import os
import subprocess
from typing import Mapping, Protocol

from x_search.config import BEARER_TOKEN_ENV
from x_search.errors import AuthUnavailable
from x_search.models import AuthToken, TokenProvenance

logger = logging.getLogger(__name__)


class SecretProvider(Protocol):
    def resolve(self, reference: str) -> str: ...


class OnePasswordCliProvider:
    """Reads a secret with the 1Password CLI: ``op read <reference>``."""

    def __init__(self, binary: str = "op"):
        self.binary = binary

    def resolve(self, reference: str) -> str:
        try:
            completed = subprocess.run(
                [self.binary, "read", reference],
                stdin=subprocess.DEVNULL,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise AuthUnavailable(
                f"Failed to read bearer token via 1Password op CLI ({reference}).\n{exc}"
            ) from exc

        if completed.returncode != 0:
            raise AuthUnavailable(
                f"Failed to read bearer token via 1Password op CLI ({reference}).\n"
                f"{completed.stderr.strip()}"
            )
        return completed.stdout


def resolve_token(
    reference: str,
    *,
    environ: Mapping[str, str] | None = None,
    provider: SecretProvider | None = None,
) -> AuthToken:
    source = os.environ if environ is None else environ
    env_token = source.get(BEARER_TOKEN_ENV, "").strip()
    if env_token:
        logger.debug("using bearer token from %s", BEARER_TOKEN_ENV)
        return AuthToken(value=env_token, provenance=TokenProvenance.ENVIRONMENT)

    provider = provider or OnePasswordCliProvider()
    try:
        secret = provider.resolve(reference)
    except AuthUnavailable:
        raise
    except Exception as exc:
        raise AuthUnavailable(f"Secret provider failed for {reference}: {exc}") from exc

    token = (secret or "").strip()
    if not token:
        raise AuthUnavailable(f"Bearer token read from {reference} was empty")

    logger.debug("using bearer token from secret provider")
    return AuthToken(value=token, provenance=TokenProvenance.EXTERNAL_PROVIDER)
