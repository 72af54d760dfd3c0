from __future__ import annotations

import re
from collections.abc import Iterable


def normalize_text(value: str) -> str:
    return re.sub(r"\s+", " ", value or "").strip()


def parse_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def dedupe_preserving_order(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    deduped: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        deduped.append(value)
    return deduped


def collect_keywords(repeated: Iterable[str] | None, keywords_csv: str | None) -> list[str]:
    """Comma-separated keywords come first, then each repeated ``--keyword``."""
    combined = parse_csv(keywords_csv) + [normalize_text(item) for item in repeated or ()]
    return dedupe_preserving_order(item for item in combined if item)


def parse_handles_csv(value: str | None) -> list[str]:
    handles = [item.lstrip("@").strip() for item in parse_csv(value)]
    return dedupe_preserving_order(handle for handle in handles if handle)
