from __future__ import annotations

import argparse
import logging
import sys

from x_search.auth.token import OnePasswordCliProvider, resolve_token
from x_search.client import RecentSearchClient
from x_search.config import load_settings
from x_search.errors import XSearchError
from x_search.pipeline import run_search
from x_search.render import render_digest, render_json
from x_search.request import DEFAULT_MAX_RESULTS, DEFAULT_SINCE, build_search_request

EPILOG = """\
Auth:
  If TWITTER_BEARER_TOKEN is set, it is used.
  Otherwise the token is read with: op read "<token-ref>".

Filtering:
  --exclude-from adds -from:<username> terms to the query.
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="x-search",
        description="Search Twitter/X recent posts (last 7 days max) by keyword.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-k",
        "--keyword",
        action="append",
        default=[],
        help="Keyword/query (repeatable)",
    )
    parser.add_argument("--keywords", default=None, help="Comma-separated keywords")
    parser.add_argument(
        "--since",
        default=DEFAULT_SINCE,
        help="Timeframe: 30m | 1h | 24h | 2d | 7d (default: %(default)s)",
    )
    parser.add_argument(
        "--max",
        dest="max_results",
        type=int,
        default=DEFAULT_MAX_RESULTS,
        help="Max results per keyword (1..100, default: %(default)s)",
    )
    parser.add_argument("--lang", default=None, help="Filter by post language (e.g. de, en)")
    parser.add_argument(
        "--include-retweets",
        action="store_true",
        default=False,
        help="Include retweets (default: exclude)",
    )
    parser.add_argument(
        "--exclude-from",
        default=None,
        help="Comma-separated usernames whose posts are excluded",
    )
    parser.add_argument("--json", action="store_true", default=False, help="Output JSON instead of a digest")
    parser.add_argument(
        "--token-ref",
        default=None,
        help="1Password reference for the bearer token (default: X_SEARCH_TOKEN_REF or op://OpenClaw/X.com/Bearer Token)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log progress to stderr")
    return parser


def _cmd_search(args: argparse.Namespace) -> int:
    request = build_search_request(
        keyword=args.keyword,
        keywords_csv=args.keywords,
        since=args.since,
        max_results=args.max_results,
        lang=args.lang,
        include_retweets=args.include_retweets,
        exclude_from_csv=args.exclude_from,
    )
    settings = load_settings()
    token = resolve_token(
        args.token_ref or settings.token_ref,
        provider=OnePasswordCliProvider(settings.op_binary),
    )

    with RecentSearchClient(settings) as client:
        bundle = run_search(request, token, search=client.search)

    output = render_json(bundle) if args.json else render_digest(bundle)
    sys.stdout.write(output)
    sys.stdout.write("\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return _cmd_search(args)
    except XSearchError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
