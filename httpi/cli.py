"""Command line entry point: resolve a URL template and optionally send it."""

from __future__ import annotations

import argparse
import asyncio
import json
from typing import Any, Sequence

from httpi.client import HttpClient
from httpi.config import Settings, get_settings
from httpi.dispatcher import Httpi
from httpi.interpolation import interpolate_url
from httpi.logging import configure_logging
from httpi.request import RequestConfig

METHODS = ("GET", "POST", "PUT", "DELETE", "HEAD", "JSONP")


def _parse_pairs(pairs: Sequence[str] | None) -> dict[str, Any]:
    """Turn ``key=value`` arguments into a dict, decoding JSON values when possible."""

    result: dict[str, Any] = {}
    for pair in pairs or ():
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {pair!r}")
        try:
            result[key] = json.loads(raw)
        except json.JSONDecodeError:
            result[key] = raw
    return result


def build_config(args: argparse.Namespace) -> RequestConfig:
    return RequestConfig(
        url=args.url,
        method=args.method,
        params=_parse_pairs(args.param),
        data=_parse_pairs(args.data),
        timeout=args.timeout,
        keep_trailing_slash=args.keep_trailing_slash,
    )


async def _send(config: RequestConfig, settings: Settings) -> dict[str, Any]:
    client = HttpClient(settings=settings)
    async with client.lifecycle():
        response = await Httpi(client)(config)
    return {
        "url": str(response.url),
        "status_code": response.status_code,
        "body": response.text,
    }


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Interpolate a URL template with params/data and send the request")
    ap.add_argument("url", help="URL template, e.g. /users/:userID(/posts/:postID)")
    ap.add_argument("-X", "--method", type=str.upper, choices=METHODS, default="GET", help="HTTP verb")
    ap.add_argument("-p", "--param", action="append", metavar="KEY=VALUE", help="Query/label value (repeatable)")
    ap.add_argument("-d", "--data", action="append", metavar="KEY=VALUE", help="Body/label value, wins over --param")
    ap.add_argument("--timeout", type=float, default=None, help="Numeric timeout in seconds (disables abort)")
    ap.add_argument("--keep-trailing-slash", action="store_true", help="Keep trailing slashes after interpolation")
    ap.add_argument("--dry-run", action="store_true", help="Print the resolved URL and leftovers without sending")
    return ap


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        config = build_config(args)
    except ValueError as exc:
        raise SystemExit(str(exc))

    if args.dry_run:
        url = interpolate_url(config.url, config.params, config.data, not config.keep_trailing_slash)
        print(json.dumps({"url": url, "params": config.params, "data": config.data}, indent=2))
        return

    try:
        result = asyncio.run(_send(config, settings))
    except Exception as exc:  # pragma: no cover - CLI surface
        raise SystemExit(f"Request failed: {exc}")

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
