#!/usr/bin/env python3
"""Search Wikipedia for a term and print the summary of the best match."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from wikipedia_api import Page, PageContent, WikiClient, WikiConfig, WikiError


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("term", nargs="?", default="Programming Language")
    parser.add_argument("--full", action="store_true", help="Print the whole article instead of the intro")
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON config file")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    return parser.parse_args()


async def summarize(term: str, *, full: bool, client: WikiClient) -> str:
    page = await Page.search(term, client=client)
    if full:
        text = await page.get_content(PageContent.ALL, client=client)
    else:
        text = await page.get_summary(client=client)
    return f"{page.get_title()} ({page.get_url()}) Summarized:\n{text}"


def main() -> int:
    args = parse_args()
    if args.config is not None:
        config = WikiConfig.model_validate_json(args.config.read_text(encoding="utf-8"))
    else:
        config = WikiConfig()
    if args.timeout is not None:
        config = WikiConfig.model_validate({**config.model_dump(), "timeout": args.timeout})
    client = WikiClient(config)
    try:
        print(asyncio.run(summarize(args.term, full=args.full, client=client)))
    except WikiError as e:
        print(str(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
