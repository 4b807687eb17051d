"""Command line interface for one-off forecast summaries."""

from __future__ import annotations

import argparse
import asyncio
import sys

from ..config import get_settings
from ..context import AppContext
from ..log import setup_logging
from .errors import PipelineFailure


async def _run(address: str) -> int:
    context = AppContext(get_settings())
    try:
        summary = await context.agent.get_forecast_summary(address)
    except PipelineFailure as e:
        print(e.reason, file=sys.stderr)
        return 1
    finally:
        await context.aclose()
    print(summary)
    return 0


def main(argv: list[str] | None = None, prog_name: str | None = None) -> None:
    parser = argparse.ArgumentParser(prog=prog_name, description="Summarize the NWS forecast for an address")
    parser.add_argument("address")
    args = parser.parse_args(argv)
    setup_logging(get_settings().log_level)
    sys.exit(asyncio.run(_run(args.address)))


if __name__ == "__main__":
    main()
