"""Command-line entry point: ``sysinfo-cli`` / ``python -m sysinfo_cli``."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence

from sysinfo_cli.cli import parse_args
from sysinfo_cli.config import Settings
from sysinfo_cli.driver import build_monitor

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"


def main(argv: Sequence[str] | None = None) -> int:
    settings = Settings()
    # stderr keeps JSON on stdout parseable
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT, stream=sys.stderr)

    args = parse_args(argv, settings)
    monitor = build_monitor(args, settings)
    logger.debug("Parsed arguments: %s", args)

    try:
        asyncio.run(monitor.run())
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
