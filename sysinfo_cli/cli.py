from __future__ import annotations

import argparse
from collections.abc import Sequence

from sysinfo_cli import __version__
from sysinfo_cli.config import Settings
from sysinfo_cli.models.view import SortBy

# subcommand -> help text
COMMANDS = {
    "system": "Show general system information",
    "cpu": "Show CPU information",
    "memory": "Show memory and swap information",
    "disks": "Show disk information",
    "network": "Show network information",
    "components": "Show components (temperature, etc.)",
    "processes": "Show running processes",
}


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _add_global_options(parser: argparse.ArgumentParser, *, suppress: bool) -> None:
    """Register the options accepted both before and after the subcommand.

    Subparsers get ``SUPPRESS`` defaults so they never overwrite a value
    already parsed by the top-level parser.
    """
    def default(value):
        return argparse.SUPPRESS if suppress else value

    parser.add_argument(
        "-j", "--json", action="store_true", default=default(False),
        help="Output in JSON format",
    )
    parser.add_argument(
        "-w", "--watch", type=_non_negative_int, metavar="SECONDS", default=default(None),
        help="Refresh interval in seconds for continuous monitoring",
    )
    parser.add_argument(
        "-o", "--output", metavar="PATH", default=default(None),
        help="Save output to a file",
    )
    parser.add_argument(
        "--no-color", action="store_true", default=default(False),
        help="Disable ANSI colors in text output",
    )


def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    settings = settings or Settings()
    parser = argparse.ArgumentParser(
        prog=settings.app_name,
        description="Query CPU, memory, disks, network, sensors and processes",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    _add_global_options(parser, suppress=False)
    parser.set_defaults(name_filter=None, limit=None, sort=settings.default_sort.value)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    for command, help_text in COMMANDS.items():
        sub = subparsers.add_parser(command, help=help_text, description=help_text)
        _add_global_options(sub, suppress=True)
        if command == "processes":
            sub.add_argument(
                "-f", "--filter", dest="name_filter", metavar="TEXT",
                help="Filter processes by name",
            )
            sub.add_argument(
                "-l", "--limit", type=_non_negative_int,
                help="Number of processes to show (default: all)",
            )
            sub.add_argument(
                "-s", "--sort", choices=[s.value for s in SortBy],
                default=settings.default_sort.value,
                help="Sort by a specific criteria (default: %(default)s)",
            )
    return parser


def parse_args(
    argv: Sequence[str] | None = None,
    settings: Settings | None = None,
) -> argparse.Namespace:
    args = build_parser(settings).parse_args(argv)
    args.sort = SortBy(args.sort)
    return args
