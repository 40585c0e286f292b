from __future__ import annotations

import argparse
import asyncio
import logging
import shutil
import sys
from typing import TextIO

from sysinfo_cli.collectors import (
    BaseCollector,
    ComponentCollector,
    CpuCollector,
    DiskCollector,
    MemoryCollector,
    NetworkCollector,
    ProcessCollector,
    SummaryCollector,
    SystemCollector,
)
from sysinfo_cli.config import Settings
from sysinfo_cli.formatting import TextFormatter, render_json
from sysinfo_cli.models.view import View

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"

# reports written to files are never cut to the terminal width
FILE_WIDTH = 1000

_COLLECTORS: dict[View, type[BaseCollector]] = {
    View.SYSTEM: SystemCollector,
    View.CPU: CpuCollector,
    View.MEMORY: MemoryCollector,
    View.DISKS: DiskCollector,
    View.NETWORK: NetworkCollector,
    View.COMPONENTS: ComponentCollector,
    View.SUMMARY: SummaryCollector,
}


class Monitor:
    """Runs collect → format → emit cycles for one view.

    With ``watch`` unset a single cycle runs. Otherwise cycles repeat every
    ``watch`` seconds until the task is interrupted.
    """

    def __init__(
        self,
        collector: BaseCollector,
        formatter: TextFormatter | None = None,
        *,
        json_output: bool = False,
        watch: int | None = None,
        output: str | None = None,
        clear_screen: bool = True,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.collector = collector
        self.formatter = formatter or TextFormatter()
        self.json_output = json_output
        self.watch = watch
        self.output = output
        self.clear_screen = clear_screen
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    # ── cycle ───────────────────────────────────────────

    async def run_cycle(self) -> str:
        snapshot = await self.collector.collect()
        if self.json_output:
            return render_json(snapshot)
        return self.formatter.render(self.collector.view, snapshot)

    def emit(self, report: str) -> None:
        """Print *report*, or overwrite the output file with it.

        File errors are reported on stderr and never abort the loop.
        """
        if self.output is None:
            self.stdout.write(report + "\n")
            self.stdout.flush()
            return

        try:
            handle = open(self.output, "w", encoding="utf-8")
        except OSError:
            logger.debug("Cannot open %s", self.output, exc_info=True)
            self.stderr.write(f"Error creating file: {self.output}\n")
            return
        # buffered data may only fail to reach the disk on close
        try:
            with handle:
                handle.write(report)
        except OSError as exc:
            logger.debug("Cannot write %s", self.output, exc_info=True)
            self.stderr.write(f"Error writing to file: {exc}\n")

    async def run(self) -> None:
        if self.watch is None:
            self.emit(await self.run_cycle())
            return

        logger.info(
            "Watching [%s] every %ds", self.collector.view, self.watch
        )
        while True:
            self.emit(await self.run_cycle())
            await asyncio.sleep(self.watch)
            if self._should_clear():
                self.stdout.write(CLEAR_SCREEN)
                self.stdout.flush()

    def _should_clear(self) -> bool:
        return (
            self.clear_screen
            and not self.json_output
            and self.output is None
            and self.stdout.isatty()
        )


def build_collector(args: argparse.Namespace, settings: Settings) -> BaseCollector:
    view = View(args.command) if args.command else View.SUMMARY
    if view is View.PROCESSES:
        return ProcessCollector(
            sample_interval=settings.cpu_sample_interval,
            name_filter=args.name_filter,
            limit=args.limit,
            sort=args.sort,
        )
    return _COLLECTORS[view](sample_interval=settings.cpu_sample_interval)


def build_monitor(args: argparse.Namespace, settings: Settings) -> Monitor:
    # files never get ANSI escapes
    color = settings.color and not args.no_color and args.output is None
    formatter = TextFormatter(
        color=color,
        label_width=settings.label_width,
        name_max_width=settings.name_max_width,
        width=FILE_WIDTH if args.output else shutil.get_terminal_size((120, 24)).columns,
    )
    return Monitor(
        build_collector(args, settings),
        formatter,
        json_output=args.json,
        watch=args.watch,
        output=args.output,
        clear_screen=settings.clear_screen,
    )
