from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

import psutil

from sysinfo_cli.collectors.base import BaseCollector
from sysinfo_cli.models.snapshot import ProcessInfo
from sysinfo_cli.models.view import SortBy, View

logger = logging.getLogger(__name__)

_GONE = (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess)


# sort key and whether it runs descending
_SORT_KEYS: dict[SortBy, tuple[Callable[[ProcessInfo], Any], bool]] = {
    SortBy.CPU: (lambda p: p.cpu_usage, True),
    SortBy.MEMORY: (lambda p: p.memory, True),
    SortBy.PID: (lambda p: p.pid, False),  # text order, like the name
    SortBy.NAME: (lambda p: p.name.lower(), False),
}


def select_processes(
    processes: Iterable[ProcessInfo],
    name_filter: str | None = None,
    sort: SortBy = SortBy.CPU,
    limit: int | None = None,
) -> list[ProcessInfo]:
    """Filter by name substring, sort, then truncate to *limit* entries.

    The filter is case-sensitive. Sorting is stable, so ties keep the order
    in which *processes* were given.
    """
    if name_filter is not None:
        processes = [p for p in processes if name_filter in p.name]
    key, descending = _SORT_KEYS[SortBy(sort)]
    selected = sorted(processes, key=key, reverse=descending)
    if limit is not None:
        selected = selected[:limit]
    return selected


class ProcessCollector(BaseCollector):
    """Samples per-process CPU and resident memory for the process table."""

    name = "process_collector"
    view = View.PROCESSES

    def __init__(
        self,
        sample_interval: float | None = None,
        name_filter: str | None = None,
        limit: int | None = None,
        sort: SortBy = SortBy.CPU,
    ) -> None:
        super().__init__(sample_interval=sample_interval)
        self.name_filter = name_filter
        self.limit = limit
        self.sort = sort

    async def collect(self) -> list[ProcessInfo]:
        tracked = []
        for proc in psutil.process_iter(["pid", "name", "memory_info"]):
            try:
                proc.cpu_percent(interval=None)
            except _GONE:
                continue
            tracked.append(proc)

        await self._wait_sample_window()

        processes: list[ProcessInfo] = []
        for proc in tracked:
            try:
                cpu_usage = proc.cpu_percent(interval=None)
            except _GONE:
                logger.debug("Process %s vanished during sampling", proc.info.get("pid"))
                continue
            info = proc.info
            memory_info = info.get("memory_info")
            processes.append(
                ProcessInfo(
                    pid=str(info["pid"]),
                    name=info.get("name") or "",
                    cpu_usage=cpu_usage,
                    memory=memory_info.rss if memory_info else 0,
                )
            )

        return select_processes(processes, self.name_filter, self.sort, self.limit)
