from __future__ import annotations

import psutil

from sysinfo_cli.collectors.base import BaseCollector
from sysinfo_cli.models.snapshot import MemoryInfo
from sysinfo_cli.models.view import View


def read_memory_info() -> MemoryInfo:
    ram = psutil.virtual_memory()
    swap = psutil.swap_memory()
    return MemoryInfo(
        total_memory=ram.total,
        used_memory=ram.total - ram.available,
        total_swap=swap.total,
        used_swap=swap.used,
    )


class MemoryCollector(BaseCollector):
    """Refreshes RAM and swap only."""

    name = "memory_collector"
    view = View.MEMORY

    async def collect(self) -> MemoryInfo:
        return read_memory_info()
