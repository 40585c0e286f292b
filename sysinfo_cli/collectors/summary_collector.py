from __future__ import annotations

import psutil

from sysinfo_cli.collectors.base import BaseCollector
from sysinfo_cli.collectors.memory_collector import read_memory_info
from sysinfo_cli.collectors.system_collector import read_system_info
from sysinfo_cli.models.snapshot import Summary
from sysinfo_cli.models.view import View


class SummaryCollector(BaseCollector):
    """System facts, RAM and global CPU usage for the default report."""

    name = "summary_collector"
    view = View.SUMMARY

    async def collect(self) -> Summary:
        psutil.cpu_percent(interval=None)
        await self._wait_sample_window()
        return Summary(
            system=read_system_info(),
            memory=read_memory_info(),
            cpu_total_usage=psutil.cpu_percent(interval=None),
            nb_cpus=psutil.cpu_count() or 0,
        )
