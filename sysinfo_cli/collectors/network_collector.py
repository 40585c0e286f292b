from __future__ import annotations

import psutil

from sysinfo_cli.collectors.base import BaseCollector
from sysinfo_cli.models.snapshot import NetworkInfo
from sysinfo_cli.models.view import View


class NetworkCollector(BaseCollector):
    """Reports cumulative bytes received and sent per interface."""

    name = "network_collector"
    view = View.NETWORK

    async def collect(self) -> list[NetworkInfo]:
        counters = psutil.net_io_counters(pernic=True)
        return [
            NetworkInfo(
                interface=interface,
                received=stats.bytes_recv,
                transmitted=stats.bytes_sent,
            )
            for interface, stats in counters.items()
        ]
