from __future__ import annotations

import logging
import platform
from pathlib import Path

import psutil

from sysinfo_cli.collectors.base import BaseCollector
from sysinfo_cli.models.snapshot import CpuInfo, SingleCpuInfo
from sysinfo_cli.models.view import View

logger = logging.getLogger(__name__)

CPUINFO_PATH = Path("/proc/cpuinfo")


def read_cpu_identity(path: Path = CPUINFO_PATH) -> tuple[str, str]:
    """Return ``(vendor, brand)`` of the first processor listed in *path*."""
    try:
        text = path.read_text(encoding="utf-8", errors="ignore")
    except OSError:
        text = ""

    vendor = brand = ""
    for line in text.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        if key == "vendor_id" and not vendor:
            vendor = value.strip()
        elif key == "model name" and not brand:
            brand = value.strip()
        if vendor and brand:
            break

    if not brand:
        brand = platform.processor()
    return vendor, brand


class CpuCollector(BaseCollector):
    """Samples global and per-core CPU usage over the sampling window."""

    name = "cpu_collector"
    view = View.CPU

    def __init__(
        self,
        sample_interval: float | None = None,
        cpuinfo_path: Path = CPUINFO_PATH,
    ) -> None:
        super().__init__(sample_interval=sample_interval)
        self._cpuinfo_path = cpuinfo_path

    async def collect(self) -> CpuInfo:
        # First call only primes the counters
        psutil.cpu_percent(interval=None)
        psutil.cpu_percent(interval=None, percpu=True)
        await self._wait_sample_window()
        total_usage = psutil.cpu_percent(interval=None)
        per_cpu = psutil.cpu_percent(interval=None, percpu=True)

        vendor, brand = read_cpu_identity(self._cpuinfo_path)
        cpus = [
            SingleCpuInfo(id=i, usage=usage, vendor=vendor, brand=brand)
            for i, usage in enumerate(per_cpu)
        ]
        return CpuInfo(nb_cpus=len(cpus), cpus=cpus, total_usage=total_usage)
