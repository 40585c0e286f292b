from __future__ import annotations

import logging
from pathlib import Path

import psutil

from sysinfo_cli.collectors.base import BaseCollector
from sysinfo_cli.models.snapshot import DiskInfo
from sysinfo_cli.models.view import View

logger = logging.getLogger(__name__)

SYS_ROOT = Path("/sys")

_ROTATIONAL_KIND = {"0": "SSD", "1": "HDD"}


def disk_kind(device: str, sys_root: Path = SYS_ROOT) -> str:
    """Classify *device* as SSD or HDD from sysfs, ``Unknown`` otherwise.

    Partitions are resolved to their parent block device, which is the one
    carrying ``queue/rotational``.
    """
    name = Path(device).name
    if not name:
        return "Unknown"
    block = sys_root / "class" / "block" / name
    try:
        if (block / "partition").exists():
            name = block.resolve().parent.name
        rotational = (sys_root / "block" / name / "queue" / "rotational").read_text()
    except OSError:
        return "Unknown"
    return _ROTATIONAL_KIND.get(rotational.strip(), "Unknown")


class DiskCollector(BaseCollector):
    """Lists mounted partitions with their free and total space."""

    name = "disk_collector"
    view = View.DISKS

    def __init__(
        self,
        sample_interval: float | None = None,
        sys_root: Path = SYS_ROOT,
    ) -> None:
        super().__init__(sample_interval=sample_interval)
        self._sys_root = sys_root

    async def collect(self) -> list[DiskInfo]:
        disks: list[DiskInfo] = []
        for part in psutil.disk_partitions(all=False):
            try:
                usage = psutil.disk_usage(part.mountpoint)
            except OSError:
                logger.debug("Skipping %s: usage unavailable", part.mountpoint)
                continue
            disks.append(
                DiskInfo(
                    name=part.device,
                    kind=disk_kind(part.device, self._sys_root),
                    file_system=part.fstype,
                    mount_point=part.mountpoint,
                    available_space=usage.free,
                    total_space=usage.total,
                )
            )
        return disks
