from __future__ import annotations

import logging
import platform

from sysinfo_cli.collectors.base import BaseCollector
from sysinfo_cli.models.snapshot import SystemInfo
from sysinfo_cli.models.view import View

logger = logging.getLogger(__name__)


def _os_release() -> dict[str, str]:
    try:
        return platform.freedesktop_os_release()
    except OSError:
        logger.debug("No os-release file, falling back to platform module")
        return {}


def _os_version(release: dict[str, str]) -> str | None:
    if release.get("VERSION_ID"):
        return release["VERSION_ID"]
    mac_version = platform.mac_ver()[0]
    if mac_version:
        return mac_version
    return platform.version() or None


def read_system_info() -> SystemInfo:
    release = _os_release()
    return SystemInfo(
        name=release.get("NAME") or platform.system() or None,
        kernel_version=platform.release() or None,
        os_version=_os_version(release),
        host_name=platform.node() or None,
    )


class SystemCollector(BaseCollector):
    """Reports static host facts; refreshes nothing."""

    name = "system_collector"
    view = View.SYSTEM

    async def collect(self) -> SystemInfo:
        return read_system_info()
