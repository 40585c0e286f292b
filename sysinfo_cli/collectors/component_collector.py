from __future__ import annotations

import logging

import psutil

from sysinfo_cli.collectors.base import BaseCollector
from sysinfo_cli.models.snapshot import ComponentInfo
from sysinfo_cli.models.view import View

logger = logging.getLogger(__name__)


class ComponentCollector(BaseCollector):
    """Reads temperature sensors.

    psutil only exposes sensors on some platforms; elsewhere the list is
    empty.
    """

    name = "component_collector"
    view = View.COMPONENTS

    async def collect(self) -> list[ComponentInfo]:
        read_sensors = getattr(psutil, "sensors_temperatures", None)
        if read_sensors is None:
            logger.debug("Temperature sensors not supported on this platform")
            return []
        try:
            sensors = read_sensors()
        except OSError:
            logger.debug("Temperature sensors unreadable", exc_info=True)
            return []

        components: list[ComponentInfo] = []
        for chip, entries in sensors.items():
            for entry in entries:
                label = f"{chip} {entry.label}" if entry.label else chip
                components.append(
                    ComponentInfo(
                        label=label,
                        temperature=entry.current,
                        max=entry.high,
                        critical=entry.critical,
                    )
                )
        return components
