from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from pydantic import BaseModel

from sysinfo_cli.models.view import View

logger = logging.getLogger(__name__)

Snapshot = BaseModel | Sequence[BaseModel]


class BaseCollector(ABC):
    """Abstract base for all view collectors.

    Subclasses implement ``collect()`` which reads only the OS facilities
    their view needs and returns a fresh snapshot. Collectors that report
    CPU usage prime the counters, call ``_wait_sample_window()`` and read
    them again.
    """

    name: str = "base"
    view: View
    sample_interval: float = 0.2  # seconds between two CPU samples

    def __init__(self, sample_interval: float | None = None) -> None:
        if sample_interval is not None:
            self.sample_interval = sample_interval

    # ── abstract method ─────────────────────────────────

    @abstractmethod
    async def collect(self) -> Snapshot:
        """Query the OS and return a snapshot for this view."""
        ...

    # ── internals ───────────────────────────────────────

    async def _wait_sample_window(self) -> None:
        logger.debug(
            "Collector [%s] sampling CPU over %.2fs", self.name, self.sample_interval
        )
        await asyncio.sleep(self.sample_interval)
