from __future__ import annotations

from enum import StrEnum


class View(StrEnum):
    SYSTEM = "system"
    CPU = "cpu"
    MEMORY = "memory"
    DISKS = "disks"
    NETWORK = "network"
    COMPONENTS = "components"
    PROCESSES = "processes"
    SUMMARY = "summary"


class SortBy(StrEnum):
    CPU = "cpu"
    MEMORY = "memory"
    PID = "pid"
    NAME = "name"
