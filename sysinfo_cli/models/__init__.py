from .snapshot import (
    ComponentInfo,
    CpuInfo,
    DiskInfo,
    MemoryInfo,
    NetworkInfo,
    ProcessInfo,
    SingleCpuInfo,
    Summary,
    SystemInfo,
)
from .view import SortBy, View

__all__ = [
    "ComponentInfo",
    "CpuInfo",
    "DiskInfo",
    "MemoryInfo",
    "NetworkInfo",
    "ProcessInfo",
    "SingleCpuInfo",
    "SortBy",
    "Summary",
    "SystemInfo",
    "View",
]
