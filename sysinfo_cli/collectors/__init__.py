from .base import BaseCollector
from .component_collector import ComponentCollector
from .cpu_collector import CpuCollector
from .disk_collector import DiskCollector
from .memory_collector import MemoryCollector
from .network_collector import NetworkCollector
from .process_collector import ProcessCollector, select_processes
from .summary_collector import SummaryCollector
from .system_collector import SystemCollector

__all__ = [
    "BaseCollector",
    "ComponentCollector",
    "CpuCollector",
    "DiskCollector",
    "MemoryCollector",
    "NetworkCollector",
    "ProcessCollector",
    "SummaryCollector",
    "SystemCollector",
    "select_processes",
]
