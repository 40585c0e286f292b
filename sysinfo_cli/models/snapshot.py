from __future__ import annotations

from pydantic import BaseModel, Field


class SystemInfo(BaseModel):
    """Static host facts. Fields the OS does not report stay ``None``."""

    name: str | None = None
    kernel_version: str | None = None
    os_version: str | None = None
    host_name: str | None = None


class SingleCpuInfo(BaseModel):
    id: int
    usage: float = 0.0
    vendor: str = ""
    brand: str = ""


class CpuInfo(BaseModel):
    nb_cpus: int = 0
    cpus: list[SingleCpuInfo] = Field(default_factory=list)
    total_usage: float = 0.0


class MemoryInfo(BaseModel):
    """RAM and swap, in bytes."""

    total_memory: int = 0
    used_memory: int = 0
    total_swap: int = 0
    used_swap: int = 0


class DiskInfo(BaseModel):
    name: str
    kind: str = "Unknown"
    file_system: str = ""
    mount_point: str = ""
    available_space: int = 0
    total_space: int = 0


class NetworkInfo(BaseModel):
    """Cumulative traffic of one interface since boot."""

    interface: str
    received: int = 0
    transmitted: int = 0


class ComponentInfo(BaseModel):
    """One temperature sensor reading, in degrees Celsius."""

    label: str
    temperature: float | None = None
    max: float | None = None
    critical: float | None = None


class ProcessInfo(BaseModel):
    pid: str
    name: str = ""
    cpu_usage: float = 0.0
    memory: int = 0  # resident set size, bytes


class Summary(BaseModel):
    """Default report when no view is requested."""

    system: SystemInfo
    memory: MemoryInfo
    cpu_total_usage: float = 0.0
    nb_cpus: int = 0
