from __future__ import annotations

import io
import json
from collections.abc import Callable, Sequence

from rich.console import Console, RenderableType
from rich.table import Table
from rich.text import Text

from sysinfo_cli.collectors.base import Snapshot
from sysinfo_cli.formatting.units import format_bytes, format_temperature, truncate
from sysinfo_cli.models.snapshot import (
    ComponentInfo,
    CpuInfo,
    DiskInfo,
    MemoryInfo,
    NetworkInfo,
    ProcessInfo,
    Summary,
    SystemInfo,
)
from sysinfo_cli.models.view import View


HEADING_STYLE = "bold bright_green"
SECTION_STYLE = "bold bright_cyan"
LABEL_STYLE = "yellow"


def _quoted(value: str | None) -> str:
    """Double-quoted, escaped text. Absent values print as empty quotes."""
    return json.dumps(value or "", ensure_ascii=False)


class TextFormatter:
    """Renders snapshots as aligned, colorized text using rich.

    Every view renders to a plain string; ANSI escapes are only present
    when ``color`` is on.
    """

    def __init__(
        self,
        color: bool = True,
        label_width: int = 25,
        name_max_width: int = 30,
        width: int | None = None,
    ) -> None:
        self.color = color
        self.label_width = label_width
        self.name_max_width = name_max_width
        self.width = width
        self._renderers: dict[View, Callable[[Snapshot], list[RenderableType]]] = {
            View.SYSTEM: self._system,
            View.CPU: self._cpu,
            View.MEMORY: self._memory,
            View.DISKS: self._disks,
            View.NETWORK: self._network,
            View.COMPONENTS: self._components,
            View.PROCESSES: self._processes,
            View.SUMMARY: self._summary,
        }

    def render(self, view: View, snapshot: Snapshot) -> str:
        return self._capture(self._renderers[View(view)](snapshot))

    # ── helpers ─────────────────────────────────────────

    def _capture(self, renderables: list[RenderableType]) -> str:
        console = Console(
            file=io.StringIO(),
            force_terminal=self.color,
            color_system="standard" if self.color else None,
            no_color=None if self.color else True,
            width=self.width,
            highlight=False,
        )
        for renderable in renderables:
            console.print(renderable)
        return console.file.getvalue()

    def _line(self, label: str, value: object) -> Text:
        return Text.assemble(
            (f"{label:<{self.label_width}}", LABEL_STYLE),
            " ",
            "N/A" if value is None else str(value),
        )

    @staticmethod
    def _heading(title: str, style: str = HEADING_STYLE) -> Text:
        return Text(title, style=style)

    @staticmethod
    def _table(headers: Sequence[str], rows: list[list[Text | str]]) -> Table:
        table = Table(header_style="bold")
        for header in headers:
            table.add_column(header, overflow="fold")
        for row in rows:
            table.add_row(*(Text(cell) if isinstance(cell, str) else cell for cell in row))
        return table

    # ── views ───────────────────────────────────────────

    def _system_lines(self, info: SystemInfo) -> list[RenderableType]:
        return [
            self._line("System name:", _quoted(info.name)),
            self._line("Kernel version:", _quoted(info.kernel_version)),
            self._line("OS version:", _quoted(info.os_version)),
            self._line("Host name:", _quoted(info.host_name)),
        ]

    def _system(self, info: SystemInfo) -> list[RenderableType]:
        return self._system_lines(info)

    def _cpu(self, info: CpuInfo) -> list[RenderableType]:
        rows = [
            [str(cpu.id), f"{cpu.usage:.1f}", cpu.vendor, cpu.brand]
            for cpu in info.cpus
        ]
        return [
            self._heading("=> CPUs:"),
            self._line("Total CPUs:", info.nb_cpus),
            self._line("Global usage:", f"{info.total_usage:.1f}%"),
            self._table(["ID", "Usage %", "Vendor", "Brand"], rows),
        ]

    def _memory(self, info: MemoryInfo) -> list[RenderableType]:
        return [
            self._line("Total memory:", format_bytes(info.total_memory)),
            self._line("Used memory:", format_bytes(info.used_memory)),
            self._line("Total swap:", format_bytes(info.total_swap)),
            self._line("Used swap:", format_bytes(info.used_swap)),
        ]

    def _disks(self, disks: list[DiskInfo]) -> list[RenderableType]:
        rows = [
            [
                Text(disk.name, style="cyan"),
                Text(disk.kind, style="blue"),
                Text(disk.file_system, style="yellow"),
                disk.mount_point,
                format_bytes(disk.available_space),
                format_bytes(disk.total_space),
            ]
            for disk in disks
        ]
        return [
            self._heading("=> Disks:"),
            self._table(["Name", "Kind", "FS", "Mount", "Available", "Total"], rows),
        ]

    def _network(self, networks: list[NetworkInfo]) -> list[RenderableType]:
        rows = [
            [
                Text(net.interface, style="cyan"),
                Text(format_bytes(net.received), style="yellow"),
                Text(format_bytes(net.transmitted), style="yellow"),
            ]
            for net in networks
        ]
        return [
            self._heading("=> Networks:"),
            self._table(["Interface", "Received", "Transmitted"], rows),
        ]

    def _components(self, components: list[ComponentInfo]) -> list[RenderableType]:
        rows = [
            [
                Text(c.label, style="cyan"),
                format_temperature(c.temperature),
                format_temperature(c.max),
                format_temperature(c.critical),
            ]
            for c in components
        ]
        return [
            self._heading("=> Components:"),
            self._table(["Label", "Temp", "Max", "Critical"], rows),
        ]

    def _processes(self, processes: list[ProcessInfo]) -> list[RenderableType]:
        rows = [
            [
                Text(p.pid, style="cyan"),
                truncate(p.name, self.name_max_width),
                f"{p.cpu_usage:>5.1f}",
                format_bytes(p.memory),
            ]
            for p in processes
        ]
        return [
            self._heading("=> Processes:"),
            self._table(["PID", "Name", "CPU %", "Memory"], rows),
        ]

    def _summary(self, summary: Summary) -> list[RenderableType]:
        return [
            self._heading("--- System Summary ---", SECTION_STYLE),
            *self._system_lines(summary.system),
            Text(""),
            self._heading("--- Memory Summary ---", SECTION_STYLE),
            self._line("Total memory:", format_bytes(summary.memory.total_memory)),
            self._line("Used memory:", format_bytes(summary.memory.used_memory)),
            Text(""),
            self._heading("--- CPU Summary ---", SECTION_STYLE),
            self._line("NB CPUs:", summary.nb_cpus),
            self._line("Total CPU usage:", f"{summary.cpu_total_usage:.1f}%"),
        ]
