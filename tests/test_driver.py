"""Tests for sysinfo_cli.driver — the collect/format/emit loop."""

from __future__ import annotations

import argparse
import io
import json
import os
from unittest.mock import AsyncMock, mock_open, patch

import pytest

from sysinfo_cli.collectors import ProcessCollector, SummaryCollector
from sysinfo_cli.collectors.base import BaseCollector
from sysinfo_cli.config import Settings
from sysinfo_cli.driver import (
    CLEAR_SCREEN,
    FILE_WIDTH,
    Monitor,
    build_collector,
    build_monitor,
)
from sysinfo_cli.formatting.text import TextFormatter
from sysinfo_cli.models.snapshot import MemoryInfo
from sysinfo_cli.models.view import SortBy, View


class StubCollector(BaseCollector):
    """Returns a memory snapshot whose total grows every cycle."""

    name = "stub"
    view = View.MEMORY

    def __init__(self) -> None:
        super().__init__(sample_interval=0)
        self.collect_count = 0

    async def collect(self) -> MemoryInfo:
        self.collect_count += 1
        return MemoryInfo(total_memory=self.collect_count * 1024)


class TtyBuffer(io.StringIO):
    def isatty(self) -> bool:
        return True


class _StopWatch(Exception):
    pass


def _namespace(**overrides) -> argparse.Namespace:
    values = dict(
        command=None, json=False, watch=None, output=None, no_color=False,
        name_filter=None, limit=None, sort=SortBy.CPU,
    )
    values.update(overrides)
    return argparse.Namespace(**values)


@pytest.fixture
def plain() -> TextFormatter:
    return TextFormatter(color=False, width=120)


# ── single shot ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_single_shot_json_to_stdout(capsys):
    monitor = Monitor(StubCollector(), json_output=True)
    await monitor.run()
    out = capsys.readouterr().out
    assert json.loads(out) == MemoryInfo(total_memory=1024).model_dump()
    assert out.endswith("\n")


@pytest.mark.asyncio
async def test_single_shot_text(plain):
    stdout = io.StringIO()
    collector = StubCollector()
    await Monitor(collector, plain, stdout=stdout).run()
    assert "1.00 KiB" in stdout.getvalue()
    assert collector.collect_count == 1


# ── file output ─────────────────────────────────────────


@pytest.mark.asyncio
async def test_output_file_is_overwritten_each_cycle(tmp_path, plain):
    target = tmp_path / "report.json"
    monitor = Monitor(StubCollector(), plain, json_output=True, output=str(target))
    await monitor.run()
    await monitor.run()
    assert json.loads(target.read_text())["total_memory"] == 2048


@pytest.mark.asyncio
async def test_output_file_gets_nothing_on_stdout(tmp_path, plain, capsys):
    await Monitor(StubCollector(), plain, output=str(tmp_path / "out.txt")).run()
    assert capsys.readouterr().out == ""


def test_create_error_reported_on_stderr(tmp_path):
    stderr = io.StringIO()
    path = tmp_path / "missing-dir" / "out.txt"
    Monitor(StubCollector(), output=str(path), stderr=stderr).emit("report")
    assert stderr.getvalue() == f"Error creating file: {path}\n"


def test_write_error_reported_on_stderr():
    stderr = io.StringIO()
    opener = mock_open()
    opener.return_value.write.side_effect = OSError("No space left on device")
    with patch("sysinfo_cli.driver.open", opener, create=True):
        Monitor(StubCollector(), output="out.txt", stderr=stderr).emit("report")
    assert stderr.getvalue() == "Error writing to file: No space left on device\n"


@pytest.mark.skipif(not os.path.exists("/dev/full"), reason="needs /dev/full")
def test_flush_error_on_close_reported_on_stderr():
    stderr = io.StringIO()
    Monitor(StubCollector(), output="/dev/full", stderr=stderr).emit("report")
    assert stderr.getvalue().startswith("Error writing to file: ")
    assert "No space left on device" in stderr.getvalue()


# ── watch mode ──────────────────────────────────────────


@pytest.mark.asyncio
async def test_watch_repeats_until_interrupted(plain):
    collector = StubCollector()
    stdout = io.StringIO()
    monitor = Monitor(collector, plain, watch=3, stdout=stdout)
    sleep = AsyncMock(side_effect=[None, None, _StopWatch()])
    with patch("sysinfo_cli.driver.asyncio.sleep", new=sleep):
        with pytest.raises(_StopWatch):
            await monitor.run()
    assert collector.collect_count == 3
    assert sleep.await_count == 3
    sleep.assert_awaited_with(3)


@pytest.mark.asyncio
async def test_file_errors_do_not_stop_watch(tmp_path):
    collector = StubCollector()
    stderr = io.StringIO()
    monitor = Monitor(
        collector, json_output=True, watch=1,
        output=str(tmp_path / "nope" / "out.json"), stderr=stderr,
    )
    with patch("sysinfo_cli.driver.asyncio.sleep", new=AsyncMock(side_effect=[None, _StopWatch()])):
        with pytest.raises(_StopWatch):
            await monitor.run()
    assert collector.collect_count == 2
    assert stderr.getvalue().count("Error creating file:") == 2


@pytest.mark.asyncio
async def test_watch_clears_terminal(plain):
    stdout = TtyBuffer()
    monitor = Monitor(StubCollector(), plain, watch=1, stdout=stdout)
    with patch("sysinfo_cli.driver.asyncio.sleep", new=AsyncMock(side_effect=[None, _StopWatch()])):
        with pytest.raises(_StopWatch):
            await monitor.run()
    assert stdout.getvalue().count(CLEAR_SCREEN) == 1


@pytest.mark.asyncio
async def test_watch_never_clears_json(plain):
    stdout = TtyBuffer()
    monitor = Monitor(StubCollector(), plain, json_output=True, watch=1, stdout=stdout)
    with patch("sysinfo_cli.driver.asyncio.sleep", new=AsyncMock(side_effect=[None, _StopWatch()])):
        with pytest.raises(_StopWatch):
            await monitor.run()
    assert CLEAR_SCREEN not in stdout.getvalue()


@pytest.mark.asyncio
async def test_watch_never_clears_pipe(plain):
    stdout = io.StringIO()
    monitor = Monitor(StubCollector(), plain, watch=1, stdout=stdout)
    with patch("sysinfo_cli.driver.asyncio.sleep", new=AsyncMock(side_effect=[None, _StopWatch()])):
        with pytest.raises(_StopWatch):
            await monitor.run()
    assert CLEAR_SCREEN not in stdout.getvalue()


# ── wiring ──────────────────────────────────────────────


@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    monkeypatch.chdir(tmp_path)
    return Settings(cpu_sample_interval=0.5)


def test_no_command_builds_summary(settings):
    collector = build_collector(_namespace(), settings)
    assert isinstance(collector, SummaryCollector)
    assert collector.sample_interval == 0.5


def test_processes_options_reach_collector(settings):
    args = _namespace(command="processes", name_filter="py", limit=5, sort=SortBy.NAME)
    collector = build_collector(args, settings)
    assert isinstance(collector, ProcessCollector)
    assert (collector.name_filter, collector.limit, collector.sort) == ("py", 5, SortBy.NAME)


@pytest.mark.parametrize("view", [v for v in View if v is not View.SUMMARY])
def test_every_view_has_a_collector(settings, view):
    assert build_collector(_namespace(command=view.value), settings).view is view


def test_file_output_disables_color(settings):
    monitor = build_monitor(_namespace(command="memory", output="x.txt"), settings)
    assert monitor.formatter.color is False
    assert monitor.formatter.width == FILE_WIDTH


def test_no_color_flag(settings):
    assert build_monitor(_namespace(no_color=True), settings).formatter.color is False


def test_color_by_default(settings):
    monitor = build_monitor(_namespace(json=True, watch=2), settings)
    assert monitor.formatter.color is True
    assert monitor.json_output is True
    assert monitor.watch == 2
