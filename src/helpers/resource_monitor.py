from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Callable, Tuple, TypeVar

import psutil

from log_helpers import log

LoadAverage = Tuple[float, float, float]
R = TypeVar("R")


@dataclass(frozen=True)
class ResourceSample:
    """Process metrics captured at a point in time."""

    taken_at: float
    rss_mb: float
    cpu_user: float
    cpu_system: float
    thread_count: int
    load_avg: LoadAverage | None

    @property
    def cpu_total(self) -> float:
        return self.cpu_user + self.cpu_system


@dataclass(frozen=True)
class ResourceDelta:
    """How the process metrics changed between two samples."""

    duration_sec: float
    cpu_percent: float | None
    rss_after_mb: float
    rss_delta_mb: float
    thread_count: int
    load_avg: LoadAverage | None


class ResourceMonitor:
    """psutil-backed process telemetry used to profile CLI stages."""

    _MB = 1024 * 1024

    def __init__(self) -> None:
        self._cpu_count = psutil.cpu_count(logical=True) or 1
        self._process = psutil.Process(os.getpid())

    def snapshot(self) -> ResourceSample:
        with self._process.oneshot():
            mem_info = self._process.memory_info()
            cpu_times = self._process.cpu_times()
            thread_count = self._process.num_threads()
        return ResourceSample(
            taken_at=time.perf_counter(),
            rss_mb=mem_info.rss / self._MB,
            cpu_user=float(cpu_times.user),
            cpu_system=float(cpu_times.system),
            thread_count=int(thread_count),
            load_avg=self._load_average(),
        )

    def delta(self, before: ResourceSample, after: ResourceSample) -> ResourceDelta:
        duration = max(0.0, after.taken_at - before.taken_at)
        cpu_percent: float | None = None
        if duration > 0:
            used = after.cpu_total - before.cpu_total
            cpu_percent = max(0.0, (used / duration) * 100.0 / float(self._cpu_count))
        return ResourceDelta(
            duration_sec=duration,
            cpu_percent=cpu_percent,
            rss_after_mb=after.rss_mb,
            rss_delta_mb=after.rss_mb - before.rss_mb,
            thread_count=after.thread_count,
            load_avg=after.load_avg,
        )

    def describe(self, delta: ResourceDelta) -> str:
        """Return a short, human-friendly summary string."""
        parts: list[str] = []
        if delta.cpu_percent is not None:
            parts.append(f"cpu={delta.cpu_percent:.1f}%/{self._cpu_count}c")
        parts.append(f"rss={delta.rss_after_mb:.1f}MB({delta.rss_delta_mb:+.1f})")
        parts.append(f"threads={delta.thread_count}")
        if delta.load_avg is not None:
            parts.append("load=" + ",".join(f"{value:.2f}" for value in delta.load_avg))
        return " ".join(parts)

    @staticmethod
    def _load_average() -> LoadAverage | None:
        try:
            load = os.getloadavg()
        except (AttributeError, OSError):
            return None
        return float(load[0]), float(load[1]), float(load[2])


class StageProfiler:
    """Optional profiler that logs stage latency together with resource telemetry."""

    def __init__(self, enabled: bool, monitor: ResourceMonitor | None = None) -> None:
        self.enabled = enabled
        self.monitor = (monitor or ResourceMonitor()) if enabled else None

    def measure(self, label: str, fn: Callable[[], R], *, tokens: Callable[[R], int] | None = None) -> R:
        if not self.monitor:
            return fn()
        before = self.monitor.snapshot()
        result = fn()
        after = self.monitor.snapshot()
        delta = self.monitor.delta(before, after)
        count = f" {tokens(result)} tokens" if tokens else ""
        log(f"[profile] {label}:{count} in {delta.duration_sec:.2f}s {self.monitor.describe(delta)}")
        return result
