"""Per-todo work timer with an explicit Idle/Running state."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Union

MONTH = 2_592_000  # 30 days, not calendar-aware
DAY = 86_400
HOUR = 3_600
MINUTE = 60

Clock = Callable[[], int]


def system_clock() -> int:
    """Current Unix-epoch time in whole seconds."""
    return int(time.time())


@dataclass(frozen=True)
class Idle:
    """No open session. Remembers the last session bounds for persistence."""

    last_start: int | None = None
    last_end: int | None = None


@dataclass(frozen=True)
class Running:
    """A session is open since *since*."""

    since: int


TimerState = Union[Idle, Running]


def format_duration(total_seconds: int) -> str:
    """Format seconds as the two most significant non-zero units.

    0 → "", 45 → "45s", 125 → "2m 5s", 3665 → "1h 1m", 90000 → "1d 1h".
    """
    if total_seconds <= 0:
        return ""

    months = total_seconds // MONTH
    days = (total_seconds % MONTH) // DAY
    hours = (total_seconds % DAY) // HOUR
    minutes = (total_seconds % HOUR) // MINUTE
    seconds = total_seconds % MINUTE

    if months > 0:
        if days > 0:
            return f"{months}mo {days}d"
        if hours > 0:
            return f"{months}mo {hours}h"
        return f"{months}mo"
    if days > 0:
        if hours > 0:
            return f"{days}d {hours}h"
        if minutes > 0:
            return f"{days}d {minutes}m"
        return f"{days}d"
    if hours > 0:
        if minutes > 0:
            return f"{hours}h {minutes}m"
        if seconds > 0:
            return f"{hours}h {seconds}s"
        return f"{hours}h"
    if minutes > 0:
        if seconds > 0:
            return f"{minutes}m {seconds}s"
        return f"{minutes}m"
    return f"{seconds}s"


@dataclass
class TimeTracker:
    """Accumulates elapsed seconds over discrete work sessions.

    Time only advances on an explicit stop; nothing ticks in the background.
    """

    state: TimerState = field(default_factory=Idle)
    total_duration: int = 0
    clock: Clock = field(default=system_clock, repr=False, compare=False)

    def is_working(self) -> bool:
        return isinstance(self.state, Running)

    def start_work(self) -> None:
        # Restarting an open session drops its elapsed time (defined overwrite).
        self.state = Running(since=self.clock())

    def end_work(self) -> None:
        if not isinstance(self.state, Running):
            return
        now = self.clock()
        self.total_duration += max(0, now - self.state.since)
        self.state = Idle(last_start=self.state.since, last_end=now)

    def toggle_work(self) -> None:
        if self.is_working():
            self.end_work()
        else:
            self.start_work()

    def format_duration(self) -> str:
        return format_duration(self.total_duration)

    # ── Persisted view ──

    @property
    def start_time(self) -> int | None:
        if isinstance(self.state, Running):
            return self.state.since
        return self.state.last_start

    @property
    def end_time(self) -> int | None:
        if isinstance(self.state, Running):
            return None
        return self.state.last_end

    @classmethod
    def from_fields(
        cls,
        start_time: int | None,
        end_time: int | None,
        total_duration: int = 0,
        clock: Clock = system_clock,
    ) -> TimeTracker:
        """Rebuild a tracker from the persisted start/end/total triple."""
        state: TimerState
        if start_time is not None and end_time is None:
            state = Running(since=start_time)
        else:
            state = Idle(last_start=start_time, last_end=end_time)
        return cls(state=state, total_duration=max(0, total_duration), clock=clock)
