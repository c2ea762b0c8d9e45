# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Clock adapters.

SteppedFrameClock stands in for a display's frame scheduler: callbacks
registered before a frame fire once, at evenly spaced timestamps, when
the frame is advanced. Wall clocks supply the schedule's "now".
"""
import itertools
import logging
from datetime import datetime, timedelta, timezone

from orbitview.ports.clock import FrameCallback, FrameClock, WallClock

logger = logging.getLogger(__name__)


class SteppedFrameClock(FrameClock):
    """Deterministic frame clock advancing at a fixed rate."""

    def __init__(self, fps: float = 60.0, start_ms: float = 0.0) -> None:
        if not fps > 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.interval_ms = 1000.0 / fps
        self.timestamp_ms = start_ms
        self.frame_count = 0
        self._tokens = itertools.count(1)
        self._pending: dict[int, FrameCallback] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        token = next(self._tokens)
        self._pending[token] = callback
        return token

    def cancel_frame(self, token: int) -> None:
        self._pending.pop(token, None)

    def advance(self) -> int:
        """
        Fire the callbacks registered for the current frame.

        Callbacks registered while firing wait for the next frame.

        Returns:
            Number of callbacks fired.
        """
        due = self._pending
        self._pending = {}
        timestamp = self.timestamp_ms
        for callback in due.values():
            callback(timestamp)
        self.frame_count += 1
        self.timestamp_ms += self.interval_ms
        return len(due)

    def run(self, frames: int) -> int:
        """Advance up to frames times; stops early when nothing is pending."""
        fired = 0
        for _ in range(frames):
            if not self._pending:
                logger.debug("No pending frame callbacks after %d frames", fired)
                break
            self.advance()
            fired += 1
        return fired


class SystemWallClock(WallClock):
    """Current local time, timezone-aware."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc).astimezone()


class FixedWallClock(WallClock):
    """Wall clock that only moves when told to."""

    def __init__(self, current: datetime) -> None:
        self.current = current

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> datetime:
        self.current = self.current + delta
        return self.current
