# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for time sources.

The frame clock invokes a callback at the host's animation cadence with
a timestamp in milliseconds; the wall clock gives the current date/time
for the overflight schedule.
"""
from datetime import datetime
from typing import Callable, Protocol, runtime_checkable

FrameCallback = Callable[[float], None]


@runtime_checkable
class FrameClock(Protocol):
    """Port for the host's animation-frame scheduler."""

    def request_frame(self, callback: FrameCallback) -> int:
        """Schedule callback(timestamp_ms) for the next frame. Returns a token."""
        ...

    def cancel_frame(self, token: int) -> None:
        """Discard a pending registration. Unknown tokens are ignored."""
        ...


@runtime_checkable
class WallClock(Protocol):
    """Port for the current date/time."""

    def now(self) -> datetime:
        """Current time."""
        ...
