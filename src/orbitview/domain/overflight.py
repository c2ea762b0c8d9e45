# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Overflight scheduling and free-interval derivation.

A satellite overflies the reference point each time its anomaly crosses
a multiple of 2pi. From each satellite's angular rate and phase the next
crossings are predicted, merged across satellites, de-duplicated, and
turned into the free intervals between consecutive overflights.

The result is a pure function of (satellites, now).

No external dependencies — only stdlib math/dataclasses/datetime.
"""
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable

from orbitview.domain.config import DEFAULT_SCHEDULE, ScheduleConfig
from orbitview.domain.satellite import Satellite

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class FreeInterval:
    """Time window between two consecutive overflights."""
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_text(self) -> str:
        return format_duration(self.duration)


def format_duration(duration: timedelta) -> str:
    """
    Format a duration as HH:MM:SS.

    Floors to whole seconds; fields are zero-padded to two digits and
    hours are unbounded (e.g. "123:04:05").
    """
    if duration < timedelta(0):
        raise ValueError(f"Duration must be non-negative, got {duration}")
    total = math.floor(duration.total_seconds())
    hours, remainder = divmod(total, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def next_crossings(
    sat: Satellite,
    now: datetime,
    count: int = 4,
    min_angular_rate: float = 1e-6,
) -> list[datetime]:
    """
    Predict a satellite's next reference-meridian crossings.

        period = 2pi / |omega|
        phase  = anomaly mod 2pi
        delta  = (2pi - phase) mod 2pi   if omega > 0
                 phase mod 2pi           otherwise
        first  = now + delta / |omega|

    Args:
        sat: Satellite (circular or two-body).
        now: Reference time.
        count: Number of consecutive crossings to return.
        min_angular_rate: Rates below this are treated as stationary.

    Returns:
        Crossing times in ascending order; empty for satellites without
        angular motion.
    """
    if sat.angular_momentum == 0.0:
        return []
    omega = sat.angular_speed
    abs_omega = abs(omega)
    if abs_omega < min_angular_rate:
        return []

    period_s = TWO_PI / abs_omega
    phase = sat.anomaly % TWO_PI
    if omega > 0:
        delta = (TWO_PI - phase) % TWO_PI
    else:
        delta = phase % TWO_PI

    first = now + timedelta(seconds=delta / abs_omega)
    return [first + timedelta(seconds=k * period_s) for k in range(count)]


def compute_overflights(
    satellites: Iterable[Satellite],
    now: datetime,
    config: ScheduleConfig = DEFAULT_SCHEDULE,
) -> list[datetime]:
    """
    Merge the satellites' crossings into the next overflight times.

    Crossings are sorted; a crossing within dedup_tolerance of the last
    kept one collapses into it. Only crossings strictly after now are
    kept. If fewer than interval_count + 1 remain, synthetic crossings
    are appended at `padding` after the last one (or after now).

    Returns:
        Exactly interval_count + 1 ascending overflight times.
    """
    crossings: list[datetime] = []
    for sat in satellites:
        crossings.extend(next_crossings(
            sat, now,
            count=config.crossings_per_satellite,
            min_angular_rate=config.min_angular_rate,
        ))
    crossings.sort()

    unique: list[datetime] = []
    for crossing in crossings:
        if not unique or crossing - unique[-1] > config.dedup_tolerance:
            unique.append(crossing)

    needed = config.interval_count + 1
    upcoming = [t for t in unique if t > now][:needed]

    if len(upcoming) < needed:
        logger.debug(
            "Only %d upcoming overflights, padding with %s placeholders",
            len(upcoming), config.padding,
        )
    while len(upcoming) < needed:
        last = upcoming[-1] if upcoming else now
        upcoming.append(last + config.padding)

    return upcoming


def compute_free_intervals(
    satellites: Iterable[Satellite],
    now: datetime,
    config: ScheduleConfig = DEFAULT_SCHEDULE,
) -> list[FreeInterval]:
    """
    Derive the next free intervals between overflights.

    Args:
        satellites: Current satellite set.
        now: Reference time.
        config: Scheduling parameters.

    Returns:
        Exactly config.interval_count consecutive FreeInterval objects.
    """
    overflights = compute_overflights(satellites, now, config)
    return [
        FreeInterval(start=overflights[i], end=overflights[i + 1])
        for i in range(config.interval_count)
    ]
