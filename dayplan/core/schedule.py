from __future__ import annotations

"""Дневное расписание интервалов работы/перерыва и поиск текущего интервала."""

import math
import re
from dataclasses import dataclass
from datetime import datetime, time

from loguru import logger

from dayplan.core.cycle import SECONDS_PER_DAY, CycleConfig, Phase, seconds_into_day


LINE_PATTERN = re.compile(r"^(\d{2}):(\d{2}) - (\d{2}):(\d{2}) (.+)$")


@dataclass(frozen=True)
class ScheduleEntry:
    start_seconds: int
    end_seconds: int
    phase: Phase

    @property
    def wraps_midnight(self) -> bool:
        return self.end_seconds <= self.start_seconds


@dataclass(frozen=True)
class ScheduleSpan:
    text: str
    highlighted: bool


def build_schedule(config: CycleConfig) -> list[ScheduleEntry]:
    """Builds Work/Break intervals covering one day from 00:00.

    The entry that would run past midnight is cut at 24:00 and nothing is
    emitted after it. An end that lands on midnight is stored as offset 0.
    """
    entries: list[ScheduleEntry] = []
    offset = 0
    max_cycles = math.ceil(SECONDS_PER_DAY / config.cycle_seconds) + 1
    phases = ((Phase.WORK, config.work_seconds), (Phase.BREAK, config.break_seconds))
    for _ in range(max_cycles):
        for phase, length in phases:
            end = min(offset + length, SECONDS_PER_DAY)
            entries.append(ScheduleEntry(offset, end % SECONDS_PER_DAY, phase))
            offset = end
            if offset >= SECONDS_PER_DAY:
                return entries
    return entries


def entry_contains(entry: ScheduleEntry, now: time | datetime | int) -> bool:
    t = now if isinstance(now, int) else seconds_into_day(now)
    if entry.end_seconds > entry.start_seconds:
        return entry.start_seconds <= t < entry.end_seconds
    return t >= entry.start_seconds or t < entry.end_seconds


def locate_period(schedule: list[ScheduleEntry], now: time | datetime | int) -> int | None:
    """Index of the first entry containing `now`, or None when nothing matches."""
    for index, entry in enumerate(schedule):
        if entry_contains(entry, now):
            return index
    return None


def highlight_flags(schedule: list[ScheduleEntry], now: time | datetime | int) -> list[bool]:
    return [entry_contains(entry, now) for entry in schedule]


def format_offset(seconds: int) -> str:
    seconds %= SECONDS_PER_DAY
    return f"{seconds // 3600:02d}:{seconds % 3600 // 60:02d}"


def format_entry(entry: ScheduleEntry, label: str) -> str:
    return f"{format_offset(entry.start_seconds)} - {format_offset(entry.end_seconds)} {label}"


def format_schedule(schedule: list[ScheduleEntry], labels: dict[Phase, str]) -> str:
    return "\n".join(format_entry(entry, labels[entry.phase]) for entry in schedule)


def render_spans(
    schedule: list[ScheduleEntry],
    now: time | datetime | int,
    labels: dict[Phase, str],
) -> list[ScheduleSpan]:
    flags = highlight_flags(schedule, now)
    return [
        ScheduleSpan(text=format_entry(entry, labels[entry.phase]), highlighted=flag)
        for entry, flag in zip(schedule, flags)
    ]


def parse_schedule(text: str, labels: dict[Phase, str]) -> list[ScheduleEntry]:
    """Parses `HH:mm - HH:mm label` lines; malformed lines are skipped."""
    phase_by_label = {label: phase for phase, label in labels.items()}
    entries: list[ScheduleEntry] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = LINE_PATTERN.match(line)
        if not match:
            logger.debug("Skipping schedule line {!r}", line)
            continue
        start_h, start_m, end_h, end_m = (int(part) for part in match.group(1, 2, 3, 4))
        phase = phase_by_label.get(match.group(5).strip())
        if phase is None or start_h > 23 or end_h > 23 or start_m > 59 or end_m > 59:
            logger.debug("Skipping schedule line {!r}", line)
            continue
        entries.append(ScheduleEntry(start_h * 3600 + start_m * 60, end_h * 3600 + end_m * 60, phase))
    return entries
