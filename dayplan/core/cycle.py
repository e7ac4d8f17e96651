from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from enum import Enum


SECONDS_PER_DAY = 24 * 3600


class Phase(str, Enum):
    WORK = "work"
    BREAK = "break"


@dataclass(frozen=True)
class CycleConfig:
    work_seconds: int
    break_seconds: int
    cycle_seconds: int = field(init=False)

    def __post_init__(self) -> None:
        if self.work_seconds < 1 or self.break_seconds < 1:
            raise ValueError("Durations must be positive")
        object.__setattr__(self, "cycle_seconds", self.work_seconds + self.break_seconds)

    @classmethod
    def from_minutes(cls, work_minutes: int, break_minutes: int) -> CycleConfig:
        return cls(
            work_seconds=max(1, int(work_minutes)) * 60,
            break_seconds=max(1, int(break_minutes)) * 60,
        )


@dataclass(frozen=True)
class PhaseState:
    phase: Phase
    seconds_remaining: int


def seconds_into_day(now: time | datetime) -> int:
    return now.hour * 3600 + now.minute * 60 + now.second


def compute_phase(now: time | datetime, config: CycleConfig) -> PhaseState:
    """Phase and time to the next boundary for a wall-clock instant.

    Cycles are anchored at local midnight. A phase owns the half-open interval
    starting at its boundary, so the exact boundary second already belongs to
    the new phase.
    """
    into_cycle = seconds_into_day(now) % config.cycle_seconds
    if into_cycle < config.work_seconds:
        return PhaseState(Phase.WORK, config.work_seconds - into_cycle)
    return PhaseState(Phase.BREAK, config.cycle_seconds - into_cycle)
