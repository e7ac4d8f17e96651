from datetime import time

import pytest

from dayplan.core.cycle import SECONDS_PER_DAY, CycleConfig, Phase, compute_phase
from dayplan.core.schedule import (
    ScheduleEntry,
    ScheduleSpan,
    build_schedule,
    entry_contains,
    format_schedule,
    highlight_flags,
    locate_period,
    parse_schedule,
    render_spans,
)


LABELS = {Phase.WORK: "work", Phase.BREAK: "break"}


def test_default_schedule_first_and_last_lines() -> None:
    schedule = build_schedule(CycleConfig.from_minutes(90, 30))
    lines = format_schedule(schedule, LABELS).splitlines()

    assert len(schedule) == 24
    assert lines[0] == "00:00 - 01:30 work"
    assert lines[1] == "01:30 - 02:00 break"
    assert lines[-1] == "23:30 - 00:00 break"


@pytest.mark.parametrize("work_minutes, break_minutes", [(90, 30), (50, 20), (7, 4), (1, 1), (2000, 1)])
def test_entries_are_contiguous_and_alternate(work_minutes: int, break_minutes: int) -> None:
    schedule = build_schedule(CycleConfig.from_minutes(work_minutes, break_minutes))

    assert schedule[0].start_seconds == 0
    assert schedule[0].phase == Phase.WORK
    for current, following in zip(schedule, schedule[1:]):
        assert current.end_seconds == following.start_seconds
        assert current.phase != following.phase
    assert schedule[-1].end_seconds == 0
    assert all(0 <= e.start_seconds < SECONDS_PER_DAY and 0 <= e.end_seconds < SECONDS_PER_DAY for e in schedule)


def test_entry_running_past_midnight_is_truncated() -> None:
    # 70 minute cycle: the 21st work block starts at 23:20 and would end at 00:10.
    schedule = build_schedule(CycleConfig.from_minutes(50, 20))

    assert schedule[-1] == ScheduleEntry(23 * 3600 + 20 * 60, 0, Phase.WORK)
    assert len(schedule) == 41


@pytest.mark.parametrize("work_minutes, break_minutes", [(90, 30), (50, 20), (25, 5)])
def test_located_entry_agrees_with_phase_clock(work_minutes: int, break_minutes: int) -> None:
    config = CycleConfig.from_minutes(work_minutes, break_minutes)
    schedule = build_schedule(config)

    for second in range(SECONDS_PER_DAY):
        index = locate_period(schedule, second)
        assert index is not None
        now = time(second // 3600, second % 3600 // 60, second % 60)
        assert schedule[index].phase == compute_phase(now, config).phase


def test_exactly_one_entry_highlighted() -> None:
    schedule = build_schedule(CycleConfig.from_minutes(90, 30))

    for now in (time(0, 0), time(1, 29, 59), time(1, 30), time(23, 59, 59)):
        assert highlight_flags(schedule, now).count(True) == 1
    assert locate_period(schedule, time(23, 45)) == 23


def test_wrapping_entry_containment() -> None:
    entry = ScheduleEntry(start_seconds=23 * 3600, end_seconds=3600, phase=Phase.BREAK)

    assert entry.wraps_midnight
    assert entry_contains(entry, time(23, 30))
    assert entry_contains(entry, time(0, 30))
    assert not entry_contains(entry, time(1, 0))
    assert not entry_contains(entry, time(22, 59, 59))


def test_malformed_schedule_is_tolerated() -> None:
    overlapping = [
        ScheduleEntry(0, 7200, Phase.WORK),
        ScheduleEntry(3600, 9000, Phase.BREAK),
    ]

    assert locate_period([], time(12, 0)) is None
    assert locate_period(overlapping, time(12, 0)) is None
    assert locate_period(overlapping, time(1, 30)) == 0
    assert highlight_flags(overlapping, time(1, 30)) == [True, True]


def test_render_spans_marks_current_line() -> None:
    schedule = build_schedule(CycleConfig.from_minutes(90, 30))
    spans = render_spans(schedule, time(1, 45), {Phase.WORK: "praca", Phase.BREAK: "przerwa"})

    assert spans[0] == ScheduleSpan("00:00 - 01:30 praca", False)
    assert spans[1] == ScheduleSpan("01:30 - 02:00 przerwa", True)
    assert sum(span.highlighted for span in spans) == 1


def test_parse_schedule_reads_rendered_text_and_skips_garbage() -> None:
    schedule = build_schedule(CycleConfig.from_minutes(90, 30))
    text = format_schedule(schedule, LABELS)
    noisy = "header line\n" + text + "\n25:00 - 26:00 work\n10:00 - 11:00 lunch\n"

    assert parse_schedule(noisy, LABELS) == schedule
