from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Protocol

from loguru import logger

from dayplan.core.config import AppSettings
from dayplan.core.cycle import CycleConfig, PhaseState, compute_phase
from dayplan.core.dispatcher import (
    Cue,
    PlaySound,
    ShowNotification,
    SideEffect,
    ThresholdMode,
    TransitionDispatcher,
)
from dayplan.core.localization import Localizer
from dayplan.core.schedule import ScheduleEntry, ScheduleSpan, build_schedule, locate_period, render_spans


class SoundSink(Protocol):
    def play(self, cue: Cue) -> bool: ...


class NotificationSink(Protocol):
    def notify(self, title: str, message: str) -> None: ...


class DisplaySink(Protocol):
    def update_status(self, status: str, remaining: str) -> None: ...

    def update_schedule(self, spans: list[ScheduleSpan]) -> None: ...


@dataclass(frozen=True)
class TickResult:
    state: PhaseState
    effects: list[SideEffect]
    highlighted: int | None


def format_remaining(seconds: int) -> str:
    seconds = max(0, seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


class TickDriver:
    """Glue between the wall clock, the phase engine and the output sinks.

    `tick()` is meant to be called about once per second from a single thread.
    Sink failures are logged and never interrupt the tick.
    """

    def __init__(
        self,
        settings: AppSettings,
        sound_sink: SoundSink,
        notification_sink: NotificationSink,
        display_sink: DisplaySink | None = None,
        clock: Callable[[], datetime] = datetime.now,
        threshold_mode: ThresholdMode = ThresholdMode.EXACT,
    ) -> None:
        self.sound_sink = sound_sink
        self.notification_sink = notification_sink
        self.display_sink = display_sink
        self.clock = clock
        self.localizer = Localizer()
        self.dispatcher = TransitionDispatcher(threshold_mode=threshold_mode)
        self._apply(settings)

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def config(self) -> CycleConfig:
        return self._config

    @property
    def schedule(self) -> list[ScheduleEntry]:
        return self._schedule

    def reload(self, settings: AppSettings) -> None:
        self._apply(settings)
        logger.info("Schedule rebuilt: {} entries", len(self._schedule))

    def tick(self, now: datetime | None = None) -> TickResult:
        if now is None:
            now = self.clock()
        state = compute_phase(now, self._config)
        effects = self.dispatcher.on_tick(state)
        for effect in effects:
            self._emit(effect)

        highlighted = locate_period(self._schedule, now)
        if self.display_sink is not None:
            status = self.localizer.phase_status(state.phase)
            spans = render_spans(self._schedule, now, self.localizer.schedule_labels())
            self._guard("display", self.display_sink.update_status, status, format_remaining(state.seconds_remaining))
            self._guard("display", self.display_sink.update_schedule, spans)
        return TickResult(state=state, effects=effects, highlighted=highlighted)

    def play_cue(self, cue: Cue) -> None:
        self._guard("sound", self.sound_sink.play, cue)

    def status_text(self, state: PhaseState) -> str:
        return (
            f"{self.localizer.get('StatusPrefix')} {self.localizer.phase_status(state.phase)} "
            f"({self.localizer.get('RemainingPrefix')} {format_remaining(state.seconds_remaining)})"
        )

    def _apply(self, settings: AppSettings) -> None:
        self._settings = settings
        self._config = settings.cycle_config()
        self._schedule = build_schedule(self._config)
        self.localizer.language = settings.language
        self.dispatcher.texts = settings.notification_texts()

    def _emit(self, effect: SideEffect) -> None:
        if isinstance(effect, PlaySound):
            self._guard("sound", self.sound_sink.play, effect.cue)
        elif isinstance(effect, ShowNotification):
            self._guard("notification", self.notification_sink.notify, effect.title, effect.message)

    def _guard(self, sink: str, fn: Callable[..., object], *args: object) -> None:
        try:
            fn(*args)
        except Exception:
            logger.exception("{} sink failed", sink)
