from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from loguru import logger

from dayplan.core.cycle import Phase, PhaseState


ENDING_SOON_SECONDS = 5 * 60


class Cue(str, Enum):
    END_OF_WORK = "EndOfWork"
    WORK_ENDING_SOON = "WorkEndingSoon"
    START_BREAK = "StartBreak"
    BREAK_ENDING_SOON = "BreakEndingSoon"
    START_WORK = "StartWork"


class ThresholdMode(str, Enum):
    EXACT = "exact"
    CROSSING = "crossing"


@dataclass(frozen=True)
class PlaySound:
    cue: Cue


@dataclass(frozen=True)
class ShowNotification:
    title: str
    message: str


SideEffect = Union[PlaySound, ShowNotification]


@dataclass(frozen=True)
class NotificationTexts:
    start_break_title: str = "Now break"
    start_break_message: str = "Enjoy your break"
    start_work_title: str = "Now work"
    start_work_message: str = "Back to work"


@dataclass
class DispatcherState:
    previous_phase: Phase | None = None
    previous_remaining: int | None = None


class TransitionDispatcher:
    """Turns consecutive phase states into sound and notification effects.

    Must be fed once per tick, in order. The first tick only records the phase.
    With `ThresholdMode.EXACT` the "ending soon" cues fire only on a tick whose
    remaining time is exactly five minutes, so a skipped tick (sleep, clock
    jump) can lose them. `ThresholdMode.CROSSING` fires when the remaining time
    drops to five minutes or below since the previous tick instead, or when a
    phase boundary was jumped over into a phase with five minutes or less left.
    """

    def __init__(
        self,
        texts: NotificationTexts | None = None,
        threshold_mode: ThresholdMode = ThresholdMode.EXACT,
    ) -> None:
        self.texts = texts or NotificationTexts()
        self.threshold_mode = threshold_mode
        self._state = DispatcherState()

    @property
    def state(self) -> DispatcherState:
        return self._state

    def reset(self) -> None:
        self._state = DispatcherState()

    def on_tick(self, state: PhaseState) -> list[SideEffect]:
        previous = self._state.previous_phase
        if previous is None:
            self._record(state)
            return []

        effects: list[SideEffect] = []
        if state.phase == Phase.WORK and self._ending_soon(state):
            effects.append(PlaySound(Cue.WORK_ENDING_SOON))
        if state.phase == Phase.BREAK and previous == Phase.WORK:
            effects.append(ShowNotification(self.texts.start_break_title, self.texts.start_break_message))
            effects.append(PlaySound(Cue.END_OF_WORK))
            effects.append(PlaySound(Cue.START_BREAK))
        if state.phase == Phase.BREAK and self._ending_soon(state):
            effects.append(PlaySound(Cue.BREAK_ENDING_SOON))
        if state.phase == Phase.WORK and previous == Phase.BREAK:
            effects.append(ShowNotification(self.texts.start_work_title, self.texts.start_work_message))
            effects.append(PlaySound(Cue.START_WORK))

        if previous != state.phase:
            logger.info("Phase changed {} -> {}", previous.value, state.phase.value)
        self._record(state)
        return effects

    def _ending_soon(self, state: PhaseState) -> bool:
        if self.threshold_mode == ThresholdMode.EXACT:
            return state.seconds_remaining == ENDING_SOON_SECONDS
        if state.seconds_remaining > ENDING_SOON_SECONDS:
            return False
        previous_remaining = self._state.previous_remaining
        if self._state.previous_phase != state.phase:
            # Boundary second was seen: the phase started on time.
            if previous_remaining == 1:
                return state.seconds_remaining == ENDING_SOON_SECONDS
            return True
        return previous_remaining is not None and previous_remaining > ENDING_SOON_SECONDS

    def _record(self, state: PhaseState) -> None:
        self._state = DispatcherState(previous_phase=state.phase, previous_remaining=state.seconds_remaining)
