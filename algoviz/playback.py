"""Playback controller — walks a step trace and drives the renderer.

State machine over IDLE / PLAYING / COMPLETED:

    IDLE      --play()-->            PLAYING   (needs a non-empty trace)
    PLAYING   --tick, not at end-->  PLAYING   (advance one step)
    PLAYING   --tick at end-->       COMPLETED
    COMPLETED --auto restart-->      PLAYING   (after restart_factor x speed,
                                               only while auto_play is set)
    any       --reset()-->           IDLE

Swap coordination: advancing into a ``swap`` step opens a SwapAnimation
record for the renderer and schedules its clearing after a fixed timeout.
While the record is active, array entities are frozen so the renderer's
positional animation is never overwritten by a value-based re-render.
The clearing timer is never cancelled; clearing is idempotent.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from . import constants
from .entities import (
    ArrayEntity,
    PointerEntity,
    array_from_values,
    derive_arrays,
    derive_pointers,
)
from .playback_types import PlaybackConfig, PlaybackState, SwapAnimation
from .scheduler import Scheduler, TimerHandle
from .step_types import Step, StepKind

logger = logging.getLogger(__name__)


class PlaybackController:
    """Owns the playback position over one installed trace.

    All state is mutated from the scheduler's thread only; the installed
    trace itself is never mutated.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        config: PlaybackConfig = PlaybackConfig(),
        on_reset: Callable[[], None] | None = None,
    ):
        self._scheduler = scheduler
        self._swap_timeout_ms = config.swap_animation_timeout_ms
        self._restart_factor = config.completion_restart_factor
        self._on_reset = on_reset
        self._tick_handle: TimerHandle | None = None
        self._restart_handle: TimerHandle | None = None
        self._original_array_name = constants.PRIMARY_ARRAY_NAME

        self.speed: float = config.speed_ms
        self.auto_play: bool = config.auto_play
        self.trace: tuple[Step, ...] = ()
        self.current_step = 0
        self.state = PlaybackState.IDLE
        self.swap_animation: SwapAnimation | None = None
        self.original_array_values: tuple[int, ...] = ()

        self.arrays: list[ArrayEntity] = []
        self.pointers: list[PointerEntity] = []
        self.highlighted_indices: tuple[int, ...] = ()

    # ── read-only views ──────────────────────────────────────────

    @property
    def is_playing(self) -> bool:
        return self.state == PlaybackState.PLAYING

    @property
    def is_completed(self) -> bool:
        return self.state == PlaybackState.COMPLETED

    @property
    def current(self) -> Step | None:
        return self.trace[self.current_step] if self.trace else None

    def render_state(self) -> dict[str, Any]:
        """Everything the renderer consumes, as plain data."""
        return {
            "current_step": self.current_step,
            "state": self.state.value,
            "arrays": [a.model_dump() for a in self.arrays],
            "pointers": [p.model_dump() for p in self.pointers],
            "highlighted_indices": list(self.highlighted_indices),
            "swap_animation": (
                None
                if self.swap_animation is None
                else {
                    "index1": self.swap_animation.index1,
                    "index2": self.swap_animation.index2,
                    "is_active": self.swap_animation.is_active,
                }
            ),
        }

    # ── trace installation and navigation ────────────────────────

    def set_trace(self, trace: Sequence[Step]) -> None:
        """Install *trace*, capture the reset baseline, and show step 0."""
        self._cancel_tick()
        self._cancel_restart()
        self.trace = tuple(trace)
        self.state = PlaybackState.IDLE
        self.current_step = 0
        self.swap_animation = None

        first = self.trace[0].first_array() if self.trace else None
        if first is not None:
            self._original_array_name = first[0]
            self.original_array_values = tuple(first[1])
        else:
            self._original_array_name = constants.PRIMARY_ARRAY_NAME
            self.original_array_values = ()

        if self.trace:
            self.update_from_step(self.trace[0])
        else:
            self.arrays, self.pointers, self.highlighted_indices = [], [], ()
        logger.info(
            "Installed trace of %d steps (baseline %s)",
            len(self.trace),
            list(self.original_array_values),
        )

    def set_step(self, n: int) -> None:
        if 0 <= n < len(self.trace):
            self.current_step = n
            self.update_from_step(self.trace[n])

    def next_step(self) -> None:
        if self.current_step >= len(self.trace) - 1:
            return
        new_step = self.current_step + 1
        step = self.trace[new_step]
        if step.kind == StepKind.SWAP and step.swap_indices is not None:
            self.trigger_swap_animation(*step.swap_indices)
        self.update_from_step(step)
        self.current_step = new_step

    def previous_step(self) -> None:
        if self.current_step > 0:
            self.current_step -= 1
            self.update_from_step(self.trace[self.current_step])

    # ── playback ─────────────────────────────────────────────────

    def play(self) -> None:
        if not self.trace or self.is_playing:
            return
        if self.is_completed:
            self.reset()
        self._cancel_restart()
        self.state = PlaybackState.PLAYING
        self._schedule_tick()

    def pause(self) -> None:
        self._cancel_tick()
        self._cancel_restart()
        if self.is_playing:
            self.state = PlaybackState.IDLE

    def reset(self) -> None:
        """Return to step 0 and restore the captured baseline array."""
        self._cancel_tick()
        self._cancel_restart()
        self.current_step = 0
        self.state = PlaybackState.IDLE
        self.swap_animation = None

        first = self.current
        if self.original_array_values:
            self.arrays = [
                array_from_values(self._original_array_name, self.original_array_values)
            ]
        else:
            self.arrays = derive_arrays(first) if first is not None else []
        self.pointers = derive_pointers(first) if first is not None else []
        self.highlighted_indices = first.highlighted_indices if first is not None else ()

        if self._on_reset is not None:
            self._on_reset()

    def tick(self) -> None:
        """Timer callback: advance one step, or complete at the last index."""
        self._tick_handle = None
        if not self.is_playing:
            return
        if self.current_step < len(self.trace) - 1:
            self.next_step()
            self._schedule_tick()
        else:
            self._complete()

    # ── configuration ────────────────────────────────────────────

    def set_speed(self, speed_ms: float) -> None:
        if speed_ms <= 0:
            logger.warning("Ignoring non-positive playback speed %r", speed_ms)
            return
        self.speed = speed_ms

    def set_auto_play(self, auto_play: bool) -> None:
        self.auto_play = auto_play
        if not auto_play:
            self._cancel_restart()

    def set_reset_callback(self, on_reset: Callable[[], None] | None) -> None:
        self._on_reset = on_reset

    # ── render derivation and swap coordination ──────────────────

    def update_from_step(self, step: Step) -> None:
        self.pointers = derive_pointers(step)
        self.highlighted_indices = step.highlighted_indices
        if self.swap_animation is None or not self.swap_animation.is_active:
            self.arrays = derive_arrays(step)

    def trigger_swap_animation(self, index1: int, index2: int) -> None:
        logger.debug("Starting swap animation %d <-> %d", index1, index2)
        self.swap_animation = SwapAnimation(index1=index1, index2=index2)
        self._scheduler.call_later(self._swap_timeout_ms, self._clear_swap_animation)

    def _clear_swap_animation(self) -> None:
        logger.debug("Clearing swap animation %s", self.swap_animation)
        self.swap_animation = None

    # ── timers ───────────────────────────────────────────────────

    def _schedule_tick(self) -> None:
        self._cancel_tick()
        self._tick_handle = self._scheduler.call_later(self.speed, self.tick)

    def _cancel_tick(self) -> None:
        if self._tick_handle is not None:
            self._tick_handle.cancel()
            self._tick_handle = None

    def _cancel_restart(self) -> None:
        if self._restart_handle is not None:
            self._restart_handle.cancel()
            self._restart_handle = None

    def _complete(self) -> None:
        self.state = PlaybackState.COMPLETED
        logger.info("Playback completed at step %d", self.current_step)
        if self.auto_play:
            self._restart_handle = self._scheduler.call_later(
                self.speed * self._restart_factor, self._auto_restart
            )

    def _auto_restart(self) -> None:
        self._restart_handle = None
        if not self.is_completed or not self.auto_play:
            return
        self.reset()
        self.play()
