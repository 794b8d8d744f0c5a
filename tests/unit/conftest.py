"""Shared fixtures: a manual-clock scheduler and hand-built steps."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from algoviz.scheduler import Scheduler, TimerHandle
from algoviz.step_types import Step, StepKind


class FakeTimerHandle(TimerHandle):
    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler(Scheduler):
    """Deterministic scheduler: time only moves when advance() is called."""

    def __init__(self):
        self.now = 0.0
        self.pending: list[FakeTimerHandle] = []

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle:
        handle = FakeTimerHandle(self.now + delay_ms, callback)
        self.pending.append(handle)
        return handle

    def active(self) -> list[FakeTimerHandle]:
        return [h for h in self.pending if not h.cancelled]

    def advance(self, ms: float) -> None:
        """Fire every timer due within the next *ms*, in due order."""
        target = self.now + ms
        while True:
            due = [h for h in self.active() if h.due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due)
            self.pending.remove(handle)
            self.now = handle.due
            handle.callback()
        self.now = target


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


def make_step(
    n: int,
    kind: StepKind = StepKind.ASSIGNMENT,
    arr: list[int] | None = None,
    pointers: dict[str, int] | None = None,
    highlights: tuple[str, ...] = (),
    highlighted_indices: tuple[int, ...] = (),
    swap_indices: tuple[int, int] | None = None,
    extra: dict[str, Any] | None = None,
) -> Step:
    variables: dict[str, Any] = {}
    if arr is not None:
        variables["arr"] = list(arr)
    variables.update(extra or {})
    return Step(
        id=f"step-{n}",
        line=0,
        kind=kind,
        description=f"step {n}",
        variables=variables,
        pointers=dict(pointers or {}),
        highlights=highlights,
        highlighted_indices=highlighted_indices,
        swap_indices=swap_indices,
    )


@pytest.fixture
def step_factory() -> Callable[..., Step]:
    return make_step
