"""Pure functions for computing statistics over step sequences."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from algoviz.step_types import Step, StepKind


def count_step_kinds(steps: Iterable[Step]) -> dict[str, int]:
    """Return a frequency map of step kind names in the given steps.

    Args:
        steps: Any iterable of steps (a list or a StepTrace).

    Returns:
        A dict mapping kind name strings to their occurrence counts.
        Empty dict for an empty input.
    """
    return dict(Counter(step.kind.value for step in steps))


def count_swaps(steps: Iterable[Step]) -> int:
    """Number of swap-kind steps."""
    return sum(1 for step in steps if step.kind == StepKind.SWAP)
