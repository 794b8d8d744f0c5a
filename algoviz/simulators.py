"""Algorithm simulators — one hand-written replay per AlgorithmShape.

Simulators do not interpret the snippet line by line. Each re-implements
its algorithm directly over the seeded SimulationState and records one
step per conceptually meaningful micro-operation. An exchange is narrated
as three temp-variable assignments followed by a single ``swap`` step that
carries ``swap_indices``; the swap step is the renderer's sole animation
trigger.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from . import constants
from .parser import SourceLine
from .state import SimulationState
from .step_types import AlgorithmShape, StepKind

logger = logging.getLogger(__name__)

SYNTHETIC = constants.SYNTHETIC_LINE


def _fmt(values: list[int]) -> str:
    return f"[{', '.join(str(v) for v in values)}]"


class Simulator(ABC):
    """Strategy for replaying one algorithm shape."""

    @abstractmethod
    def simulate(self, lines: list[SourceLine], state: SimulationState) -> None:
        """Append the algorithm's steps to *state*."""
        ...


class SwapSortSimulator(Simulator):
    """Adjacent-exchange (bubble) sort."""

    def simulate(self, lines: list[SourceLine], state: SimulationState) -> None:
        primary = state.primary_array()
        if primary is None:
            logger.info("Sort simulator: no array declared, nothing to do")
            return
        name, arr = primary
        n = len(arr)

        state.add_step(
            SYNTHETIC,
            StepKind.LOOP,
            f"Starting Bubble Sort on array of {n} elements",
            highlights=[name],
        )

        for i in range(n - 1):
            state.set_pointer("i", i)
            state.add_step(
                SYNTHETIC,
                StepKind.LOOP,
                f"Outer loop: Pass {i + 1} of {n - 1} (i = {i})",
                highlights=["i"],
            )

            for j in range(n - i - 1):
                state.set_pointer("j", j)
                state.add_step(
                    SYNTHETIC,
                    StepKind.LOOP,
                    f"Inner loop: Comparing positions {j} and {j + 1} (j = {j})",
                    highlights=["j"],
                    highlighted_indices=[j, j + 1],
                )

                left, right = arr[j], arr[j + 1]
                need_swap = left > right
                state.add_step(
                    SYNTHETIC,
                    StepKind.COMPARISON,
                    f"Compare {name}[{j}] = {left} with {name}[{j + 1}] = {right}"
                    f" → {'SWAP NEEDED' if need_swap else 'NO SWAP'}",
                    highlights=[name],
                    highlighted_indices=[j, j + 1],
                )

                if need_swap:
                    _exchange(state, name, arr, j, j + 1, "temp")
                    state.add_step(
                        SYNTHETIC,
                        StepKind.SWAP,
                        f"Swap completed! Elements {left} and {right} exchanged positions",
                        highlights=[name],
                        swap_indices=(j, j + 1),
                    )

            settled = n - 1 - i
            state.add_step(
                SYNTHETIC,
                StepKind.LOOP,
                f"Pass {i + 1} completed. Largest element ({arr[settled]})"
                f" is now in position {settled}",
                highlights=[name],
                highlighted_indices=[settled],
            )

        state.add_step(
            SYNTHETIC,
            StepKind.COMPLETION,
            f"Bubble Sort completed! Final sorted array: {_fmt(arr)}",
            highlights=[name],
        )


class TwoPointerReversalSimulator(Simulator):
    """In-place reversal with converging ``start``/``end`` pointers."""

    def simulate(self, lines: list[SourceLine], state: SimulationState) -> None:
        primary = state.primary_array()
        if primary is None:
            logger.info("Reversal simulator: no array declared, nothing to do")
            return
        name, arr = primary
        start_name = constants.START_POINTER_NAME
        end_name = constants.END_POINTER_NAME

        start, end = 0, len(arr) - 1
        state.set_pointer(start_name, start)
        state.set_pointer(end_name, end)
        state.add_step(
            SYNTHETIC,
            StepKind.LOOP,
            f"Starting Array Reversal. Initial: {_fmt(arr)}",
            highlights=[name, start_name, end_name],
            highlighted_indices=[start, end],
        )

        iteration = 1
        while start < end:
            state.add_step(
                SYNTHETIC,
                StepKind.COMPARISON,
                f"Check condition: {start_name}({start}) < {end_name}({end})"
                " → TRUE (Continue)",
                highlights=[start_name, end_name],
                highlighted_indices=[start, end],
            )

            _exchange(state, name, arr, start, end, "temp")
            state.add_step(
                SYNTHETIC,
                StepKind.SWAP,
                f"Iteration {iteration}: Swapped positions {start} and {end}",
                highlights=[name],
                swap_indices=(start, end),
            )

            start += 1
            end -= 1
            state.set_pointer(start_name, start)
            state.set_pointer(end_name, end)
            state.add_step(
                SYNTHETIC,
                StepKind.ASSIGNMENT,
                f"Move {start_name} pointer forward to {start}",
                highlights=[start_name],
            )
            state.add_step(
                SYNTHETIC,
                StepKind.ASSIGNMENT,
                f"Move {end_name} pointer backward to {end}",
                highlights=[end_name],
            )
            iteration += 1

        state.add_step(
            SYNTHETIC,
            StepKind.COMPARISON,
            f"Check condition: {start_name}({start}) < {end_name}({end})"
            " → FALSE (Stop)",
            highlights=[start_name, end_name],
            highlighted_indices=[start, end],
        )
        state.add_step(
            SYNTHETIC,
            StepKind.COMPLETION,
            f"Array Reversal completed! Final array: {_fmt(arr)}",
            highlights=[name],
        )


class LinearSearchSimulator(Simulator):
    """Left-to-right scan that stops at the first match."""

    def simulate(self, lines: list[SourceLine], state: SimulationState) -> None:
        primary = state.primary_array()
        target = state.variables.get(constants.SEARCH_TARGET_NAME)
        if primary is None or not isinstance(target, int):
            logger.info("Search simulator: missing array or target, nothing to do")
            return
        name, arr = primary
        target_name = constants.SEARCH_TARGET_NAME

        state.add_step(
            SYNTHETIC,
            StepKind.LOOP,
            f"Starting Linear Search for {target_name} = {target} in array {_fmt(arr)}",
            highlights=[name, target_name],
        )

        for i, current in enumerate(arr):
            state.set_pointer("i", i)
            state.add_step(
                SYNTHETIC,
                StepKind.LOOP,
                f"Checking position {i} (i = {i})",
                highlights=["i"],
                highlighted_indices=[i],
            )

            is_match = current == target
            state.add_step(
                SYNTHETIC,
                StepKind.COMPARISON,
                f"Compare {name}[{i}] = {current} with {target_name} = {target}"
                f" → {'FOUND!' if is_match else 'NOT FOUND'}",
                highlights=[name, target_name],
                highlighted_indices=[i],
            )

            if is_match:
                state.add_step(
                    SYNTHETIC,
                    StepKind.COMPLETION,
                    f"Target {target} found at index {i}!",
                    highlights=[name],
                    highlighted_indices=[i],
                )
                return

        state.add_step(
            SYNTHETIC,
            StepKind.COMPLETION,
            f"Target {target} not found in the array",
            highlights=[name],
        )


class GenericSimulator(Simulator):
    """Fallback: reacts only to ``name++`` statements on known pointers."""

    def simulate(self, lines: list[SourceLine], state: SimulationState) -> None:
        for line in lines:
            if line.is_comment or "++" not in line.text:
                continue
            var_name = line.text.replace("++", "").replace(";", "").strip()
            if var_name not in state.pointers:
                continue
            state.set_pointer(var_name, state.pointers[var_name] + 1)
            state.add_step(
                line.number,
                StepKind.ASSIGNMENT,
                f"Increment {var_name} to {state.pointers[var_name]}",
                highlights=[var_name],
            )


def _exchange(
    state: SimulationState,
    name: str,
    arr: list[int],
    left: int,
    right: int,
    temp_name: str,
) -> None:
    """Narrate a temp-variable exchange of arr[left] and arr[right]."""
    temp = arr[left]
    state.variables[temp_name] = temp
    state.add_step(
        SYNTHETIC,
        StepKind.ASSIGNMENT,
        f"Store {name}[{left}] = {temp} in {temp_name}",
        highlights=[temp_name, name],
        highlighted_indices=[left],
    )

    arr[left] = arr[right]
    state.add_step(
        SYNTHETIC,
        StepKind.ASSIGNMENT,
        f"Copy {name}[{right}] = {arr[left]} to position {left}",
        highlights=[name],
        highlighted_indices=[left],
    )

    arr[right] = temp
    state.add_step(
        SYNTHETIC,
        StepKind.ASSIGNMENT,
        f"Copy {temp_name} = {temp} to position {right}",
        highlights=[name],
        highlighted_indices=[right],
    )


_SIMULATORS: dict[AlgorithmShape, type[Simulator]] = {
    AlgorithmShape.SWAP_SORT: SwapSortSimulator,
    AlgorithmShape.TWO_POINTER_REVERSAL: TwoPointerReversalSimulator,
    AlgorithmShape.LINEAR_SEARCH: LinearSearchSimulator,
    AlgorithmShape.UNRECOGNIZED: GenericSimulator,
}


def get_simulator(shape: AlgorithmShape) -> Simulator:
    """Instantiate the simulator registered for *shape*."""
    return _SIMULATORS[shape]()
