"""Terminal renderer — a text stand-in for the 3D renderer.

Consumes the controller's render entities and swap-animation record the
same way the 3D renderer does: box identity lives in a SlotLayout, a swap
record moves two boxes, and the controller's reset callback resynchronises
the layout.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TextIO

from .playback import PlaybackController
from .playback_types import PlaybackConfig, SwapAnimation
from .scheduler import AsyncioScheduler
from .slots import SlotLayout
from .step_types import StepTrace

logger = logging.getLogger(__name__)

CELL_WIDTH = 5


class TerminalRenderer:
    def __init__(self, controller: PlaybackController):
        self._controller = controller
        self._last_swap: SwapAnimation | None = None
        self.layout = SlotLayout()
        controller.set_reset_callback(self.resync)

    def resync(self) -> None:
        """Reset callback: rebuild the boxes from the controller's arrays."""
        arrays = self._controller.arrays
        self.layout.reload(arrays[0].values if arrays else ())
        self._last_swap = None

    def _apply_swap_animation(self) -> None:
        swap = self._controller.swap_animation
        if swap is None or not swap.is_active or swap is self._last_swap:
            return
        # each trigger opens a new record, so identity marks an unseen swap
        self._last_swap = swap
        if self.layout.begin_swap(swap.index1, swap.index2):
            # no tweening in a terminal: the boxes land immediately
            self.layout.finish_swap(swap.index1, swap.index2)

    def frame(self) -> str:
        controller = self._controller
        step = controller.current
        if step is None:
            return "(empty trace)"
        if len(self.layout) == 0 and controller.arrays:
            self.layout.reload(controller.arrays[0].values)
        self._apply_swap_animation()

        header = (
            f"Step {controller.current_step + 1}/{len(controller.trace)}"
            f"  [{step.kind.value.upper()}]  {step.description}"
        )
        lines = [header]
        if controller.arrays:
            name = controller.arrays[0].name
            cells = []
            for pos, value in enumerate(self.layout.logical_values()):
                text = f"[{value}]" if pos in controller.highlighted_indices else str(value)
                cells.append(text.center(CELL_WIDTH))
            lines.append(f"  {name:>6} " + "".join(cells))
            for pointer in controller.pointers:
                if 0 <= pointer.index < len(self.layout):
                    pad = " " * (pointer.index * CELL_WIDTH)
                    lines.append(f"  {'':>6} {pad}{'^'.center(CELL_WIDTH)} {pointer.name}")
        if controller.swap_animation is not None:
            s = controller.swap_animation
            lines.append(f"  swap {s.index1} <-> {s.index2}")
        return "\n".join(lines)


async def play_in_terminal(
    trace: StepTrace,
    out: TextIO,
    config: PlaybackConfig = PlaybackConfig(),
) -> None:
    """Play *trace* on the running event loop, printing one frame per step.

    Returns when playback completes, unless auto-play keeps it looping.
    """
    controller = PlaybackController(AsyncioScheduler(), config)
    renderer = TerminalRenderer(controller)
    controller.set_trace(trace)
    if not controller.trace:
        out.write(renderer.frame() + "\n")
        return

    controller.play()
    shown = -1
    restarts = 0
    while controller.is_playing or controller.auto_play:
        if controller.current_step != shown:
            if controller.current_step < shown:
                restarts += 1
                logger.info("Restarting playback (loop %d)", restarts)
            shown = controller.current_step
            out.write(renderer.frame() + "\n\n")
            out.flush()
        await asyncio.sleep(controller.speed / 4000.0)
    if controller.current_step != shown:
        shown = controller.current_step
        out.write(renderer.frame() + "\n\n")
    logger.info("Terminal playback finished after %d step(s)", shown + 1)
