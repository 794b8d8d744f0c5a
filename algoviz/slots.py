"""Slot layout — physical render boxes versus logical array positions.

A renderer owns one box per array element. Boxes keep their value for the
whole animation; a swap moves two boxes into each other's physical
position instead of rewriting values in place. The layout is resynchronised
from the initial values on reset.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Slot:
    physical_index: int
    logical_value: int
    is_animating: bool = False


class SlotLayout:
    """Tracks which box sits at which physical position."""

    def __init__(self, values: list[int] | tuple[int, ...] = ()):
        self._initial_values: tuple[int, ...] = tuple(values)
        self.slots: list[Slot] = []
        self.reset()

    def __len__(self) -> int:
        return len(self.slots)

    def reset(self) -> None:
        """Put every box back at its starting position with its starting value."""
        self.slots = [
            Slot(physical_index=i, logical_value=v)
            for i, v in enumerate(self._initial_values)
        ]

    def reload(self, values: list[int] | tuple[int, ...]) -> None:
        """Adopt a new baseline (new array) and reset to it."""
        self._initial_values = tuple(values)
        self.reset()

    def box_at(self, physical_index: int) -> int | None:
        """Index of the box currently occupying *physical_index*."""
        for box, slot in enumerate(self.slots):
            if slot.physical_index == physical_index:
                return box
        return None

    @property
    def is_animating(self) -> bool:
        return any(slot.is_animating for slot in self.slots)

    def begin_swap(self, index1: int, index2: int) -> bool:
        """Mark the boxes at two positions as animating.

        Returns False, changing nothing, when either position is empty or
        either box is already mid-animation.
        """
        box1, box2 = self.box_at(index1), self.box_at(index2)
        if box1 is None or box2 is None:
            logger.debug("No boxes at positions %d/%d", index1, index2)
            return False
        if self.slots[box1].is_animating or self.slots[box2].is_animating:
            return False
        self.slots[box1].is_animating = True
        self.slots[box2].is_animating = True
        return True

    def finish_swap(self, index1: int, index2: int) -> None:
        """Land the two animating boxes in each other's position."""
        box1, box2 = self.box_at(index1), self.box_at(index2)
        if box1 is None or box2 is None:
            return
        self.slots[box1].physical_index = index2
        self.slots[box2].physical_index = index1
        self.slots[box1].is_animating = False
        self.slots[box2].is_animating = False

    def logical_values(self) -> list[int]:
        """Box values read left to right by physical position."""
        ordered = sorted(self.slots, key=lambda s: s.physical_index)
        return [slot.logical_value for slot in ordered]
