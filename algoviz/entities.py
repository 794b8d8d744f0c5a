"""Render entity descriptors handed to the external renderer."""

from __future__ import annotations

from pydantic import BaseModel

from . import constants
from .step_types import Step

Vector3 = tuple[float, float, float]


class ArrayEntity(BaseModel):
    name: str
    values: list[int]
    position: Vector3
    color: str


class PointerEntity(BaseModel):
    name: str
    index: int
    target_array: str
    color: str
    position: Vector3


def derive_arrays(step: Step) -> list[ArrayEntity]:
    """One array entity per sequence-valued variable, laid out left to right."""
    arrays: list[ArrayEntity] = []
    for name, value in step.variables.items():
        if not isinstance(value, list):
            continue
        k = len(arrays)
        arrays.append(
            ArrayEntity(
                name=name,
                values=list(value),
                position=(k * constants.ARRAY_SPACING + constants.ARRAY_X_OFFSET, 0, 0),
                color=constants.COLOR_HIGHLIGHT
                if name in step.highlights
                else constants.COLOR_ARRAY,
            )
        )
    return arrays


def pointer_color(name: str, highlighted: bool) -> str:
    if highlighted:
        return constants.COLOR_POINTER_HIGHLIGHT
    return constants.POINTER_COLORS.get(name, constants.COLOR_POINTER_DEFAULT)


def derive_pointers(step: Step) -> list[PointerEntity]:
    """One pointer entity per integer pointer aimed at the step's first array.

    Steps without any array produce no pointers.
    """
    target = step.first_array()
    if target is None:
        return []
    target_name = target[0]
    pointers: list[PointerEntity] = []
    for name, index in step.pointers.items():
        if not isinstance(index, int) or isinstance(index, bool):
            continue
        k = len(pointers)
        pointers.append(
            PointerEntity(
                name=name,
                index=index,
                target_array=target_name,
                color=pointer_color(name, name in step.highlights),
                position=(
                    0,
                    constants.POINTER_BASE_Y - k * constants.POINTER_Y_STEP,
                    k * constants.POINTER_Z_STEP,
                ),
            )
        )
    return pointers


def array_from_values(name: str, values: list[int] | tuple[int, ...]) -> ArrayEntity:
    """The single array entity shown after a reset."""
    return ArrayEntity(
        name=name,
        values=list(values),
        position=(0, 0, 0),
        color=constants.COLOR_ARRAY,
    )
