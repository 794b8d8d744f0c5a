"""Live simulation state and the step recorder that snapshots it."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Iterable

from . import constants
from .step_types import Step, StepKind


@dataclass
class SimulationState:
    """Mutable variable/pointer tables plus the steps recorded so far.

    Every recorded step receives a deep copy of the tables, so later
    mutation of the live buffers never reaches an emitted step.
    """

    variables: dict[str, Any] = field(default_factory=dict)
    pointers: dict[str, int] = field(default_factory=dict)
    steps: list[Step] = field(default_factory=list)

    def set_pointer(self, name: str, value: int) -> None:
        """Bind *name* as both an index pointer and a scalar variable."""
        self.pointers[name] = value
        self.variables[name] = value

    def array(self, name: str) -> list[int] | None:
        value = self.variables.get(name)
        return value if isinstance(value, list) else None

    def primary_array(self) -> tuple[str, list[int]] | None:
        """The array an algorithm operates on: ``arr`` or the first declared."""
        preferred = self.array(constants.PRIMARY_ARRAY_NAME)
        if preferred is not None:
            return constants.PRIMARY_ARRAY_NAME, preferred
        for name, value in self.variables.items():
            if isinstance(value, list):
                return name, value
        return None

    def add_step(
        self,
        line: int,
        kind: StepKind,
        description: str,
        highlights: Iterable[str] = (),
        highlighted_indices: Iterable[int] = (),
        swap_indices: tuple[int, int] | None = None,
    ) -> Step:
        step = Step(
            id=constants.STEP_ID_TEMPLATE.format(n=len(self.steps)),
            line=line,
            kind=kind,
            description=description,
            variables=copy.deepcopy(self.variables),
            pointers=dict(self.pointers),
            highlights=tuple(dict.fromkeys(highlights)),
            highlighted_indices=tuple(highlighted_indices),
            swap_indices=swap_indices,
        )
        self.steps.append(step)
        return step
