"""Step trace data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator


class StepKind(str, Enum):
    DECLARATION = "declaration"
    ASSIGNMENT = "assignment"
    COMPARISON = "comparison"
    LOOP = "loop"
    SWAP = "swap"
    COMPLETION = "completion"


class AlgorithmShape(str, Enum):
    """Closed catalog of algorithm shapes the generator can simulate."""

    SWAP_SORT = "swap_sort"
    TWO_POINTER_REVERSAL = "two_pointer_reversal"
    LINEAR_SEARCH = "linear_search"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class Step:
    """A single micro-operation of a simulated algorithm.

    ``variables`` and ``pointers`` are total snapshots deep-copied at
    capture time, never diffs against the previous step.
    """

    id: str
    line: int
    kind: StepKind
    description: str
    variables: dict[str, Any] = field(default_factory=dict)
    pointers: dict[str, int] = field(default_factory=dict)
    highlights: tuple[str, ...] = ()
    highlighted_indices: tuple[int, ...] = ()
    swap_indices: tuple[int, int] | None = None

    def first_array(self) -> tuple[str, list[int]] | None:
        """Return (name, values) of the first sequence-valued variable."""
        for name, value in self.variables.items():
            if isinstance(value, list):
                return name, value
        return None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "line": self.line,
            "kind": self.kind.value,
            "description": self.description,
            "variables": {
                k: list(v) if isinstance(v, list) else v
                for k, v in self.variables.items()
            },
            "pointers": dict(self.pointers),
            "highlights": list(self.highlights),
            "highlighted_indices": list(self.highlighted_indices),
        }
        if self.swap_indices is not None:
            d["swap_indices"] = list(self.swap_indices)
        return d

    def __str__(self) -> str:
        loc = f"L{self.line}" if self.line else "--"
        base = f"{self.id:<9} {loc:>4}  {self.kind.value:<11} {self.description}"
        if self.swap_indices is not None:
            return f"{base}  <{self.swap_indices[0]}, {self.swap_indices[1]}>"
        return base


@dataclass
class GenerationStats:
    """Timing and size statistics for one generate() call."""

    source_lines: int = 0
    declarations: int = 0
    shape: AlgorithmShape = AlgorithmShape.UNRECOGNIZED
    kind_counts: dict[str, int] = field(default_factory=dict)
    total_steps: int = 0
    swaps: int = 0

    # Stage timings (seconds)
    initialize_time: float = 0.0
    classify_time: float = 0.0
    simulate_time: float = 0.0
    total_time: float = 0.0

    def report(self) -> str:
        lines = [
            "═══ Generation Statistics ═══",
            f"  Source: {self.source_lines} lines, {self.declarations} declarations",
            f"  Shape:  {self.shape.value}",
            "",
            f"  {'Stage':<20} {'Time':>10}",
            f"  {'─' * 20} {'─' * 10}",
        ]
        for name, t in (
            ("Initialize", self.initialize_time),
            ("Classify", self.classify_time),
            ("Simulate", self.simulate_time),
        ):
            lines.append(f"  {name:<20} {t * 1000:>8.1f}ms")
        lines.append(f"  {'─' * 20} {'─' * 10}")
        lines.append(f"  {'Total':<20} {self.total_time * 1000:>8.1f}ms")
        lines.append("")
        counts = ", ".join(f"{k}={v}" for k, v in sorted(self.kind_counts.items()))
        lines.append(f"  Steps: {self.total_steps} ({counts or 'none'})")
        lines.append(f"  Swaps: {self.swaps}")
        return "\n".join(lines)


@dataclass(frozen=True)
class StepTrace:
    """Complete, read-only output of the step generator."""

    steps: tuple[Step, ...] = ()
    shape: AlgorithmShape = AlgorithmShape.UNRECOGNIZED
    stats: GenerationStats = field(default_factory=GenerationStats)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> Step:
        return self.steps[index]

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def to_dict(self) -> dict[str, Any]:
        return {
            "shape": self.shape.value,
            "steps": [s.to_dict() for s in self.steps],
        }
