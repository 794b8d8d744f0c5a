"""Composable API functions for the step-visualizer pipelines.

Each function corresponds to a CLI workflow (text dump, --json, --sample)
but is callable programmatically without argparse.
"""

from __future__ import annotations

import json
import logging

from .generator import generate
from .samples import SAMPLES, get_sample
from .step_types import StepTrace

logger = logging.getLogger(__name__)


def generate_sample(name: str) -> StepTrace:
    """Generate the trace of a built-in sample.

    Raises ``ValueError`` for an unknown sample name.
    """
    logger.info("Generating trace for sample %s", name)
    return generate(get_sample(name).source)


def list_samples() -> list[tuple[str, str, str]]:
    """(name, category, title) for every built-in sample, catalog order."""
    return [(s.name, s.category, s.title) for s in SAMPLES.values()]


def dump_trace(trace: StepTrace) -> str:
    """Human-readable text dump, one step per line."""
    header = f"═══ Trace ({trace.shape.value}, {len(trace)} steps) ═══"
    return "\n".join([header, *(f"  {step}" for step in trace)])


def trace_to_json(trace: StepTrace, indent: int | None = 2) -> str:
    """Serialise a trace to JSON for an external renderer."""
    return json.dumps(trace.to_dict(), indent=indent)
