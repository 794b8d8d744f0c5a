"""Orchestrator — generate() entry point for the step generator."""

from __future__ import annotations

import logging
import time

from .classifier import classify
from .initializer import initialize_variables
from .parser import ParserFactory, split_source_lines
from .simulators import get_simulator
from .state import SimulationState
from .step_types import GenerationStats, StepTrace
from .trace_stats import count_step_kinds, count_swaps

logger = logging.getLogger(__name__)


def generate(source: str, parser_factory: ParserFactory | None = None) -> StepTrace:
    """End-to-end: split → initialize → classify → simulate.

    Never raises for malformed snippets; unrecognised constructs are
    skipped or default to ``0`` and the trace may simply be short.

    Args:
        source: Snippet text in the supported Java-like subset.
        parser_factory: tree-sitter parser factory for DI/testing.

    Returns:
        A fully materialised, immutable StepTrace.
    """
    pipeline_start = time.perf_counter()
    lines = split_source_lines(source)
    state = SimulationState()
    stats = GenerationStats(source_lines=len(lines))

    t0 = time.perf_counter()
    stats.declarations = initialize_variables(lines, state)
    stats.initialize_time = time.perf_counter() - t0

    t0 = time.perf_counter()
    shape = classify(lines, parser_factory)
    stats.classify_time = time.perf_counter() - t0
    stats.shape = shape

    t0 = time.perf_counter()
    get_simulator(shape).simulate(lines, state)
    stats.simulate_time = time.perf_counter() - t0

    steps = tuple(state.steps)
    stats.kind_counts = count_step_kinds(steps)
    stats.total_steps = len(steps)
    stats.swaps = count_swaps(steps)
    stats.total_time = time.perf_counter() - pipeline_start

    logger.info(
        "Generated %d steps for %s in %.1fms",
        stats.total_steps,
        shape.value,
        stats.total_time * 1000,
    )
    return StepTrace(steps=steps, shape=shape, stats=stats)
