"""Tests for generate() — the end-to-end step generator."""

import pytest

from algoviz.generator import generate
from algoviz.samples import SAMPLES, get_sample
from algoviz.step_types import AlgorithmShape, Step, StepKind, StepTrace

BUBBLE = get_sample("bubble_sort").source
REVERSE = get_sample("reverse_array").source
SEARCH = get_sample("linear_search").source


class TestGenerateBasics:
    def test_returns_step_trace(self):
        trace = generate(BUBBLE)
        assert isinstance(trace, StepTrace)
        assert all(isinstance(s, Step) for s in trace)

    def test_records_shape(self):
        assert generate(BUBBLE).shape == AlgorithmShape.SWAP_SORT
        assert generate(REVERSE).shape == AlgorithmShape.TWO_POINTER_REVERSAL
        assert generate(SEARCH).shape == AlgorithmShape.LINEAR_SEARCH

    def test_step_ids_are_sequential_and_unique(self):
        trace = generate(BUBBLE)
        assert [s.id for s in trace] == [f"step-{n}" for n in range(len(trace))]

    def test_declarations_come_first(self):
        trace = generate(SEARCH)
        kinds = [s.kind for s in trace]
        assert kinds[:3] == [StepKind.DECLARATION] * 3
        assert StepKind.DECLARATION not in kinds[3:]

    def test_empty_source_gives_empty_trace(self):
        trace = generate("")
        assert len(trace) == 0
        assert trace.shape == AlgorithmShape.UNRECOGNIZED

    def test_garbage_does_not_raise(self):
        trace = generate("}{ int[] = {;\nwhile (\n;;++--")
        assert isinstance(trace, StepTrace)

    def test_deeply_nested_parentheses(self):
        trace = generate("int x = " + "(" * 2000 + "1" + ")" * 2000 + ";")
        assert isinstance(trace, StepTrace)
        assert trace[0].kind == StepKind.DECLARATION

    def test_deeply_nested_braces(self):
        trace = generate("int[] arr = {2, 1};\n" + "{\n" * 3000 + "}\n" * 3000)
        assert trace.shape == AlgorithmShape.UNRECOGNIZED
        assert trace[0].variables["arr"] == [2, 1]

    @pytest.mark.parametrize("name", sorted(SAMPLES))
    def test_every_sample_generates(self, name):
        trace = generate(SAMPLES[name].source)
        assert isinstance(trace, StepTrace)


class TestDeterminism:
    @pytest.mark.parametrize("source", [BUBBLE, REVERSE, SEARCH])
    def test_same_input_same_trace(self, source):
        a, b = generate(source), generate(source)
        assert len(a) == len(b)
        for sa, sb in zip(a, b):
            assert (sa.kind, sa.variables, sa.pointers, sa.highlights) == (
                sb.kind,
                sb.variables,
                sb.pointers,
                sb.highlights,
            )


class TestSnapshotIsolation:
    def test_mutating_one_step_array_leaves_neighbours_alone(self):
        trace = generate(BUBBLE)
        k = 10
        before = list(trace[k - 1].variables["arr"])
        after = list(trace[k + 1].variables["arr"])
        trace[k].variables["arr"][0] = -1
        assert trace[k - 1].variables["arr"] == before
        assert trace[k + 1].variables["arr"] == after

    def test_snapshots_do_not_share_lists(self):
        trace = generate(REVERSE)
        arrays = [s.variables["arr"] for s in trace]
        assert len({id(a) for a in arrays}) == len(arrays)

    def test_pointer_maps_are_independent(self):
        trace = generate(SEARCH)
        trace[5].pointers["i"] = 99
        assert trace[6].pointers["i"] != 99


class TestSwapPairing:
    @pytest.mark.parametrize("source", [BUBBLE, REVERSE])
    def test_swap_exchanges_values_of_previous_snapshot(self, source):
        trace = generate(source)
        for idx, step in enumerate(trace):
            if step.kind != StepKind.SWAP:
                continue
            i1, i2 = step.swap_indices
            # the snapshot before the three assignment moves
            before = trace[idx - 4].variables["arr"]
            after = step.variables["arr"]
            exchanged = list(before)
            exchanged[i1], exchanged[i2] = exchanged[i2], exchanged[i1]
            assert after == exchanged
            # exchanging twice restores the original arrangement
            exchanged[i1], exchanged[i2] = exchanged[i2], exchanged[i1]
            assert exchanged == before

    def test_only_swap_steps_carry_swap_indices(self):
        trace = generate(BUBBLE)
        for step in trace:
            assert (step.swap_indices is not None) == (step.kind == StepKind.SWAP)


class TestGenerationStats:
    def test_stats_match_trace(self):
        trace = generate(BUBBLE)
        stats = trace.stats
        assert stats.total_steps == len(trace)
        assert stats.declarations == 3
        assert stats.kind_counts["swap"] == 14
        assert stats.swaps == 14
        assert stats.shape == AlgorithmShape.SWAP_SORT
        assert stats.source_lines == 11

    def test_report_mentions_shape_and_steps(self):
        report = generate(REVERSE).stats.report()
        assert "two_pointer_reversal" in report
        assert "Steps: 28" in report
        assert "Swaps: 3" in report


class TestNonArraySamples:
    @pytest.mark.parametrize(
        "name", sorted(n for n, s in SAMPLES.items() if s.category != "array")
    )
    def test_only_declarations(self, name):
        trace = generate(SAMPLES[name].source)
        assert all(s.kind == StepKind.DECLARATION for s in trace)

    @pytest.mark.parametrize("name", ["binary_search_tree", "graph_dfs"])
    def test_search_keyword_without_target(self, name):
        trace = generate(SAMPLES[name].source)
        assert trace.shape == AlgorithmShape.LINEAR_SEARCH
        assert StepKind.COMPLETION not in [s.kind for s in trace]
