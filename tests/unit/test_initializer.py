"""Tests for line splitting and the variable initializer."""

from algoviz.initializer import (
    initialize_variables,
    parse_array_literal,
    parse_scalar_declaration,
)
from algoviz.parser import split_source_lines
from algoviz.state import SimulationState
from algoviz.step_types import StepKind


def _initialize(source: str) -> SimulationState:
    state = SimulationState()
    initialize_variables(split_source_lines(source), state)
    return state


class TestSplitSourceLines:
    def test_skips_blank_lines_and_keeps_numbers(self):
        lines = split_source_lines("int a = 1;\n\n   \n  int b = 2;  \n")
        assert [(l.number, l.text) for l in lines] == [
            (1, "int a = 1;"),
            (4, "int b = 2;"),
        ]

    def test_comment_lines_are_flagged(self):
        lines = split_source_lines("// note\n/* block */\n * star\nint a = 1;")
        assert [l.is_comment for l in lines] == [True, True, True, False]


class TestParseArrayLiteral:
    def test_java_style(self):
        assert parse_array_literal("int[] arr = {64, 34, 25};") == ("arr", [64, 34, 25])

    def test_c_style_brackets(self):
        assert parse_array_literal("int arr[] = {1, 2};") == ("arr", [1, 2])

    def test_unparseable_entries_are_skipped(self):
        assert parse_array_literal("int[] a = {1, x, 3};") == ("a", [1, 3])

    def test_unterminated_literal_is_ignored(self):
        assert parse_array_literal("int[][] graph = {") is None

    def test_new_array_is_not_a_literal(self):
        assert parse_array_literal("int[] dist = new int[9];") is None


class TestParseScalarDeclaration:
    def test_simple(self):
        assert parse_scalar_declaration("int n = arr.length;") == ("n", "arr.length")

    def test_loop_header_is_ignored(self):
        assert parse_scalar_declaration("for (int i = 0; i < n; i++) {") is None

    def test_array_declaration_is_ignored(self):
        assert parse_scalar_declaration("boolean[] visited = new boolean[7];") is None

    def test_non_int_type_is_ignored(self):
        assert parse_scalar_declaration("TreeNode root = null;") is None


class TestInitializeVariables:
    def test_array_then_length_declaration(self):
        state = _initialize("int[] arr = {5, 6, 7};\nint n = arr.length;")
        assert state.variables == {"arr": [5, 6, 7], "n": 3}
        assert state.pointers == {"n": 3}

    def test_one_declaration_step_per_declaration(self):
        state = _initialize("int[] arr = {5, 6, 7};\nint n = arr.length;\nn++;")
        assert [s.kind for s in state.steps] == [StepKind.DECLARATION] * 2
        assert [s.line for s in state.steps] == [1, 2]

    def test_declaration_steps_highlight_the_declared_name(self):
        state = _initialize("int[] arr = {1};\nint target = 10;")
        assert state.steps[0].highlights == ("arr",)
        assert state.steps[1].highlights == ("target",)

    def test_unresolvable_initializer_defaults_to_zero(self):
        state = _initialize("int[] arr = {1, 2};\nint temp = arr[0];")
        assert state.variables["temp"] == 0

    def test_later_declarations_see_earlier_ones(self):
        state = _initialize("int[] arr = {1, 2, 3, 4};\nint end = arr.length - 1;\nint mid = end - 1;")
        assert state.pointers == {"end": 3, "mid": 2}

    def test_commented_declarations_are_skipped(self):
        state = _initialize("// int[] arr = {1, 2};\nint x = 4;")
        assert "arr" not in state.variables
        assert state.variables == {"x": 4}

    def test_returns_declaration_count(self):
        state = SimulationState()
        count = initialize_variables(
            split_source_lines("int[] a = {1};\nint b = 2;\nfoo();"), state
        )
        assert count == 2

    def test_declaration_snapshot_is_isolated_from_later_mutation(self):
        state = _initialize("int[] arr = {1, 2};")
        state.variables["arr"][0] = 99
        assert state.steps[0].variables["arr"] == [1, 2]
