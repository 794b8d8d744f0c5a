"""Tests for the algorithm classifier."""

import pytest

from algoviz.classifier import SourceFeatures, classify, classify_features, extract_features
from algoviz.parser import split_source_lines
from algoviz.samples import get_sample
from algoviz.step_types import AlgorithmShape


def _classify(source: str) -> AlgorithmShape:
    return classify(split_source_lines(source))


class TestClassifyFeatures:
    def test_bubble_keyword_alone_selects_sort(self):
        assert classify_features(SourceFeatures(text="// bubble it")) == AlgorithmShape.SWAP_SORT

    def test_nested_loops_with_temp_select_sort(self):
        features = SourceFeatures(loop_depth=2, identifiers=frozenset({"temp"}))
        assert classify_features(features) == AlgorithmShape.SWAP_SORT

    def test_nested_loops_without_temp_do_not_select_sort(self):
        features = SourceFeatures(loop_depth=2, identifiers=frozenset({"i", "j"}))
        assert classify_features(features) == AlgorithmShape.UNRECOGNIZED

    def test_single_loop_with_temp_is_not_sort(self):
        features = SourceFeatures(loop_depth=1, identifiers=frozenset({"tmp"}))
        assert classify_features(features) == AlgorithmShape.UNRECOGNIZED

    def test_while_with_start_and_end_selects_reversal(self):
        features = SourceFeatures(
            loop_depth=1, has_while=True, identifiers=frozenset({"start", "end"})
        )
        assert classify_features(features) == AlgorithmShape.TWO_POINTER_REVERSAL

    def test_start_and_end_without_while_is_not_reversal(self):
        features = SourceFeatures(loop_depth=1, identifiers=frozenset({"start", "end"}))
        assert classify_features(features) == AlgorithmShape.UNRECOGNIZED

    def test_target_selects_search(self):
        features = SourceFeatures(identifiers=frozenset({"target"}))
        assert classify_features(features) == AlgorithmShape.LINEAR_SEARCH

    def test_search_keyword_selects_search(self):
        features = SourceFeatures(text="// depth-first search")
        assert classify_features(features) == AlgorithmShape.LINEAR_SEARCH

    def test_sort_takes_priority_over_search(self):
        features = SourceFeatures(
            text="bubble", identifiers=frozenset({"target"})
        )
        assert classify_features(features) == AlgorithmShape.SWAP_SORT

    def test_nothing_matches(self):
        assert classify_features(SourceFeatures()) == AlgorithmShape.UNRECOGNIZED


class TestExtractFeatures:
    def test_nested_for_loops_have_depth_two(self):
        source = "for (int i = 0; i < 3; i++) {\n for (int j = 0; j < 3; j++) {\n x++;\n }\n}"
        features = extract_features(split_source_lines(source))
        assert features.loop_depth == 2
        assert not features.has_while

    def test_while_loop_is_detected(self):
        features = extract_features(split_source_lines("while (a < b) {\n a++;\n}"))
        assert features.has_while
        assert features.loop_depth == 1

    def test_identifiers_are_collected(self):
        features = extract_features(split_source_lines("int start = 0;\nint end = 5;"))
        assert {"start", "end"} <= features.identifiers

    def test_text_is_lower_cased(self):
        features = extract_features(split_source_lines("// Bubble Sort"))
        assert "bubble sort" in features.text

    def test_malformed_source_does_not_raise(self):
        features = extract_features(split_source_lines("for ((( {{ int = ;"))
        assert isinstance(features, SourceFeatures)

    def test_sibling_loops_do_not_add_depth(self):
        source = "for (;;) {\n}\nwhile (x) {\n for (;;) {\n  for (;;) {\n  }\n }\n}"
        features = extract_features(split_source_lines(source))
        assert features.loop_depth == 3
        assert features.has_while

    def test_deeply_nested_blocks(self):
        source = "int target = 1;\n" + "{\n" * 3000 + "}\n" * 3000
        features = extract_features(split_source_lines(source))
        assert "target" in features.identifiers
        assert features.loop_depth == 0


class TestClassifySamples:
    @pytest.mark.parametrize(
        "sample,expected",
        [
            ("bubble_sort", AlgorithmShape.SWAP_SORT),
            ("linear_search", AlgorithmShape.LINEAR_SEARCH),
            ("reverse_array", AlgorithmShape.TWO_POINTER_REVERSAL),
            ("binary_tree_traversal", AlgorithmShape.UNRECOGNIZED),
            ("binary_search_tree", AlgorithmShape.LINEAR_SEARCH),
            ("graph_dfs", AlgorithmShape.LINEAR_SEARCH),
            ("dijkstra", AlgorithmShape.UNRECOGNIZED),
        ],
    )
    def test_sample_shape(self, sample, expected):
        assert _classify(get_sample(sample).source) == expected

    def test_empty_source_is_unrecognized(self):
        assert _classify("") == AlgorithmShape.UNRECOGNIZED
