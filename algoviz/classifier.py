"""Algorithm classifier — maps a snippet onto the closed AlgorithmShape catalog.

Classification combines keyword checks on the lower-cased text with
structural features read from a tree-sitter Java parse (loop nesting,
``while`` loops, declared identifiers). tree-sitter tolerates malformed
input by producing ERROR nodes, so classification never fails; the worst
case is ``AlgorithmShape.UNRECOGNIZED``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from tree_sitter import Node

from . import constants
from .parser import Parser, ParserFactory, SourceLine, TreeSitterParserFactory
from .step_types import AlgorithmShape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceFeatures:
    """Signals the classification rules are evaluated against."""

    text: str = ""
    loop_depth: int = 0
    has_while: bool = False
    identifiers: frozenset[str] = field(default_factory=frozenset)


def _node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def _walk(root: Node, source: bytes, identifiers: set[str]) -> tuple[int, bool]:
    """Return (max loop nesting depth, saw a while loop) below *root*.

    Uses an explicit (node, loop depth) stack; nesting depth is unbounded.
    """
    max_depth = 0
    has_while = False
    stack: list[tuple[Node, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.type in constants.LOOP_NODE_TYPES:
            depth += 1
            max_depth = max(max_depth, depth)
        if node.type == constants.WHILE_NODE_TYPE:
            has_while = True
        if node.type == constants.IDENTIFIER_NODE_TYPE:
            identifiers.add(_node_text(node, source))
        stack.extend((child, depth) for child in node.children)
    return max_depth, has_while


def extract_features(
    lines: list[SourceLine], parser_factory: ParserFactory | None = None
) -> SourceFeatures:
    """Collect keyword text and tree-sitter structure for *lines*."""
    source = "\n".join(line.text for line in lines)
    tree = Parser(parser_factory or TreeSitterParserFactory()).parse(source)
    identifiers: set[str] = set()
    loop_depth, has_while = _walk(tree.root_node, source.encode("utf-8"), identifiers)
    return SourceFeatures(
        text=" ".join(line.text for line in lines).lower(),
        loop_depth=loop_depth,
        has_while=has_while,
        identifiers=frozenset(identifiers),
    )


def _is_swap_sort(features: SourceFeatures) -> bool:
    if constants.SORT_KEYWORD in features.text:
        return True
    has_temp = bool(features.identifiers & constants.TEMP_VARIABLE_NAMES)
    return features.loop_depth >= 2 and has_temp


def _is_two_pointer_reversal(features: SourceFeatures) -> bool:
    return (
        features.has_while
        and constants.START_POINTER_NAME in features.identifiers
        and constants.END_POINTER_NAME in features.identifiers
    )


def _is_linear_search(features: SourceFeatures) -> bool:
    return (
        constants.SEARCH_TARGET_NAME in features.identifiers
        or constants.SEARCH_KEYWORD in features.text
    )


_RULES = (
    (AlgorithmShape.SWAP_SORT, _is_swap_sort),
    (AlgorithmShape.TWO_POINTER_REVERSAL, _is_two_pointer_reversal),
    (AlgorithmShape.LINEAR_SEARCH, _is_linear_search),
)


def classify_features(features: SourceFeatures) -> AlgorithmShape:
    """Apply the rules in priority order; first match wins."""
    for shape, rule in _RULES:
        if rule(features):
            return shape
    return AlgorithmShape.UNRECOGNIZED


def classify(
    lines: list[SourceLine], parser_factory: ParserFactory | None = None
) -> AlgorithmShape:
    """Classify a snippet into exactly one AlgorithmShape."""
    features = extract_features(lines, parser_factory)
    shape = classify_features(features)
    logger.info(
        "Classified snippet as %s (loop depth %d, while=%s)",
        shape.value,
        features.loop_depth,
        features.has_while,
    )
    return shape
