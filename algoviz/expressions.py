"""Expression evaluator for declaration right-hand sides.

Supports a fixed precedence ladder and nothing else:

1. ``X.length``, optionally followed by ``+ k`` or ``- k``
2. a single ``+`` split into two operands
3. a single ``-`` split into two operands
4. an operand: pointer lookup, numeric variable lookup, integer literal

Anything unrecognised evaluates to ``0``. Nested or chained arithmetic is
deliberately unsupported.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

logger = logging.getLogger(__name__)

_LENGTH_PATTERN = re.compile(r"^(\w+)\.length\s*(?:([+-])\s*(\d+))?$")
_INT_PREFIX_PATTERN = re.compile(r"^\s*([+-]?\d+)")


def _is_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_int_prefix(text: str) -> int | None:
    """Parse the leading integer of *text* (``"12abc"`` → 12), or None."""
    m = _INT_PREFIX_PATTERN.match(text)
    return int(m.group(1)) if m else None


def evaluate_operand(
    expr: str,
    variables: Mapping[str, Any],
    pointers: Mapping[str, int],
) -> int:
    """Resolve a single operand: pointer, then numeric variable, then literal."""
    expr = expr.strip()
    if expr in pointers:
        return pointers[expr]
    if _is_number(variables.get(expr)):
        return variables[expr]
    literal = parse_int_prefix(expr)
    if literal is not None:
        return literal
    logger.debug("Unresolved operand %r defaults to 0", expr)
    return 0


def _evaluate_length(
    expr: str, variables: Mapping[str, Any]
) -> int | None:
    m = _LENGTH_PATTERN.match(expr)
    if not m:
        return None
    array = variables.get(m.group(1))
    if not isinstance(array, list):
        return None
    length = len(array)
    op, amount = m.group(2), m.group(3)
    if op == "-":
        return length - int(amount)
    if op == "+":
        return length + int(amount)
    return length


def evaluate_expression(
    expr: str,
    variables: Mapping[str, Any],
    pointers: Mapping[str, int],
) -> int:
    """Evaluate *expr* against the variable and pointer tables.

    Never raises; unrecognised expressions yield ``0``.
    """
    expr = expr.strip()

    length = _evaluate_length(expr, variables)
    if length is not None:
        return length

    for op in ("+", "-"):
        parts = expr.split(op)
        if len(parts) == 2:
            left = evaluate_operand(parts[0], variables, pointers)
            right = evaluate_operand(parts[1], variables, pointers)
            return left + right if op == "+" else left - right

    return evaluate_operand(expr, variables, pointers)
