"""Variable initializer — seeds the variable table from declarations."""

from __future__ import annotations

import logging
import re

from . import constants
from .expressions import evaluate_expression, parse_int_prefix
from .parser import SourceLine
from .state import SimulationState
from .step_types import StepKind

logger = logging.getLogger(__name__)

_ARRAY_LITERAL_PATTERN = re.compile(
    r"^(?P<lhs>[^=]*\[\s*\][^=]*)=\s*\{(?P<body>[^}]*)\}"
)
_SCALAR_DECL_PATTERN = re.compile(
    r"^(?:final\s+)?(?:%s)\s+(?P<name>\w+)\s*=\s*(?P<expr>[^;]*)"
    % "|".join(constants.SCALAR_TYPES)
)
_LOOP_PATTERN = re.compile(r"\b(?:%s)\b" % "|".join(constants.LOOP_KEYWORDS))


def _declared_name(lhs: str) -> str:
    return lhs.strip().split()[-1].replace("[]", "")


def parse_array_literal(text: str) -> tuple[str, list[int]] | None:
    """Parse ``type[] name = {v1, v2, ...}`` into (name, values)."""
    m = _ARRAY_LITERAL_PATTERN.match(text)
    if not m or not m.group("lhs").strip():
        return None
    values = [
        v
        for v in (parse_int_prefix(part) for part in m.group("body").split(","))
        if v is not None
    ]
    return _declared_name(m.group("lhs")), values


def parse_scalar_declaration(text: str) -> tuple[str, str] | None:
    """Parse ``int name = expr;`` into (name, expr) outside loop headers."""
    if "[]" in text or _LOOP_PATTERN.search(text):
        return None
    m = _SCALAR_DECL_PATTERN.match(text)
    if not m:
        return None
    return m.group("name"), m.group("expr").strip()


def initialize_variables(lines: list[SourceLine], state: SimulationState) -> int:
    """Seed *state* from declaration lines, one declaration step each.

    Returns the number of declarations recognised.
    """
    declarations = 0
    for line in lines:
        if line.is_comment:
            continue

        array_decl = parse_array_literal(line.text)
        if array_decl is not None:
            name, values = array_decl
            state.variables[name] = list(values)
            state.add_step(
                line.number,
                StepKind.DECLARATION,
                f"Initialize array {name} with {len(values)} elements: "
                f"[{', '.join(str(v) for v in values)}]",
                highlights=[name],
            )
            declarations += 1
            continue

        scalar_decl = parse_scalar_declaration(line.text)
        if scalar_decl is not None:
            name, expr = scalar_decl
            value = evaluate_expression(expr, state.variables, state.pointers)
            state.set_pointer(name, value)
            state.add_step(
                line.number,
                StepKind.DECLARATION,
                f"Initialize variable {name} = {value}",
                highlights=[name],
            )
            declarations += 1

    logger.debug("Initialized %d declaration(s)", declarations)
    return declarations
