"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

STEP_ID_TEMPLATE = "step-{n}"
SYNTHETIC_LINE = 0

TREE_SITTER_LANGUAGE = "java"

PRIMARY_ARRAY_NAME = "arr"
SEARCH_TARGET_NAME = "target"
START_POINTER_NAME = "start"
END_POINTER_NAME = "end"
TEMP_VARIABLE_NAMES: frozenset[str] = frozenset({"temp", "tmp"})

COMMENT_PREFIXES: tuple[str, ...] = ("//", "/*", "*")
SCALAR_TYPES: tuple[str, ...] = ("int", "long", "short", "byte")
LOOP_KEYWORDS: tuple[str, ...] = ("for", "while")

# Classifier keywords (matched against lower-cased source)
SORT_KEYWORD = "bubble"
SEARCH_KEYWORD = "search"

# tree-sitter-java node types
LOOP_NODE_TYPES: frozenset[str] = frozenset(
    {"for_statement", "enhanced_for_statement", "while_statement", "do_statement"}
)
WHILE_NODE_TYPE = "while_statement"
IDENTIFIER_NODE_TYPE = "identifier"

# Playback timing (milliseconds)
DEFAULT_SPEED_MS = 800
SWAP_ANIMATION_TIMEOUT_MS = 2500
COMPLETION_RESTART_FACTOR = 1.5

SPEED_PRESETS: dict[str, int] = {
    "0.5x": 2000,
    "1x": 1000,
    "2x": 500,
    "4x": 250,
    "10x": 100,
}

# Render layout
ARRAY_SPACING = 10
ARRAY_X_OFFSET = -5
POINTER_BASE_Y = -2.5
POINTER_Y_STEP = 0.8
POINTER_Z_STEP = 0.3

# Render colors
COLOR_ARRAY = "#3b82f6"
COLOR_HIGHLIGHT = "#ef4444"
COLOR_POINTER_DEFAULT = "#10b981"
COLOR_POINTER_HIGHLIGHT = "#f59e0b"

POINTER_COLORS: dict[str, str] = {
    "i": "#10b981",
    "j": "#f59e0b",
    "start": "#3b82f6",
    "end": "#ef4444",
    "temp": "#8b5cf6",
}
