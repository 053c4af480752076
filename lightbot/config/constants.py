"""Centralized symbols and limits for the LightBot interpreter.

Map symbols and instruction keywords are defined here so that the loader,
the world model, and the executor agree on a single vocabulary.
"""

from __future__ import annotations

FLOOR = "."
"""Floor cell, unlit."""

FLOOR_LIT = "x"
"""Floor cell, lit."""

MARKER = "O"
"""Off-marker cell, unlit."""

MARKER_LIT = "X"
"""Off-marker cell, lit."""

LIGHT_TOGGLES: dict[str, str] = {
    FLOOR: FLOOR_LIT,
    FLOOR_LIT: FLOOR,
    MARKER: MARKER_LIT,
    MARKER_LIT: MARKER,
}
"""Cell symbol after a LIGHT command. Symbols not listed are never toggled."""

START_SYMBOLS: tuple[str, ...] = ("U", "D", "L", "R")
"""Robot start markers, one per heading."""

KW_LEFT = "LEFT"
KW_RIGHT = "RIGHT"
KW_FORWARD = "FORWARD"
KW_LIGHT = "LIGHT"
KW_REPEAT = "REPEAT"
KW_END_REPEAT = "ENDREPEAT"
KW_FUNCTION = "FUNCTION"
KW_END_FUNCTION = "ENDFUNCTION"
KW_CALL = "CALL"

DEFAULT_MAX_DEPTH = 200
"""Default cap on nested REPEAT/CALL scopes entered during one run."""

MAIN_NODE = "<main>"
"""Call-graph node standing for the top-level program."""
