"""Function table extraction and call-site parameter substitution.

Bodies are stored unexpanded. At call time every whole-word occurrence of a
parameter name in the body is replaced textually by the matching positional
argument, producing a fresh instruction list; there is no variable
environment.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from lightbot.config.constants import KW_FUNCTION
from lightbot.program.tokens import find_scope_end, keyword, parse_signature


@dataclass(frozen=True)
class FunctionDef:
    """A harvested ``FUNCTION name(params) ... ENDFUNCTION`` block."""

    name: str
    params: tuple[str, ...]
    body: tuple[str, ...]

    @property
    def arity(self) -> int:
        return len(self.params)


def build_function_table(instructions: Sequence[str]) -> dict[str, FunctionDef]:
    """Collect top-level function definitions from *instructions*.

    Later definitions of a name overwrite earlier ones. Nested scopes inside a
    body are kept verbatim; definitions nested inside another body are not
    registered.
    """
    table: dict[str, FunctionDef] = {}
    i = 0
    while i < len(instructions):
        token = instructions[i]
        if keyword(token) != KW_FUNCTION:
            i += 1
            continue
        name, params = parse_signature(token, KW_FUNCTION, i)
        end = find_scope_end(instructions, i, KW_FUNCTION)
        table[name] = FunctionDef(name=name, params=params, body=tuple(instructions[i + 1 : end]))
        i = end + 1
    return table


def substitute(
    body: Sequence[str], params: Sequence[str], args: Sequence[str]
) -> tuple[str, ...]:
    """Replace whole-word parameter names in *body* with positional *args*.

    All parameters are replaced in one pass, so an argument spelled like
    another parameter is left as written. Callers check arity beforehand.
    """
    if not params:
        return tuple(body)
    bindings: dict[str, str] = {}
    for param, arg in zip(params, args, strict=True):
        bindings.setdefault(param, arg)
    alternatives = "|".join(re.escape(p) for p in bindings)
    pattern = re.compile(rf"\b(?:{alternatives})\b")
    return tuple(pattern.sub(lambda m: bindings[m.group(0)], line) for line in body)
