"""Token-level helpers: keywords, signatures, and scope scanning.

Instructions are plain strings. Structured tokens start with a keyword
(``FUNCTION``, ``REPEAT``, ``CALL``) followed by their operands; scopes are
closed by ``ENDFUNCTION`` / ``ENDREPEAT``. Scope matching counts nesting
levels of the same construct only.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from lightbot.config.constants import (
    KW_CALL,
    KW_END_FUNCTION,
    KW_END_REPEAT,
    KW_FUNCTION,
    KW_REPEAT,
)
from lightbot.errors import MalformedProgramError

_KEYWORD_RE = re.compile(r"^([A-Z]+)\b")

SCOPE_CLOSERS: dict[str, str] = {
    KW_FUNCTION: KW_END_FUNCTION,
    KW_REPEAT: KW_END_REPEAT,
}


def normalize(instructions: Iterable[str]) -> tuple[str, ...]:
    """Strip surrounding whitespace from every token."""
    return tuple(token.strip() for token in instructions)


def keyword(token: str) -> str:
    """Return the leading upper-case word of *token*, or ``""``."""
    match = _KEYWORD_RE.match(token)
    return match.group(1) if match else ""


def find_scope_end(instructions: Sequence[str], opener_index: int, opener: str) -> int:
    """Return the index of the closer balancing the opener at *opener_index*.

    Returns ``len(instructions)`` when the scope is never closed.
    """
    closer = SCOPE_CLOSERS[opener]
    level = 1
    j = opener_index + 1
    while j < len(instructions):
        token = instructions[j]
        if token == closer:
            level -= 1
            if level == 0:
                return j
        elif keyword(token) == opener:
            level += 1
        j += 1
    return len(instructions)


def validate_nesting(instructions: Sequence[str]) -> None:
    """Raise :exc:`MalformedProgramError` unless all scopes are properly nested."""
    closer_to_opener = {closer: opener for opener, closer in SCOPE_CLOSERS.items()}
    stack: list[tuple[str, int]] = []
    for index, token in enumerate(instructions):
        kw = keyword(token)
        if token in closer_to_opener:
            expected_opener = closer_to_opener[token]
            if not stack:
                raise MalformedProgramError(f"{token} without matching {expected_opener}", index)
            opener, opener_index = stack.pop()
            if opener != expected_opener:
                raise MalformedProgramError(
                    f"{token} closes {opener} opened at instruction {opener_index}", index
                )
        elif kw in SCOPE_CLOSERS:
            stack.append((kw, index))
    if stack:
        opener, opener_index = stack[-1]
        raise MalformedProgramError(
            f"{opener} is never closed by {SCOPE_CLOSERS[opener]}", opener_index
        )


def parse_signature(token: str, kw: str, index: int | None = None) -> tuple[str, tuple[str, ...]]:
    """Split ``KW name(a, b)`` into ``("name", ("a", "b"))``.

    Parentheses are optional; ``name`` and ``name()`` both yield no operands.
    Operands are split on commas and whitespace-trimmed.
    """
    rest = token[len(kw):].strip()
    paren = rest.find("(")
    if paren < 0:
        name, operands = rest, ()
    else:
        close = rest.rfind(")") if kw == KW_CALL else rest.find(")", paren)
        if close < paren:
            raise MalformedProgramError(f"Unclosed parameter list in {token!r}", index)
        name = rest[:paren].strip()
        inner = rest[paren + 1 : close].strip()
        operands = tuple(part.strip() for part in inner.split(",")) if inner else ()
    if not name:
        raise MalformedProgramError(f"Missing name in {token!r}", index)
    return name, operands


def parse_repeat_count(token: str, index: int | None = None) -> int:
    """Return ``n`` from ``REPEAT n``."""
    parts = token.split()
    if len(parts) != 2:
        raise MalformedProgramError(f"REPEAT expects one count operand: {token!r}", index)
    try:
        return int(parts[1])
    except ValueError as exc:
        raise MalformedProgramError(f"REPEAT count must be an integer: {token!r}", index) from exc


def iter_call_names(instructions: Sequence[str]) -> Iterable[str]:
    """Yield the callee of every CALL that could execute.

    FUNCTION bodies are skipped, and so are REPEAT scopes whose count is a
    literal ``<= 0``. A count that is not yet an integer (a parameter name
    before substitution) is assumed to run.
    """
    i = 0
    while i < len(instructions):
        token = instructions[i]
        kw = keyword(token)
        if kw == KW_FUNCTION:
            i = find_scope_end(instructions, i, KW_FUNCTION) + 1
            continue
        if kw == KW_REPEAT:
            try:
                times = parse_repeat_count(token, i)
            except MalformedProgramError:
                times = 1
            if times <= 0:
                i = find_scope_end(instructions, i, KW_REPEAT) + 1
                continue
        elif kw == KW_CALL:
            name, _ = parse_signature(token, KW_CALL, i)
            yield name
        i += 1
