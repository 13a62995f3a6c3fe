"""Delimiter-aware splitting helpers."""

import re

from returns.result import Result, Success, Failure

_OPENERS = {"(": ")", "[": "]"}
_CLOSERS = {")": "(", "]": "["}

WORD_TO = re.compile(r"\s+to\s+")


def split_segments(text: str, separator: str = ";") -> Result[tuple[str, ...], str]:
    """
    Split on a separator, ignoring separators nested inside () or [].

    Args:
        text: Argument text
        separator: Single separator character

    Returns:
        Trimmed segments (possibly empty strings), or the reason the
        delimiters are unbalanced
    """
    segments: list[str] = []
    current: list[str] = []
    stack: list[str] = []

    for ch in text:
        if ch in _OPENERS:
            stack.append(ch)
        elif ch in _CLOSERS:
            if not stack or stack[-1] != _CLOSERS[ch]:
                return Failure(f"unexpected '{ch}' without matching '{_CLOSERS[ch]}'")
            stack.pop()
        elif ch == separator and not stack:
            segments.append("".join(current).strip())
            current = []
            continue
        current.append(ch)

    if stack:
        return Failure(f"missing closing '{_OPENERS[stack[-1]]}'")

    segments.append("".join(current).strip())
    return Success(tuple(segments))


def split_on_word(text: str, pattern: re.Pattern[str] = WORD_TO) -> tuple[str, ...]:
    """Split on a whole-word separator such as ``to``."""
    return tuple(part.strip() for part in pattern.split(text))


_CALL_HEAD = re.compile(r"^([A-Za-z][\w-]*)\s*\(")


def split_call(segment: str) -> tuple[str, str] | None:
    """
    Split ``name(value)`` where the ``(`` after the name closes at the very end.

    ``value`` may hold balanced parentheses. Returns None when the segment is
    not a single call, e.g. ``start(3) end(5)``.
    """
    head = _CALL_HEAD.match(segment)
    if head is None:
        return None

    depth = 0
    for position in range(head.end() - 1, len(segment)):
        ch = segment[position]
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                if position != len(segment) - 1:
                    return None
                return head.group(1), segment[head.end():position]
    return None
