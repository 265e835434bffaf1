"""Rewrite Python-style single-quoted list literals into JSON arrays.

Assistants that re-serialize arguments through ``repr`` produce values such as
``['primary', 'work@example.com']``. This lexer turns them into
``["primary", "work@example.com"]`` without touching apostrophes that sit inside
an element, e.g. ``['John's Calendar']``.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

_ELEMENT_TERMINATORS = frozenset(",]")


def _next_significant(text: str, start: int) -> str:
    index = start
    while index < len(text) and text[index].isspace():
        index += 1
    return text[index] if index < len(text) else ""


def _scan_double_quoted(text: str, start: int) -> Optional[int]:
    """Return the index just past the closing quote of the string at ``start``."""

    index = start + 1
    while index < len(text):
        char = text[index]
        if char == "\\":
            index += 2
            continue
        if char == '"':
            return index + 1
        index += 1
    return None


def _scan_single_quoted(text: str, start: int) -> Tuple[Optional[str], int]:
    """Lex the element opened at ``start`` and return it re-quoted with double quotes."""

    chunks: List[str] = ['"']
    index = start + 1
    while index < len(text):
        char = text[index]
        if char == "\\" and index + 1 < len(text):
            escaped = text[index + 1]
            # \' only exists to protect the delimiter; JSON has no such escape.
            chunks.append("'" if escaped == "'" else char + escaped)
            index += 2
            continue
        if char == "'":
            if _next_significant(text, index + 1) in _ELEMENT_TERMINATORS:
                chunks.append('"')
                return "".join(chunks), index + 1
            chunks.append(char)
        elif char == '"':
            chunks.append('\\"')
        else:
            chunks.append(char)
        index += 1
    return None, index


def repair_single_quoted(text: str) -> Optional[str]:
    """Return ``text`` with single-quoted elements rewritten, or None if it cannot be lexed."""

    output: List[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char == '"':
            end = _scan_double_quoted(text, index)
            if end is None:
                return None
            output.append(text[index:end])
            index = end
        elif char == "'":
            element, index = _scan_single_quoted(text, index)
            if element is None:
                return None
            output.append(element)
        else:
            output.append(char)
            index += 1
    return "".join(output)
