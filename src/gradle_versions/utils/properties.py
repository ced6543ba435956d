"""Decode Java ``.properties`` files such as gradle-wrapper.properties."""

from __future__ import annotations

_ESCAPES = {
    "t": "\t",
    "n": "\n",
    "r": "\r",
    "f": "\f",
}

_SEPARATORS = "=:"
_WHITESPACE = " \t\f"


def load_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dict.

    Handles ``#``/``!`` comments, ``=``/``:``/whitespace key separators,
    backslash line continuations and the standard escapes, so a wrapper
    value like ``https\\://services.gradle.org/...`` comes back as a plain URL.
    """
    result: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        result[unescape(key)] = unescape(value)
    return result


def unescape(s: str) -> str:
    """Resolve backslash escapes. Unknown escapes keep the escaped character."""
    out: list[str] = []
    i = 0
    while i < len(s):
        ch = s[i]
        if ch != "\\" or i + 1 >= len(s):
            out.append(ch)
            i += 1
            continue
        nxt = s[i + 1]
        if nxt == "u" and i + 6 <= len(s):
            try:
                out.append(chr(int(s[i + 2:i + 6], 16)))
                i += 6
                continue
            except ValueError:
                pass
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def _logical_lines(text: str) -> list[str]:
    """Join continuation lines and drop blanks and comments."""
    lines: list[str] = []
    current = ""
    continuing = False
    for raw in text.splitlines():
        stripped = raw.lstrip(_WHITESPACE)
        if not continuing and (not stripped or stripped[0] in "#!"):
            continue
        # An odd number of trailing backslashes continues the line
        trailing = len(stripped) - len(stripped.rstrip("\\"))
        if trailing % 2 == 1:
            current += stripped[:-1]
            continuing = True
            continue
        lines.append(current + stripped)
        current = ""
        continuing = False
    if current:
        lines.append(current)
    return lines


def _split_entry(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        i += 1
    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest
