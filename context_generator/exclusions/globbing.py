"""Shell-style glob compilation with path-separator aware wildcards.

``*`` and ``?`` never cross ``/``; ``**`` spans any number of whole path
components. Patterns compile to anchored regexes once and are matched with
``fullmatch`` against a basename or a ``/``-joined relative path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import PatternError

_CLASS_ESCAPES = frozenset("\\]^-[")


@dataclass(frozen=True)
class GlobPattern:
    """Compiled glob plus its source text."""

    pattern: str
    regex: re.Pattern[str]

    def matches(self, text: str) -> bool:
        return self.regex.fullmatch(text) is not None


def _escape_class_char(ch: str) -> str:
    return "\\" + ch if ch in _CLASS_ESCAPES else ch


def _translate_class(pattern: str, body: str, negate: bool) -> str:
    """Translate the inside of ``[...]`` into a regex character class."""
    items: list[str] = []
    idx = 0
    while idx < len(body):
        low = body[idx]
        if idx + 2 < len(body) and body[idx + 1] == "-":
            high = body[idx + 2]
            if low > high:
                raise PatternError(pattern, f"invalid range {low}-{high} in character class")
            items.append(f"{_escape_class_char(low)}-{_escape_class_char(high)}")
            idx += 3
            continue
        items.append(_escape_class_char(low))
        idx += 1
    inner = "".join(items)
    if negate:
        return f"[^/{inner}]"
    return f"[{inner}]"


def _translate(pattern: str) -> str:
    out: list[str] = []
    idx = 0
    length = len(pattern)
    while idx < length:
        ch = pattern[idx]
        if ch == "*":
            end = idx
            while end < length and pattern[end] == "*":
                end += 1
            run = end - idx
            if run > 2:
                raise PatternError(pattern, "wildcards are either regular `*` or recursive `**`")
            if run == 2:
                starts_component = idx == 0 or pattern[idx - 1] == "/"
                ends_component = end == length or pattern[end] == "/"
                if not (starts_component and ends_component):
                    raise PatternError(pattern, "recursive wildcards must form a single path component")
                if end == length:
                    out.append(".*")
                else:
                    # "**/" consumes its trailing separator: zero or more components.
                    out.append("(?:[^/]*/)*")
                    end += 1
            else:
                out.append("[^/]*")
            idx = end
            continue

        if ch == "?":
            out.append("[^/]")
            idx += 1
            continue

        if ch == "[":
            end = idx + 1
            negate = False
            if end < length and pattern[end] == "!":
                negate = True
                end += 1
            body_start = end
            # A "]" right after the opening bracket is literal.
            if end < length and pattern[end] == "]":
                end += 1
            while end < length and pattern[end] != "]":
                end += 1
            if end >= length:
                raise PatternError(pattern, "unterminated character class")
            out.append(_translate_class(pattern, pattern[body_start:end], negate))
            idx = end + 1
            continue

        out.append(re.escape(ch))
        idx += 1
    return "".join(out)


def compile_glob(pattern: str) -> GlobPattern:
    """Compile ``pattern`` or raise ``PatternError`` when it is not a valid glob."""
    translated = _translate(pattern)
    try:
        regex = re.compile(translated, re.DOTALL)
    except re.error as exc:
        raise PatternError(pattern, str(exc)) from exc
    return GlobPattern(pattern=pattern, regex=regex)


def has_wildcards(pattern: str) -> bool:
    """Return whether ``pattern`` uses any glob metacharacter."""
    return any(ch in pattern for ch in "*?[")


__all__ = ["GlobPattern", "compile_glob", "has_wildcards"]
