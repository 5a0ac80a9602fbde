"""
Header line tokenizer.

Splits one ARFF header line into whitespace separated fields with a
small finite-state scanner:

    SPACE   between fields, whitespace is skipped
    NORMAL  inside an unquoted field
    TICKS   inside a '...' span
    QUOTES  inside a "..." span
    BRACES  inside a {...} nominal value list

Quote delimiters are dropped from the field; a quote met in the middle
of a field opens a span too, so "ab'c d'" is the single field "abc d".
A brace list is kept verbatim (quotes included) so the attribute grammar
can split it. There are no escape sequences, and an unterminated span
simply ends with the line.
"""

from enum import Enum
from typing import List


WHITESPACE = " \t\r\n"


class _State(Enum):
    SPACE = "space"
    NORMAL = "normal"
    TICKS = "ticks"
    QUOTES = "quotes"
    BRACES = "braces"


_OPENERS = {"'": _State.TICKS, '"': _State.QUOTES}
_CLOSERS = {_State.TICKS: "'", _State.QUOTES: '"'}


def split(line: str) -> List[str]:
    """
    Split a header line into fields.

    Args:
        line: Raw header line, terminator included or not

    Returns:
        Fields in order; [] for an empty or blank line

    Example:
        >>> split("a 'b c' d")
        ['a', 'b c', 'd']
    """
    fields: List[str] = []
    buf: List[str] = []
    state = _State.SPACE
    brace_quote = None

    for ch in line:
        if state is _State.SPACE:
            if ch in WHITESPACE:
                continue
            state = _State.NORMAL

        if state is _State.NORMAL:
            if ch in WHITESPACE:
                fields.append("".join(buf))
                buf = []
                state = _State.SPACE
            elif ch in _OPENERS:
                state = _OPENERS[ch]
            elif ch == "{":
                buf.append(ch)
                state = _State.BRACES
            else:
                buf.append(ch)

        elif state is _State.BRACES:
            buf.append(ch)
            if brace_quote is not None:
                if ch == brace_quote:
                    brace_quote = None
            elif ch in _OPENERS:
                brace_quote = ch
            elif ch == "}":
                state = _State.NORMAL

        elif ch == _CLOSERS[state]:
            state = _State.NORMAL
        else:
            buf.append(ch)

    if state is not _State.SPACE:
        fields.append("".join(buf))
    return fields


def unquote(value: str) -> str:
    """Remove one pair of matching surrounding quotes, if present."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _OPENERS:
        return value[1:-1]
    return value


__all__ = ["split", "unquote", "WHITESPACE"]
