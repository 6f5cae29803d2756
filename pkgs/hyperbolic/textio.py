"""
Bracketed text format for coordinates and structures.

A structure layer renders as ``[<layer beneath>,<own scalar>]``, containers
as ``[v0,v1,...]``, complex values and intervals as ``(a,b)``. Parsing splits
one bracket level at a time with ``split_elements`` and raises ``ParseError``
pointing at the first offending character.
"""
from typing import List, Sequence

from .common import DEFAULT_PRECISION, Precision
from .exceptions import ParseError

_PAIRS = {'(': ')', '[': ']', '{': '}', '<': '>'}
_CLOSERS = frozenset(_PAIRS.values())
_DELIMITER = ','


def split_elements(text: str) -> List[str]:
    """Split the outermost bracket level of ``text`` into element strings.

    Elements are separated by ``,`` or by whitespace; a run of whitespace
    next to a comma counts as one delimiter.

    ``"[[1,2],3]"`` -> ``["[1,2]", "3"]``; ``"[1 2]"`` -> ``["1", "2"]``;
    ``"[]"`` -> ``[]``.
    """
    source = text.strip()
    if not source or source[0] not in _PAIRS:
        raise ParseError(1, source)

    closers: List[str] = []
    elements: List[str] = []
    current: List[str] = []
    prev = ''
    # an element was just ended by whitespace; a following comma closes nothing
    spaced = False
    for pos, c in enumerate(source, start=1):
        if pos > 1 and not closers:
            # anything after the outer bracket has closed
            raise ParseError(pos, source)
        if c in _PAIRS:
            closers.append(_PAIRS[c])
            if len(closers) > 1:
                current.append(c)
        elif c in _CLOSERS:
            if not closers or c != closers[-1] or prev == _DELIMITER:
                raise ParseError(pos, source)
            closers.pop()
            if closers:
                current.append(c)
            else:
                _flush(current, elements, pos, source, closing=True)
        elif c == _DELIMITER:
            if prev == _DELIMITER:
                raise ParseError(pos, source)
            if len(closers) > 1:
                current.append(c)
            elif not (spaced and not current):
                _flush(current, elements, pos, source, closing=False)
        elif c.isspace():
            if len(closers) > 1:
                current.append(c)
            elif current:
                _flush(current, elements, pos, source, closing=False)
                spaced = True
            continue
        else:
            current.append(c)
        spaced = False
        prev = c

    if closers:
        raise ParseError(len(source), source, "Unbalanced brackets")
    return elements


def _flush(current: List[str], elements: List[str], pos: int, source: str, closing: bool):
    element = ''.join(current).strip()
    current.clear()
    if element:
        elements.append(element)
    elif not closing:
        raise ParseError(pos, source, "Empty element")


def expect_elements(text: str, count: int) -> List[str]:
    """``split_elements`` that also checks the element count."""
    elements = split_elements(text)
    if len(elements) != count:
        raise ParseError(len(text.strip()), text.strip(),
                         f"Expected {count} elements, found {len(elements)}")
    return elements


def parse_real(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        raise ParseError(1, text.strip(), "Not a real number") from None


def format_real(value: float, precision: Precision = DEFAULT_PRECISION) -> str:
    return precision.format(value)


def format_pair(first: str, second: str) -> str:
    return f"({first},{second})"


def format_complex(value: complex, precision: Precision = DEFAULT_PRECISION) -> str:
    return format_pair(precision.format(value.real), precision.format(value.imag))


def parse_complex(text: str) -> complex:
    real, imag = expect_elements(text, 2)
    return complex(parse_real(real), parse_real(imag))


def format_sequence(items: Sequence[str]) -> str:
    return '[' + ','.join(items) + ']'
