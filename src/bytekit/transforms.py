"""
Unit-wise traversals of byte strings, and escaping.
"""

# pylint: disable=redefined-builtin

# std
import functools as ftl

# relative
from .buffer import as_bytes, as_unit


# ---------------------------------------------------------------------------- #
# escape sequences for special units; other non-printables use decimal \ddd
ESCAPES = {
    ord('"'): b'\\"',
    ord('\\'): b'\\\\',
    ord('\n'): b'\\n',
    ord('\t'): b'\\t',
    ord('\r'): b'\\r',
    ord('\b'): b'\\b',
}
PRINTABLE = range(0x20, 0x7F)


# ---------------------------------------------------------------------------- #
# Traversals

def map(func, string):
    """
    Return a string where every unit `u` of `string` has been replaced by
    `func(u)`.
    """
    return bytes(as_unit(func(unit)) for unit in as_bytes(string))


def iter(func, string):
    """Apply function `func` in turn to all the units of `string`."""
    for unit in as_bytes(string):
        func(unit)


def fold_left(func, initial, string):
    """
    Left-to-right fold:

        func(... func(func(initial, s[0]), s[1]) ..., s[n-1])

    Examples
    --------
    >>> fold_left(lambda acc, u: acc + [u], [], b'ab')
    [97, 98]
    """
    return ftl.reduce(func, as_bytes(string), initial)


def fold_right(func, string, initial):
    """
    Right-to-left fold:

        func(s[0], func(s[1], ... func(s[n-1], initial) ...))

    Examples
    --------
    >>> fold_right(lambda u, acc: acc + [u], b'ab', [])
    [98, 97]
    """
    result = initial
    for unit in reversed(as_bytes(string)):
        result = func(unit, result)
    return result


# ---------------------------------------------------------------------------- #
# Escaping

def _escape(unit):
    if unit in ESCAPES:
        return ESCAPES[unit]

    if unit in PRINTABLE:
        return bytes((unit, ))

    return b'\\%03d' % unit


def escaped(string):
    """
    Return a copy of `string`, with special units represented by escape
    sequences. If there are no special units in `string`, the original string
    itself is returned, not a copy.

    Examples
    --------
    >>> escaped(b'tab\\there')
    b'tab\\\\there'
    >>> escaped(b'\\x00')
    b'\\\\000'
    """
    string = as_bytes(string)
    if all(unit in PRINTABLE and unit not in ESCAPES for unit in string):
        return string

    return b''.join(_escape(unit) for unit in string)
