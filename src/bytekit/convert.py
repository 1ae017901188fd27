"""
Conversions between byte strings and sequences of units, numbers and other
strings. Also ordering.
"""

# std
import re
import math

# third-party
import more_itertools as mit

# relative
from .errors import InvalidString
from .buffer import as_bytes, as_unit


# ---------------------------------------------------------------------------- #
REGEX_INT = re.compile(rb"""(?x)
    [-+]?
    (?: 0[xX][0-9a-fA-F][0-9a-fA-F_]*
      | 0[oO][0-7][0-7_]*
      | 0[bB][01][01_]*
      | [0-9][0-9_]*
    )""")
INT_BASES = {b'x': 16, b'o': 8, b'b': 2}

# underscores only after a digit, no surrounding whitespace
REGEX_FLOAT = re.compile(rb"""(?x)
    [-+]?
    (?: (?: [0-9][0-9_]* (?: \.[0-9_]* )?
          | \.[0-9][0-9_]*
        )
        (?: [eE][-+]?[0-9][0-9_]* )?
      | (?i: inf | infinity | nan )
    )""")


# ---------------------------------------------------------------------------- #
# Sequences of units

def enum(string):
    """
    Return a lazy enumeration of the units of `string`. The enumeration can be
    restarted with `.seek(0)`, or by calling this function again.

    Examples
    --------
    >>> units = enum(b'abc')
    >>> next(units)
    97
    >>> units.seek(0)
    >>> list(units)
    [97, 98, 99]
    """
    return mit.seekable(as_bytes(string))


def of_enum(units):
    """Create a string from an iterable of units."""
    return bytes(map(as_unit, units))


def explode(string):
    """Return the list of units in `string`."""
    return list(as_bytes(string))


def implode(units):
    """Return the string made from concatenating the units in `units`."""
    return of_enum(units)


# ---------------------------------------------------------------------------- #
# Formatting

def of_char(unit):
    """A string containing the single unit `unit`."""
    return bytes((as_unit(unit), ))


def of_int(number):
    return b'%d' % number


def of_float(number):
    """
    Return the string representation of a float with 12 significant digits. A
    trailing '.' marks integral values as floats.

    Examples
    --------
    >>> of_float(1.0)
    b'1.'
    >>> of_float(0.1)
    b'0.1'
    """
    number = float(number)
    if math.isnan(number):
        return b'nan'

    if math.isinf(number):
        return b'inf' if number > 0 else b'-inf'

    text = b'%.12g' % number
    if text.lstrip(b'-').isdigit():
        return text + b'.'
    return text


# ---------------------------------------------------------------------------- #
# Parsing

def to_int(string):
    """
    Return the integer represented by `string`. Decimal, hexadecimal (0x),
    octal (0o) and binary (0b) notations are supported, as are underscores
    between digits. Integers are unbounded: there is no overflow check, the
    result is a Python `int` of whatever size the digits describe.

    Examples
    --------
    >>> to_int(b'-0x1f')
    -31
    >>> to_int(b'1_000')
    1000

    Raises
    ------
    InvalidString
        If `string` does not represent an integer.
    """
    string = as_bytes(string)
    if not REGEX_INT.fullmatch(string):
        raise InvalidString(string, 'integer')

    text = string.replace(b'_', b'')
    sign, text = (-1, text[1:]) if text[:1] == b'-' else (1, text.lstrip(b'+'))
    base = INT_BASES.get(text[1:2].lower(), 10) if text[:1] == b'0' else 10
    if base != 10:
        text = text[2:]

    return sign * int(text, base)


def to_float(string):
    """
    Return the float represented by `string`. Decimal and exponent notation,
    `inf` and `nan` are supported. Underscores may follow any digit.

    Raises
    ------
    InvalidString
        If `string` does not represent a float.
    """
    string = as_bytes(string)
    if not REGEX_FLOAT.fullmatch(string):
        raise InvalidString(string, 'float')

    return float(string.decode('latin-1').replace('_', ''))


# ---------------------------------------------------------------------------- #
# Ordering

def compare(a, b):
    """
    Compare two strings in lexicographic order of their units. Return -1, 0 or
    1 when `a` is respectively less than, equal to, or greater than `b`.
    """
    a, b = as_bytes(a), as_bytes(b)
    return (a > b) - (a < b)
