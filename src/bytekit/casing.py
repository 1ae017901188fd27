"""
Case conversion through fixed 8-bit case tables.
"""

# relative
from . import config
from .buffer import as_bytes


# ---------------------------------------------------------------------------- #
def _make_tables(lower_ranges):
    upper, lower = bytearray(range(256)), bytearray(range(256))
    for start, stop in lower_ranges:
        for u in range(start, stop + 1):
            upper[u] = u - 32
            lower[u - 32] = u
    return bytes(upper), bytes(lower)


# ISO 8859-1: a-z, and à-þ except the division sign ÷ (0xF7)
LATIN1 = _make_tables([(0x61, 0x7A), (0xE0, 0xF6), (0xF8, 0xFE)])
ASCII = _make_tables([(0x61, 0x7A)])

TABLES = {'latin1': LATIN1,
          'ascii': ASCII}


def get_tables(name=None):
    """
    Return the (uppercase, lowercase) translation tables for the case table
    `name`, by default the one configured under `case.table`.
    """
    return TABLES[name or config.CONFIG.case.table]


# ---------------------------------------------------------------------------- #

def uppercase(string, table=None):
    """
    Return a copy of `string`, with all lowercase letters translated to
    uppercase, including the accented letters of ISO Latin-1 (8859-1) when
    using the 'latin1' table.

    Examples
    --------
    >>> uppercase(b'caf\\xe9')
    b'CAF\\xc9'
    """
    return as_bytes(string).translate(get_tables(table)[0])


def lowercase(string, table=None):
    """
    Return a copy of `string`, with all uppercase letters translated to
    lowercase.
    """
    return as_bytes(string).translate(get_tables(table)[1])


def capitalize(string, table=None):
    """Return a copy of `string`, with the first unit set to uppercase."""
    string = as_bytes(string)
    return uppercase(string[:1], table) + string[1:]


def uncapitalize(string, table=None):
    """Return a copy of `string`, with the first unit set to lowercase."""
    string = as_bytes(string)
    return lowercase(string[:1], table) + string[1:]
