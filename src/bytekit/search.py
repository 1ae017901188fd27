"""
Locate code units and substrings in byte strings.
"""

# relative
from .errors import InvalidArgument, NotFound
from .buffer import as_bytes, as_unit


# ---------------------------------------------------------------------------- #
# Single units

def index(string, unit):
    """
    Return the position of the leftmost occurrence of `unit` in `string`.

    Raises
    ------
    NotFound
        If `unit` does not occur in `string`.
    """
    return index_from(string, 0, unit)


def index_from(string, start, unit):
    """
    Return the smallest position greater or equal to `start` at which `unit`
    occurs in `string`.

    Parameters
    ----------
    string : bytes
        String to search.
    start : int
        Position at which to start the search. Values outside the string are
        clipped, so that an empty search range simply finds nothing.
    unit : int or bytes
        The code unit to look for.

    Examples
    --------
    >>> index_from(b'abcabc', 1, b'a')
    3

    Returns
    -------
    int

    Raises
    ------
    NotFound
        If `unit` does not occur in `string[start:]`.
    """
    string = as_bytes(string)
    start = min(max(start, 0), len(string))
    if (i := string.find(as_unit(unit), start)) == -1:
        raise NotFound(_show(unit), string, start)
    return i


def rindex(string, unit):
    """
    Return the position of the rightmost occurrence of `unit` in `string`.

    Raises
    ------
    NotFound
        If `unit` does not occur in `string`.
    """
    return rindex_from(string, len(string) - 1, unit)


def rindex_from(string, stop, unit):
    """
    Return the largest position less or equal to `stop` at which `unit`
    occurs in `string`. Values of `stop` outside the string are clipped.

    Raises
    ------
    NotFound
        If `unit` does not occur in `string[:stop + 1]`.
    """
    string = as_bytes(string)
    stop = min(max(stop, -1), len(string) - 1)
    if (i := string.rfind(as_unit(unit), 0, stop + 1)) == -1:
        raise NotFound(_show(unit), string, 0, stop + 1)
    return i


def contains(string, unit):
    """Test whether `unit` appears in `string`."""
    return as_unit(unit) in as_bytes(string)


def contains_from(string, start, unit):
    """
    Test whether `unit` appears in `string` between position `start` and the
    end of the string.

    Raises
    ------
    InvalidArgument
        If `start` is not a valid index of `string`.
    """
    string = as_bytes(string)
    _check_bound(string, start, 'start')
    return string.find(as_unit(unit), start) != -1


def rcontains_from(string, stop, unit):
    """
    Test whether `unit` appears in `string` between the beginning of the string
    and position `stop` (inclusive).

    Raises
    ------
    InvalidArgument
        If `stop` is not a valid index of `string`.
    """
    string = as_bytes(string)
    _check_bound(string, stop, 'stop')
    return string.rfind(as_unit(unit), 0, stop + 1) != -1


def _check_bound(string, i, name):
    if not 0 <= i < len(string):
        raise InvalidArgument(
            f'Invalid {name} index {i} for string of length {len(string)}.'
        )


def _show(unit):
    return bytes((as_unit(unit), ))


# ---------------------------------------------------------------------------- #
# Substrings

def find(string, sub):
    """
    Return the starting index of the first occurrence of the string `sub`
    within `string`. The empty string is found at position 0 of any string.

    Examples
    --------
    >>> find(b'hello world', b'world')
    6

    Raises
    ------
    NotFound
        If `sub` is not a substring of `string`.
    """
    string, sub = as_bytes(string), as_bytes(sub)
    if (i := string.find(sub)) == -1:
        raise NotFound(sub, string)
    return i


def exists(string, sub):
    """Test whether `sub` is a substring of `string`."""
    try:
        find(string, sub)
    except NotFound:
        return False
    return True


def starts_with(string, prefix):
    """Test whether `string` starts with `prefix`."""
    string, prefix = as_bytes(string), as_bytes(prefix)
    return string[:len(prefix)] == prefix


def ends_with(string, suffix):
    """Test whether `string` ends with `suffix`."""
    string, suffix = as_bytes(string), as_bytes(suffix)
    return len(suffix) <= len(string) and \
        string[len(string) - len(suffix):] == suffix
