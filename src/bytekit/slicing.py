"""
Index-normalizing slices and trimming.

Unlike the checked `buffer.sub`, none of the functions in this module ever
raise for out-of-range bounds: indices are wrapped (if negative) and then
clipped to the string.
"""

# pylint: disable=redefined-builtin

# relative
from . import config
from .buffer import as_bytes


# ---------------------------------------------------------------------------- #
def _normalize(i, n):
    # negative indices count from the end, then clip into [0, n]
    if i < 0:
        i += n
    return min(max(i, 0), n)


def slice(string, first=None, last=None):
    """
    Return the units of `string` at positions `first` to `last - 1`.

    Parameters
    ----------
    string : bytes
        The string to slice.
    first : int, optional
        Index of the first unit to include, by default 0.
    last : int, optional
        Index one past the last unit to include, by default `len(string)`.

    Negative indices are interpreted as counting from the end of the string.
    This function never raises: indices that are out of bounds are clipped.

    Examples
    --------
    >>> slice(b'abcdef', -2)
    b'ef'
    >>> slice(b'abcdef', last=-2)
    b'abcd'
    >>> slice(b'abcdef', 4, 100)
    b'ef'

    Returns
    -------
    bytes
        The sliced string. When no bounds are given, this is `string` itself.
    """
    string = as_bytes(string)
    n = len(string)
    i = 0 if first is None else _normalize(first, n)
    j = n if last is None else _normalize(last, n)

    if i == 0 and j == n:
        return string

    if i >= j:
        return b''

    return string[i:j]


def lchop(string):
    """
    Return the string without its first unit. The empty string is returned
    unchanged.
    """
    return slice(string, 1) if string else as_bytes(string)


def rchop(string):
    """
    Return the string without its last unit. The empty string is returned
    unchanged.
    """
    return slice(string, 0, -1) if string else as_bytes(string)


def strip(string, chars=None):
    """
    Remove units in the set `chars` from the beginning and end of `string`.

    Parameters
    ----------
    string : bytes
        The string to strip.
    chars : bytes, optional
        Set of units to remove. Order is irrelevant. By default the value
        configured under `strip.chars`, which ships as b' \\t\\r\\n'.

    Examples
    --------
    >>> strip(b' \\t hi \\n')
    b'hi'
    >>> strip(b'xxhixx', b'x')
    b'hi'

    Returns
    -------
    bytes
    """
    string = as_bytes(string)
    chars = frozenset(config.CONFIG.strip.chars if chars is None
                      else as_bytes(chars))

    n = len(string)
    first = next((i for i, u in enumerate(string) if u not in chars), n)
    last = next((i for i in range(n - 1, first - 1, -1)
                 if string[i] not in chars), first - 1)

    return slice(string, first, last + 1)
