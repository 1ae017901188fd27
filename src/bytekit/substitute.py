"""
Substring and per-unit substitution.
"""

# relative
from .search import find
from .slicing import slice
from .errors import NotFound
from .buffer import as_bytes


# ---------------------------------------------------------------------------- #
def replace(string, sub, by):
    """
    Substitute the first occurrence of `sub` in `string` by `by`.

    Parameters
    ----------
    string : bytes
        The string to modify.
    sub : bytes
        Substring to replace.
    by : bytes
        Replacement.

    Examples
    --------
    >>> replace(b'foobar', b'oo', b'XY')
    (True, b'fXYbar')
    >>> replace(b'foobar', b'zz', b'XY')
    (False, b'foobar')

    Returns
    -------
    replaced : bool
        Whether a substitution has taken place.
    result : bytes
        The new string, or `string` itself if `sub` was not found.
    """
    string, sub, by = as_bytes(string), as_bytes(sub), as_bytes(by)
    try:
        i = find(string, sub)
    except NotFound:
        return False, string

    return True, slice(string, 0, i) + by + slice(string, i + len(sub))


def replace_chars(func, string):
    """
    Return a string where each unit `u` of `string` has been replaced by the
    string `func(u)`.

    Examples
    --------
    >>> replace_chars(lambda u: b'_' if u == ord(' ') else bytes([u]), b'a b')
    b'a_b'
    """
    return b''.join(as_bytes(func(unit)) for unit in as_bytes(string))
