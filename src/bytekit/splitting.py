"""
Split byte strings around separators, and join them back together.
"""

# third-party
from loguru import logger

# relative
from . import config
from .search import find
from .slicing import slice
from .buffer import as_bytes
from .errors import InvalidArgument


# ---------------------------------------------------------------------------- #
EMPTY_SEPARATOR_POLICIES = ('error', 'units')


# ---------------------------------------------------------------------------- #
def split(string, sep):
    """
    Split the string `string` around the first occurrence of `sep`.

    Examples
    --------
    >>> split(b'key=value=1', b'=')
    (b'key', b'value=1')

    Returns
    -------
    tuple of bytes
        The text before and the text after the separator.

    Raises
    ------
    NotFound
        If the separator does not occur in `string`.
    """
    string, sep = as_bytes(string), as_bytes(sep)
    i = find(string, sep)
    return slice(string, 0, i), slice(string, i + len(sep))


def nsplit(string, sep, policy=None):
    """
    Split `string` into the list of substrings that are separated by `sep`.

    Parameters
    ----------
    string : bytes
        The string to split. An empty string produces an empty list.
    sep : bytes
        Separator.
    policy : {'error', 'units'}, optional
        How to handle an empty separator. 'error' raises `InvalidArgument`,
        'units' splits the string into its individual units. By default, the
        value configured under `nsplit.empty_separator`.

    Examples
    --------
    >>> nsplit(b'a,b,,c', b',')
    [b'a', b'b', b'', b'c']
    >>> nsplit(b'', b',')
    []

    Returns
    -------
    list of bytes
    """
    string, sep = as_bytes(string), as_bytes(sep)
    if not string:
        return []

    if not sep:
        return _split_empty(string, policy)

    # running offset: each unit is scanned and copied once
    parts, pos = [], 0
    while (i := string.find(sep, pos)) != -1:
        parts.append(string[pos:i])
        pos = i + len(sep)

    parts.append(string[pos:])
    return parts


def _split_empty(string, policy):
    policy = policy or config.CONFIG.nsplit.empty_separator
    if policy not in EMPTY_SEPARATOR_POLICIES:
        raise ValueError(f'Invalid policy for empty separator: {policy!r}. '
                         f'Valid choices are: {EMPTY_SEPARATOR_POLICIES}.')

    logger.debug('Empty separator for nsplit: policy is {!r}.', policy)
    if policy == 'error':
        raise InvalidArgument('Cannot split a string on an empty separator.')

    return [string[i:i + 1] for i in range(len(string))]


def join(sep, parts):
    """
    Concatenate the strings in `parts`, inserting the separator `sep` between
    each consecutive pair.

    Examples
    --------
    >>> join(b',', [b'a', b'b', b'', b'c'])
    b'a,b,,c'
    """
    return as_bytes(sep).join(map(as_bytes, parts))


# alias
concat = join
