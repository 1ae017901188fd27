"""
Exceptions raised by byte string operations.
"""


# ---------------------------------------------------------------------------- #
class ByteStringError(Exception):
    """Base class for all exceptions raised by `bytekit`."""


class NotFound(ByteStringError, LookupError):
    """
    Exception used when a unit or substring does not occur within the searched
    range.
    """

    def __init__(self, sought, string, start=None, stop=None):
        super().__init__(sought, string, start, stop)

    def __str__(self):
        sought, string, start, stop = self.args
        where = ''
        if start is not None or stop is not None:
            start = 0 if start is None else start
            stop = len(string) if stop is None else stop
            where = f' in range [{start}, {stop})'

        return f'{sought!r} not found in {_truncate(string)!r}{where}.'


class InvalidArgument(ByteStringError, ValueError):
    """
    Exception used when an index or length does not designate a valid position
    or range in a string or buffer.
    """


class InvalidString(ByteStringError, ValueError):
    """
    Exception used when a string cannot be parsed as the requested value.
    """

    def __init__(self, string, kind):
        super().__init__(string, kind)

    def __str__(self):
        string, kind = self.args
        return f'Could not parse {kind} from {_truncate(string)!r}.'


# ---------------------------------------------------------------------------- #
def _truncate(string, size=50, dots=b'...'):
    if len(string) <= size:
        return string
    return bytes(string[:size - len(dots)]) + dots
