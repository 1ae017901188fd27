"""
Primitive fixed-length byte buffers with checked and unchecked accessors.

Everything else in `bytekit` treats strings as immutable `bytes`. The
`Buffer` type is the one place where in-place mutation happens: unit
assignment, range fill and range copy.
"""

# pylint: disable=redefined-builtin

# std
import numbers

# relative
from .errors import InvalidArgument


# ---------------------------------------------------------------------------- #
UNIT_MAX = 255


# ---------------------------------------------------------------------------- #
# Type coercion helpers

def as_bytes(string):
    """
    Return `string` as an immutable `bytes` object. Objects that are already
    `bytes` are returned unchanged (the very same object).

    Raises
    ------
    TypeError
        If `string` is a `str` or not bytes-like.
    """
    if isinstance(string, bytes):
        return string

    if isinstance(string, (bytearray, memoryview)):
        return bytes(string)

    raise TypeError(
        f'Expected a bytes-like object, not {type(string).__name__!r}: '
        f'{string!r}.'
    )


def as_unit(unit):
    """
    Resolve a code unit given as an integer in range(256), or a bytes object of
    length 1, to an integer.
    """
    if isinstance(unit, numbers.Integral) and not isinstance(unit, bool):
        if 0 <= unit <= UNIT_MAX:
            return int(unit)
        raise ValueError(f'Code unit out of range(256): {unit}.')

    if isinstance(unit, (bytes, bytearray)):
        if len(unit) == 1:
            return unit[0]
        raise ValueError(f'Expected a single code unit, got {unit!r}.')

    raise TypeError(
        f'Invalid object of type {type(unit).__name__!r} for code unit: {unit!r}.'
    )


def _check_index(string, i):
    if not (isinstance(i, numbers.Integral) and 0 <= i < len(string)):
        raise InvalidArgument(
            f'Index out of bounds: {i!r} for string of length {len(string)}.'
        )
    return int(i)


def _check_range(string, start, length):
    if not (0 <= start and 0 <= length and start + length <= len(string)):
        raise InvalidArgument(
            f'Invalid range: start={start}, length={length} for string of '
            f'length {len(string)}.'
        )


# ---------------------------------------------------------------------------- #
class Buffer(bytearray):
    """
    Fixed-size mutable buffer of 8-bit code units. Units can be replaced in
    place, but operations that would change the length of the buffer raise
    `InvalidArgument`.

    Examples
    --------
    >>> buf = Buffer(b'hello')
    >>> buf.set(0, b'j')
    >>> buf.freeze()
    b'jello'
    """

    # length is fixed at construction: resizing operations are refused
    def _resize(self, *_, **__):
        raise InvalidArgument(f'{type(self).__name__} has a fixed size of '
                              f'{len(self)}.')

    append = extend = insert = pop = remove = clear = _resize
    __delitem__ = __iadd__ = __imul__ = _resize

    def __setitem__(self, key, value):
        if isinstance(key, slice):
            if not isinstance(value, (bytes, bytearray)):
                value = bytes(list(value))
            if len(value) != len(range(*key.indices(len(self)))):
                self._resize()

        super().__setitem__(key, value)

    def __repr__(self):
        return f'{type(self).__name__}({bytes(self)!r})'

    def freeze(self):
        """Contents of the buffer as an immutable `bytes` object."""
        return bytes(self)

    # checked
    def get(self, i):
        return self[_check_index(self, i)]

    def set(self, i, unit):
        self[_check_index(self, i)] = as_unit(unit)

    def fill(self, start, length, unit):
        """
        Replace units `start` to `start + length - 1` by `unit`, in place.

        Raises
        ------
        InvalidArgument
            If `start` and `length` do not designate a valid range.
        """
        _check_range(self, start, length)
        self.unsafe_fill(start, length, unit)

    def blit(self, srcoff, dst, dstoff, length):
        """
        Copy `length` units from this buffer, starting at `srcoff`, into the
        buffer `dst`, starting at `dstoff`. Works correctly when `dst` is this
        same buffer and the two ranges overlap.

        Raises
        ------
        InvalidArgument
            If either of the source or destination ranges is invalid.
        """
        _check_range(self, srcoff, length)
        _check_range(dst, dstoff, length)
        self.unsafe_blit(srcoff, dst, dstoff, length)

    # unchecked
    def unsafe_get(self, i):
        return self[i]

    def unsafe_set(self, i, unit):
        self[i] = unit

    def unsafe_fill(self, start, length, unit):
        self[start:start + length] = bytes((as_unit(unit), )) * length

    def unsafe_blit(self, srcoff, dst, dstoff, length):
        # slicing copies first, so overlapping ranges are safe
        dst[dstoff:dstoff + length] = self[srcoff:srcoff + length]


# ---------------------------------------------------------------------------- #
# Module level interface

def length(string):
    return len(string)


def get(string, i):
    """
    Return the unit at position `i` of `string`.

    Raises
    ------
    InvalidArgument
        If `i` is outside the range 0 to len(string) - 1.
    """
    return string[_check_index(string, i)]


def set(buffer, i, unit):
    """
    Replace the unit at position `i` of `buffer` by `unit`, in place.
    """
    buffer[_check_index(buffer, i)] = as_unit(unit)


def unsafe_get(string, i):
    return string[i]


def unsafe_set(buffer, i, unit):
    buffer[i] = unit


def create(n):
    """A fresh (zero-filled) buffer of length `n`."""
    if n < 0:
        raise InvalidArgument(f'Negative buffer length: {n}.')
    return Buffer(n)


def make(n, unit):
    """
    Return a fresh string of length `n`, filled with `unit`.

    Examples
    --------
    >>> make(3, b'z')
    b'zzz'
    """
    if n < 0:
        raise InvalidArgument(f'Negative string length: {n}.')
    return bytes((as_unit(unit), )) * n


def init(n, func):
    """
    Return the string of length `n` with units `func(0)`, `func(1)`, ...
    `func(n - 1)`.
    """
    if n < 0:
        raise InvalidArgument(f'Negative string length: {n}.')
    return bytes(as_unit(func(i)) for i in range(n))


def copy(string):
    """Return a copy of the given string."""
    return bytes(as_bytes(string))


def sub(string, start, length):
    """
    Return a fresh string of length `length`, containing the units `start` to
    `start + length - 1` of `string`.

    Raises
    ------
    InvalidArgument
        If `start` and `length` do not designate a valid substring of `string`.
    """
    string = as_bytes(string)
    _check_range(string, start, length)
    return string[start:start + length]


def fill(buffer, start, length, unit):
    _check_range(buffer, start, length)
    unsafe_fill(buffer, start, length, unit)


def unsafe_fill(buffer, start, length, unit):
    buffer[start:start + length] = bytes((as_unit(unit), )) * length


def blit(src, srcoff, dst, dstoff, length):
    """
    Copy `length` units from `src`, starting at `srcoff`, to the buffer `dst`,
    starting at `dstoff`.

    Raises
    ------
    InvalidArgument
        If either of the source or destination ranges is invalid.
    """
    _check_range(src, srcoff, length)
    _check_range(dst, dstoff, length)
    unsafe_blit(src, srcoff, dst, dstoff, length)


def unsafe_blit(src, srcoff, dst, dstoff, length):
    dst[dstoff:dstoff + length] = src[srcoff:srcoff + length]
