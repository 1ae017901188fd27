# pylint: disable=missing-module-docstring
# pylint: disable=missing-function-docstring

# third-party
import pytest

# local
from bytekit.testing import Expected, Throws, mock
from bytekit import (Buffer, InvalidArgument, as_bytes, blit, copy, create,
                     fill, get, init, length, make, set, sub)


# ---------------------------------------------------------------------------- #
test_get = Expected(get)({
    mock.get(b'abc', 0):        97,
    mock.get(b'abc', 2):        99,
    mock.get(b'abc', 3):        Throws(InvalidArgument),
    mock.get(b'abc', -1):       Throws(InvalidArgument),
    mock.get(b'', 0):           Throws(InvalidArgument),
})

test_sub = Expected(sub)({
    mock.sub(b'abcdef', 1, 3):  b'bcd',
    mock.sub(b'abcdef', 0, 0):  b'',
    mock.sub(b'abcdef', 6, 0):  b'',
    mock.sub(b'abcdef', 0, 6):  b'abcdef',
    mock.sub(b'abcdef', 4, 3):  Throws(InvalidArgument),
    mock.sub(b'abcdef', -1, 2): Throws(InvalidArgument),
    mock.sub(b'abcdef', 1, -1): Throws(InvalidArgument),
})

test_make = Expected(make)({
    mock.make(3, b'z'):         b'zzz',
    mock.make(0, b'z'):         b'',
    mock.make(2, 0):            b'\x00\x00',
    mock.make(-1, b'z'):        Throws(InvalidArgument),
})

test_init = Expected(init)({
    mock.init(4, lambda i: 48 + i):     b'0123',
    mock.init(0, lambda i: 0):          b'',
    mock.init(-2, lambda i: 0):         Throws(InvalidArgument),
})

test_length = Expected(length)({
    b'':        0,
    b'abc':     3,
})


def test_create():
    buf = create(3)
    assert isinstance(buf, Buffer)
    assert buf.freeze() == b'\x00\x00\x00'

    with pytest.raises(InvalidArgument):
        create(-1)


def test_copy():
    string = b'abc'
    assert copy(string) == string
    assert copy(bytearray(string)) == string
    assert isinstance(copy(bytearray(string)), bytes)


def test_set():
    buf = Buffer(b'hello')
    set(buf, 0, b'j')
    buf.set(4, ord('y'))
    assert buf.freeze() == b'jelly'

    with pytest.raises(InvalidArgument):
        buf.set(5, b'!')

    with pytest.raises(InvalidArgument):
        set(buf, -1, b'!')


def test_get_method():
    buf = Buffer(b'abc')
    assert buf.get(1) == 98
    with pytest.raises(InvalidArgument):
        buf.get(-1)


def test_fill():
    buf = Buffer(b'abcdef')
    fill(buf, 1, 3, b'-')
    assert buf == b'a---ef'

    buf.fill(0, 0, b'x')
    assert buf == b'a---ef'

    buf.fill(4, 2, b'x')
    assert buf == b'a---xx'

    with pytest.raises(InvalidArgument):
        buf.fill(4, 3, b'x')

    # failed fill leaves the buffer untouched
    assert buf == b'a---xx'


def test_blit():
    src, dst = b'hello', Buffer(b'..........')
    blit(src, 1, dst, 3, 3)
    assert dst == b'...ell....'

    with pytest.raises(InvalidArgument):
        blit(src, 3, dst, 0, 3)

    with pytest.raises(InvalidArgument):
        blit(src, 0, dst, 8, 3)


@pytest.mark.parametrize(
    'srcoff, dstoff, expected',
    [(0, 2, b'ababcdgh'),
     (2, 0, b'cdefefgh'),
     (0, 0, b'abcdefgh')]
)
def test_blit_overlapping(srcoff, dstoff, expected):
    buf = Buffer(b'abcdefgh')
    buf.blit(srcoff, buf, dstoff, 4)
    assert buf == expected


def test_as_bytes_identity():
    string = b'abc'
    assert as_bytes(string) is string

    with pytest.raises(TypeError):
        as_bytes('abc')


def test_buffer_repr():
    assert repr(Buffer(b'ab')) == "Buffer(b'ab')"


@pytest.mark.parametrize(
    'resize',
    [lambda buf: buf.append(0),
     lambda buf: buf.extend(b'xy'),
     lambda buf: buf.insert(0, 1),
     lambda buf: buf.pop(),
     lambda buf: buf.remove(97),
     lambda buf: buf.clear(),
     lambda buf: buf.__delitem__(0),
     lambda buf: buf.__iadd__(b'x'),
     lambda buf: buf.__setitem__(slice(0, 1), b'xyz'),
     lambda buf: buf.__setitem__(slice(0, 3), b'')]
)
def test_buffer_fixed_size(resize):
    buf = Buffer(b'abc')
    with pytest.raises(InvalidArgument):
        resize(buf)

    assert buf == b'abc'


def test_buffer_slice_assignment_same_length():
    buf = Buffer(b'abcdef')
    buf[1:3] = b'XY'
    buf[3:5] = [48, 49]
    assert buf == b'aXY01f'
