# pylint: disable=missing-module-docstring
# pylint: disable=missing-function-docstring

# local
from bytekit import nsplit, strip
from bytekit.testing import Expected, Throws, expected, mock


# ---------------------------------------------------------------------------- #
def fun1(a, b=2, *args, c=3, **kws):
    return a, b, c, args, kws


def throws1():
    raise ValueError()


test_fun1 = Expected(fun1)({
    mock(1):            (1, 2, 3, (), {}),
    mock(1, 1):         (1, 1, 3, (), {}),
    mock(1, b=1):       (1, 1, 3, (), {}),
    mock(1, 1, 1):      (1, 1, 3, (1,), {}),
    mock(1, 1, 1, 1):   (1, 1, 3, (1, 1), {}),
    mock(1, 1, c=1):    (1, 1, 1, (), {}),
    mock(1, x=1):       (1, 2, 3, (), {'x': 1}),
})

test_throws = Expected(throws1)({(): Throws(ValueError)})

# keyword defaults applied to all cases
test_strip_x = Expected(strip, chars=b'x')({
    b'xxhixx':  b'hi',
    b'hi':      b'hi',
})

test_nsplit_run = Expected(nsplit).run([
    mock(b'a,b', b','),
    mock(b'', b','),
])


@expected({
    b'a,b':     [b'a', b'b'],
    b'':        []
})
def comma_split(string):
    return nsplit(string, b',')


test_comma_split = comma_split
