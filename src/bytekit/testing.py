# Flexibly parametrize functional tests

"""
Tools to help building parametrized unit tests for the functions in this
package.

Examples
--------
To generate a bunch of tests with various call signatures of the function
`slice`, use
>>> from bytekit.testing import Expected, Throws, mock
>>> test_slice = Expected(slice)({
...     mock.slice(b'abcdef', -2):          b'ef',
...     mock.slice(b'abcdef', last=-2):     b'abcd',
...     mock.slice(b'abcdef', 4, 100):      b'ef',
... })

This will generate the same tests as the following code block, but is arguably
much neater
>>> @pytest.mark.parametrize(
...     'string, first, last, expected',
...     [(b'abcdef', -2, None, b'ef'),
...      (b'abcdef', None, -2, b'abcd'),
...      (b'abcdef', 4, 100, b'ef')]
... )
... def test_slice(string, first, last, expected):
...     assert slice(string, first, last) == expected
"""

# std
import difflib
from contextlib import nullcontext
from collections import abc, defaultdict
from inspect import Parameter, Signature, _ParameterKind, signature

# third-party
import pytest
from loguru import logger


# ---------------------------------------------------------------------------- #
POS, PKW, VAR, KWO, VKW = _ParameterKind


# ---------------------------------------------------------------------------- #

def to_tuple(obj):
    return obj if isinstance(obj, tuple) else (obj, )


def echo(obj):
    return obj


def show_diff(actual, expected):
    """
    Diff helper function. Returns a string containing the unified diff of two
    multiline strings.
    """

    return '\n'.join(difflib.ndiff(actual.splitlines(True),
                                   expected.splitlines(True)))


# ---------------------------------------------------------------------------- #
class WrapArgs:
    def __init__(self, *args, **kws):
        self.args, self.kws = args, tuple(kws.items())

    def __iter__(self):
        return iter((self.args, self.kws))

    def __str__(self):
        return str((self.args, dict(self.kws)))


class Mock:
    def __getattr__(self, _):
        return WrapArgs

    def __call__(self, *args, **kws):
        return WrapArgs(*args, **kws)


mock = Mock()


class Throws:
    """Signify that a test case is expected to raise `error`."""

    def __init__(self, error=Exception):
        self.error = error

    def __repr__(self):
        return f'Throws({self.error.__name__})'


class PASS:
    """
    Signify that any result from a test is permissable, as long as it passes
    without exception.
    """


# ---------------------------------------------------------------------------- #
class Expected:
    """
    Testing helper for checking expected return values for functions.
    Allows one to build simple parametrized tests of a function without
    needing to explicitly type an exhaustive combination of exact function
    parameters.

    Calling the object with a mapping of call specs (built with `mock`) to
    expected results constructs a test function with the same signature as
    the function under test, with a single parameter `expected` added at the
    end, and parametrizes it over all cases. Assigning the result to a
    variable name starting with 'test_' is important for pytest test discovery
    to work correctly.
    """

    def __init__(self, func, transform=echo, **kws):
        self.func = func
        self.kws = kws
        self.transform = transform
        self.sig = signature(func)
        self.kinds = {name: par.kind for name, par in self.sig.parameters.items()}

    def __call__(self, cases, *args, **kws):
        """
        Create the test and parametrize it.

        Parameters
        ----------
        cases : Mapping or Iterable
            Either a mapping of call spec to expected result, or a sequence of
            (call spec, expected) pairs. A call spec is either a `WrapArgs`
            object (see `mock`), a tuple of positional arguments, or a single
            positional argument.
        """
        if isinstance(cases, abc.Mapping):
            cases = cases.items()

        values = self.get_args(cases)
        names = list(values)
        return pytest.mark.parametrize(
            names, list(zip(*values.values())), *args, **kws
        )(self.make_test())

    def run(self, items, *args, **kws):
        """For simple tests, merely check if the function succeeds."""
        return self([(item, PASS) for item in items], *args, **kws)

    def bind(self, *args, **kws):
        bound = self.sig.bind(*args, **kws)
        bound.apply_defaults()
        return bound.arguments

    def get_args(self, cases):
        # loop through the cases and create the full parameter spec for the
        # function by binding each call pattern to the function signature.
        # Return a dict keyed on parameter names containing lists of parameter
        # values for each call.
        values = defaultdict(list)
        for spec, expected in cases:
            if not isinstance(spec, WrapArgs):
                # simple construction without use of mock function.
                # ==> No keyword values in arg spec
                spec = WrapArgs(*to_tuple(spec))

            args, kws = spec
            for name, val in self.bind(*args, **{**self.kws, **dict(kws)}).items():
                values[name].append(val)

            # signature of created test function has 1 extra parameter
            values['expected'].append(expected)

        return values

    def make_test(self):
        # -------------------------------------------------------------------- #
        def test(**kws):
            # pop expected answer from kws dict
            expected = kws.pop('expected')

            args = [kws.pop(name) for name, kind in self.kinds.items()
                    if kind in (POS, PKW)]
            for name, kind in self.kinds.items():
                if kind is VAR:
                    args.extend(kws.pop(name))
                elif kind is VKW:
                    kws.update(kws.pop(name))

            logger.debug('passing to {:s}: {!s}; {!s}',
                         self.func.__name__, args, kws)

            ctx = nullcontext()
            if isinstance(expected, Throws):
                ctx = pytest.raises(expected.error)

            with ctx:
                answer = self.transform(self.func(*args, **kws))

            if (expected is PASS) or not isinstance(ctx, nullcontext):
                return

            expected = self.transform(expected)
            # NOTE: explicitly assigning answer here so that pytest
            # introspection of locals in this scope works when producing the
            # failure report
            if answer == expected:
                return

            message = (f'Result from function {self.func.__name__!r} is not '
                       f'equal to expected answer!'
                       f'\nRESULT:  \n{answer!r}'
                       f'\nEXPECTED:\n{expected!r}')
            if isinstance(answer, bytes) and isinstance(expected, bytes):
                message += f'\nDIFF\n{show_diff(repr(answer), repr(expected))}'

            raise AssertionError(message)

        # -------------------------------------------------------------------- #
        # Override signature to add `expected` parameter
        params = [par.replace(default=par.empty, kind=PKW)
                  for par in self.sig.parameters.values()]
        params.append(Parameter('expected', KWO))
        test.__signature__ = Signature(params)
        test.__name__ = f'test_{self.func.__name__}'

        return test


class expected:
    """
    Decorator form of `Expected`.

    Examples
    --------
    >>> @expected({
    ...     b'a,b':     [b'a', b'b'],
    ...     b'':        []
    ... })
    ... def comma_split(string):
    ...     return nsplit(string, b',')
    """

    def __init__(self, cases, *args, **kws):
        self.cases = cases
        self.args = args
        self.kws = kws

    def __call__(self, func):
        return Expected(func, **self.kws)(self.cases, *self.args)
