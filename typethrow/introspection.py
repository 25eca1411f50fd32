'''Runtime value introspection and partial application primitives'''
import functools
import typing


def type_of(value) -> str:
    return type(value).__name__


def is_string(v) -> bool:
    return isinstance(v, str)


def is_type(v) -> bool:
    return isinstance(v, type)


def is_function(v) -> bool:
    return callable(v)


def is_array(v) -> bool:
    return isinstance(v, (list, tuple))


def is_defined_and_not_null(v) -> bool:
    return v is not None


class Curried:
    '''Fixed-arity argument accumulator

    Each call adds its arguments to the already bound ones. When at least
    `arity` positional arguments are bound the wrapped function is called with
    all of them, otherwise a new `Curried` waiting for the rest is returned.
    Calling without arguments returns the same object.

    '''

    def __init__(self, fn: typing.Callable, arity: int, args=(), kwargs=None):
        if arity < 1:
            raise ValueError({'info': 'arity should be positive', 'arity': arity})
        self._fn = fn
        self._arity = arity
        self._args = tuple(args)
        self._kwargs = kwargs or {}
        functools.update_wrapper(self, fn, updated=())

    @property
    def remaining(self):
        return max(self._arity - len(self._args), 0)

    def __call__(self, *args, **kwargs):
        if not args and not kwargs:
            return self

        args = self._args + args
        kwargs = {**self._kwargs, **kwargs}
        if len(args) >= self._arity:
            return self._fn(*args, **kwargs)
        return Curried(self._fn, self._arity, args, kwargs)

    def __repr__(self):
        name = getattr(self._fn, '__name__', repr(self._fn))
        return '{}({}, {} of {})'.format(
            self.__class__.__name__, name, len(self._args), self._arity
        )


def curry_n(arity: int, fn: typing.Callable) -> Curried:
    return Curried(fn, arity)
