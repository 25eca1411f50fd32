'''Assertion functions raising `TypeMismatchError` on unexpected value types

Throwers are built from a `ThrowerConfig` (message formatter and type checker)
and come in two arities:

- single type: `(context_name, value_name, value, type_ref, message_suffix=None)`

- several types: `(context_name, value_name, value, *type_refs)`

Curried variants accept the same arguments one or several at a time and run
the check once the first four are supplied.

'''
import functools
import typing

from .check import as_checker, default_checker, type_matches_any
from .error import TypeMismatchError
from .introspection import Curried, curry_n, type_of
from .message import DiagnosticContext, format_diagnostic_message
from .operation import convert, only_if, provide_missing
from .record import Record
from .typeref import resolve_type_name


class ThrowerConfig(Record):
    '''Message formatter and type checker used by throwers

    Missing fields are set to defaults: `format_diagnostic_message` and
    name-based matching. `checker` also accepts a `MatchPolicy` or its value.

    '''
    formatter = provide_missing(format_diagnostic_message) >> only_if(callable, 'callable')
    checker = provide_missing(default_checker) >> convert(as_checker)


def _get_config(config, formatter, checker) -> ThrowerConfig:
    if config is None:
        return ThrowerConfig(formatter=formatter, checker=checker)
    if formatter is not None or checker is not None:
        return config.replace(
            **{k: v for k, v in (('formatter', formatter), ('checker', checker)) if v is not None}
        )
    return config


def _raise_mismatch(config: ThrowerConfig, **fields):
    ctx = DiagnosticContext(fields)
    raise TypeMismatchError(config.formatter(ctx), ctx)


def build_single_type_thrower(
        formatter: typing.Callable = None,
        checker: typing.Callable = None,
        *,
        config: ThrowerConfig = None
):
    config = _get_config(config, formatter, checker)

    def error_if_not_type(context_name, value_name, value, type_ref, message_suffix=None):
        expected_type_name = resolve_type_name(type_ref)
        if config.checker(type_ref, value):
            return
        _raise_mismatch(
            config,
            context_name=context_name,
            value_name=value_name,
            value=value,
            expected_type_name=expected_type_name,
            found_type_name=type_of(value),
            message_suffix=message_suffix,
        )

    return error_if_not_type


def build_multi_type_thrower(
        formatter: typing.Callable = None,
        checker: typing.Callable = None,
        *,
        config: ThrowerConfig = None
):
    config = _get_config(config, formatter, checker)

    def error_if_not_types(context_name, value_name, value, *type_refs, message_suffix=None):
        expected_type_names = tuple(resolve_type_name(t) for t in type_refs)
        if type_matches_any(type_refs, value, config.checker):
            return
        _raise_mismatch(
            config,
            context_name=context_name,
            value_name=value_name,
            value=value,
            expected_type_name=expected_type_names,
            found_type_name=type_of(value),
            message_suffix=message_suffix,
        )

    return error_if_not_types


def build_single_type_thrower_curried(formatter=None, checker=None, *, config=None) -> Curried:
    return curry_n(4, build_single_type_thrower(formatter, checker, config=config))


def build_multi_type_thrower_curried(formatter=None, checker=None, *, config=None) -> Curried:
    return curry_n(4, build_multi_type_thrower(formatter, checker, config=config))


def build_type_first_thrower(formatter=None, checker=None, *, config=None) -> Curried:
    '''curried thrower taking `(type_ref, context_name, value_name, value)`'''
    error_if_not_type = build_single_type_thrower(formatter, checker, config=config)

    def error_unless_type(type_ref, context_name, value_name, value, message_suffix=None):
        error_if_not_type(context_name, value_name, value, type_ref, message_suffix)

    return curry_n(4, error_unless_type)


def context_type_thrower(context_name, formatter=None, checker=None, *, config=None):
    '''single type thrower with `context_name` bound'''
    return functools.partial(
        build_single_type_thrower(formatter, checker, config=config), context_name
    )


def context_types_thrower(context_name, formatter=None, checker=None, *, config=None):
    '''multi type thrower with `context_name` bound'''
    return functools.partial(
        build_multi_type_thrower(formatter, checker, config=config), context_name
    )


ensure_type = build_single_type_thrower()
ensure_types = build_multi_type_thrower()

error_if_not_type = build_single_type_thrower_curried()
error_if_not_types = build_multi_type_thrower_curried()
error_unless_type = build_type_first_thrower()
