import collections.abc

from .error import MissingContextError, RecordError
from .introspection import is_array
from .operation import (
    anything,
    convert,
    describe_contract,
    expect_type,
    provide_missing,
)
from .record import Record
from .typeref import resolve_type_name


@describe_contract('type name or sequence of type names')
def _as_expected_type_names(v):
    if is_array(v):
        return tuple(resolve_type_name(t) for t in v)
    return resolve_type_name(v)


class DiagnosticContext(Record):
    '''Information about the failed type check used to render the message

    `expected_type_name` is a string when one type was expected and a tuple of
    strings when the value was checked against several types.

    '''
    context_name = provide_missing(None)
    value_name = anything
    value = anything
    expected_type_name = convert(_as_expected_type_names)
    found_type_name = expect_type(str)
    message_suffix = provide_missing(None)

    @property
    def is_multi_type(self):
        return isinstance(self.expected_type_name, tuple)


def multi_types_to_string(types) -> str:
    '''"`int`, `str`, ..." from [int, 'str', ...]'''
    return ', '.join('`{}`'.format(resolve_type_name(t)) for t in types)


def _get_context(ctx):
    if isinstance(ctx, DiagnosticContext):
        return ctx
    if not isinstance(ctx, collections.abc.Mapping):
        raise MissingContextError(
            'context', 'Diagnostic context should be a mapping', value=ctx
        )
    try:
        return DiagnosticContext(ctx)
    except RecordError as err:
        raise MissingContextError('context', err) from err


def format_diagnostic_message(ctx) -> str:
    '''Render the default message from the diagnostic context

    `ctx` is a `DiagnosticContext` or a mapping with the same keys.

    '''
    ctx = _get_context(ctx)
    if ctx.is_multi_type:
        types_copy = 'of type'
        expected = multi_types_to_string(ctx.expected_type_name)
    else:
        types_copy = 'of one of the types'
        expected = ctx.expected_type_name

    return (
        ('`{}.'.format(ctx.context_name) if ctx.context_name else '`')
        + '{}` is not {}: {}.  '.format(ctx.value_name, types_copy, expected)
        + 'Type received: {}.  Value: {};'.format(ctx.found_type_name, ctx.value)
        + ('  {};'.format(ctx.message_suffix) if ctx.message_suffix else '')
    )
