import pytest

from typethrow import (
    build_multi_type_thrower,
    build_multi_type_thrower_curried,
    build_single_type_thrower,
    build_single_type_thrower_curried,
    build_type_first_thrower,
    ByName,
    ByType,
    context_type_thrower,
    context_types_thrower,
    DiagnosticContext,
    ensure_type,
    ensure_types,
    error_if_not_type,
    error_if_not_types,
    error_unless_type,
    format_diagnostic_message,
    get_checker,
    InvalidTypeReferenceError,
    is_checkable_type_reference,
    matches_by_name,
    matches_by_name_or_instance,
    MatchPolicy,
    MissingContextError,
    multi_types_to_string,
    resolve_type_name,
    ThrowerConfig,
    type_matches,
    type_matches_any,
    TypeMismatchError,
)
from typethrow.error import RecordError
from typethrow.operation import as_basic_type


class Base:
    pass


class Derived(Base):
    pass


def _get_message(fn, *args):
    with pytest.raises(TypeMismatchError) as err:
        fn(*args)
    return str(err.value)


def test_resolve_type_name():
    assert resolve_type_name(str) == 'str'
    assert resolve_type_name('str') == 'str'
    assert resolve_type_name('Anything') == 'Anything'
    assert resolve_type_name(Derived) == 'Derived'
    assert resolve_type_name(ByType(list)) == 'list'
    assert resolve_type_name(resolve_type_name(dict)) == resolve_type_name(dict)

    for bad in (None, 5, object(), {'name': 'str'}):
        with pytest.raises(InvalidTypeReferenceError):
            resolve_type_name(bad)
        assert not is_checkable_type_reference(bad)

    with pytest.raises(TypeError, match='Value type received: int;  Value: 5'):
        resolve_type_name(5)

    assert is_checkable_type_reference(int)
    assert is_checkable_type_reference('int')
    assert ByName('int') == ByName('int')
    assert ByName('int') != ByType(int)
    assert len({ByType(int), ByType(int), ByName('int')}) == 2
    assert as_basic_type(ByType(int)) == 'int'


def test_type_matches():
    assert type_matches(int, 1)
    assert type_matches('int', 1)
    assert type_matches('NoneType', None)
    assert type_matches(type(None), None)
    assert not type_matches(str, 1)
    assert not type_matches(int, True)
    assert not type_matches(Base, Derived())

    with pytest.raises(InvalidTypeReferenceError):
        type_matches(None, 1)


def test_type_matches_nominal():
    nominal = MatchPolicy.NameOrInstance
    assert get_checker(nominal) is matches_by_name_or_instance
    assert get_checker('name') is matches_by_name

    assert type_matches(int, True, nominal)
    assert type_matches(Base, Derived(), nominal)
    assert type_matches(Derived, Derived(), matches_by_name_or_instance)
    assert type_matches('NoneType', None, nominal)
    assert not type_matches('Base', Derived(), nominal)
    assert not type_matches(object, None, nominal)
    assert type_matches(object, 1, nominal)


def test_type_matches_any():
    assert type_matches_any([str, list], [1])
    assert type_matches_any(['str', int], 1)
    assert not type_matches_any([str, list], 1)
    assert not type_matches_any([], 1)
    assert not type_matches_any([], None)
    assert type_matches_any([str, Base], Derived(), MatchPolicy.NameOrInstance)


def test_multi_types_to_string():
    types = [list, str, dict, bool]
    expected = '`list`, `str`, `dict`, `bool`'
    assert multi_types_to_string(types) == expected
    assert multi_types_to_string([t.__name__ for t in types]) == expected
    assert multi_types_to_string([list, 'str', dict, 'bool']) == expected
    assert multi_types_to_string([]) == ''


def test_format_diagnostic_message():
    result = format_diagnostic_message({
        'context_name': 'hello',
        'value_name': 'someString',
        'value': 'hello world',
        'expected_type_name': 'str',
        'found_type_name': 'str',
    })
    assert result == (
        '`hello.someString` is not of one of the types: str.  '
        'Type received: str.  Value: hello world;'
    )

    ctx = DiagnosticContext(
        value_name='v',
        value=1,
        expected_type_name=[list, 'dict'],
        found_type_name='int',
        message_suffix='use a list',
    )
    assert ctx.expected_type_name == ('list', 'dict')
    assert ctx.is_multi_type
    assert format_diagnostic_message(ctx) == (
        '`v` is not of type: `list`, `dict`.  '
        'Type received: int.  Value: 1;  use a list;'
    )


def test_format_diagnostic_message_missing_context():
    for ctx in (None, 0, 'ctx', {}, {'value_name': 'v'}):
        with pytest.raises(MissingContextError):
            format_diagnostic_message(ctx)

    with pytest.raises(MissingContextError):
        format_diagnostic_message({
            'value_name': 'v',
            'value': 1,
            'expected_type_name': None,
            'found_type_name': 'int',
        })


def test_single_type_thrower():
    throw = build_single_type_thrower(format_diagnostic_message)
    assert throw('Ctx', 'v', 'hi', str) is None

    message = _get_message(throw, 'Ctx', 'v', 42, str)
    assert '`Ctx.v`' in message
    assert 'str' in message
    assert 'int' in message
    assert message == (
        '`Ctx.v` is not of one of the types: str.  Type received: int.  Value: 42;'
    )

    message = _get_message(throw, None, 'v', None, 'int', 'int expected')
    assert message == (
        '`v` is not of one of the types: int.  Type received: NoneType.  '
        'Value: None;  int expected;'
    )

    with pytest.raises(InvalidTypeReferenceError):
        throw('Ctx', 'v', 42, 5)


def test_single_type_thrower_error_context():
    with pytest.raises(TypeMismatchError) as err:
        ensure_type('Ctx', 'v', [1], tuple)
    assert isinstance(err.value, TypeError)
    assert as_basic_type(err.value.context) == {
        'context_name': 'Ctx',
        'value_name': 'v',
        'value': [1],
        'expected_type_name': 'tuple',
        'found_type_name': 'list',
        'message_suffix': None,
    }


def test_multi_type_thrower():
    throw = build_multi_type_thrower(format_diagnostic_message)
    assert throw('Ctx', 'v', [1, 2], list, dict, bool) is None
    assert throw('Ctx', 'v', True, list, dict, bool) is None

    message = _get_message(throw, 'Ctx', 'v', 'x', list, dict, bool)
    assert message == (
        '`Ctx.v` is not of type: `list`, `dict`, `bool`.  '
        'Type received: str.  Value: x;'
    )
    assert message.index('`list`') < message.index('`dict`') < message.index('`bool`')

    message = _get_message(throw, 'Ctx', 'v', 'x')
    assert '`Ctx.v` is not of type: .' in message

    with pytest.raises(TypeMismatchError) as err:
        ensure_types('Ctx', 'v', 1, str, 'list', message_suffix='hint')
    assert err.value.context.expected_type_name == ('str', 'list')
    assert str(err.value).endswith('  hint;')


def test_curried_throwers():
    single = build_single_type_thrower_curried()
    assert single() is single
    assert callable(single('Ctx'))
    assert single('Ctx')('v')('hi')(str) is None
    assert _get_message(single('Ctx')('v')(42), str) == _get_message(ensure_type, 'Ctx', 'v', 42, str)
    assert _get_message(single('Ctx', 'v'), 42, str) == _get_message(single, 'Ctx', 'v', 42, str)

    multi = build_multi_type_thrower_curried()
    assert multi() is multi
    assert multi('Ctx')('v')([1])(tuple, list) is None
    assert (
        _get_message(multi('Ctx')('v'), 'x', list, dict, bool)
        == _get_message(ensure_types, 'Ctx', 'v', 'x', list, dict, bool)
    )


def test_default_throwers():
    assert error_if_not_type('SomeContext')('someValueName', list('someValue'), list) is None
    pytest.raises(
        TypeMismatchError,
        error_if_not_type('SomeContext'), 'someValueName', 'someValue', list
    )
    assert error_if_not_types('SomeContext')(
        'someValueName', list('someValue'), dict, list, bool
    ) is None
    pytest.raises(
        TypeMismatchError,
        error_if_not_types('SomeContext'), 'someValueName', 'someValue', list, dict, bool
    )


def test_context_throwers():
    check = context_type_thrower('SomeContext')
    assert check('v', 'x', str) is None
    assert '`SomeContext.v`' in _get_message(check, 'v', 1, str)

    check = context_types_thrower('SomeContext', lambda ctx: 'bad ' + ctx.value_name)
    assert check('v', 1, str, int) is None
    assert _get_message(check, 'v', 1.5, str, int) == 'bad v'


def test_type_first_thrower():
    assert error_unless_type(str)('Ctx')('v')('x') is None
    assert _get_message(error_unless_type(str, 'Ctx'), 'v', 1) == _get_message(ensure_type, 'Ctx', 'v', 1, str)

    check = build_type_first_thrower(checker=MatchPolicy.NameOrInstance)
    assert check(Base, 'Ctx', 'v', Derived()) is None


def test_custom_formatter_and_checker():
    def formatter(ctx):
        return '{}: {} != {}'.format(ctx.value_name, ctx.found_type_name, ctx.expected_type_name)

    throw = build_single_type_thrower(formatter)
    assert _get_message(throw, 'Ctx', 'v', 1, str) == 'v: int != str'

    nominal = build_single_type_thrower(checker=MatchPolicy.NameOrInstance)
    assert nominal('Ctx', 'v', True, int) is None
    assert nominal('Ctx', 'v', Derived(), Base) is None
    pytest.raises(TypeMismatchError, ensure_type, 'Ctx', 'v', True, int)
    pytest.raises(TypeMismatchError, nominal, 'Ctx', 'v', None, Base)

    always = build_multi_type_thrower(checker=lambda ref, value: True)
    assert always('Ctx', 'v', 1, str) is None


def test_thrower_config():
    config = ThrowerConfig()
    assert config.formatter is format_diagnostic_message
    assert config.checker is matches_by_name

    config = ThrowerConfig(checker=MatchPolicy.NameOrInstance)
    assert config.checker is matches_by_name_or_instance
    assert build_single_type_thrower(config=config)('Ctx', 'v', True, int) is None

    throw = build_single_type_thrower(lambda ctx: 'custom', config=config)
    assert throw('Ctx', 'v', True, int) is None
    assert _get_message(throw, 'Ctx', 'v', 'x', int) == 'custom'

    pytest.raises(RecordError, ThrowerConfig, formatter=5)
    pytest.raises(RecordError, ThrowerConfig, checker='bogus')
    assert ThrowerConfig(checker='name-or-instance').checker is matches_by_name_or_instance
    pytest.raises(RecordError, build_single_type_thrower, 'not callable')



def test_throwers_accept_any_value_name():
    with pytest.raises(TypeMismatchError) as err:
        ensure_type('Ctx', 0, 'x', int)
    assert str(err.value).startswith('`Ctx.0` is not of one of the types: int.')

    with pytest.raises(TypeMismatchError) as err:
        ensure_types('Ctx', None, 'x', int, list)
    assert str(err.value).startswith('`Ctx.None` is not of type: `int`, `list`.')

    throw = build_single_type_thrower(lambda ctx: 'bad {!r}'.format(ctx.value_name))
    assert _get_message(throw, 'Ctx', 3, 'x', int) == 'bad 3'


def test_checker_policy_names():
    assert type_matches(int, True, 'name-or-instance')
    assert not type_matches(int, True, 'name')
    assert type_matches_any([str, Base], Derived(), 'name-or-instance')
    pytest.raises(ValueError, type_matches, int, 1, 'bogus')

    throw = build_single_type_thrower(checker='name-or-instance')
    assert throw('Ctx', 'v', Derived(), Base) is None
