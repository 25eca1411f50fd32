import functools
import typing

from .error import ensure_callable
from .introspection import is_defined_and_not_null, type_of
from .operation import Tag
from .typeref import as_type_ref


class MatchPolicy(Tag):
    Name = 'name'
    NameOrInstance = 'name-or-instance'


def matches_by_name(ref, value) -> bool:
    '''value runtime type name is equal to the referenced one'''
    return type_of(value) == as_type_ref(ref).name


def matches_by_name_or_instance(ref, value) -> bool:
    '''name match or, for classes, `isinstance()` match

    None never matches a class nominally, only by name.

    '''
    type_ref = as_type_ref(ref)
    if type_of(value) == type_ref.name:
        return True
    return is_defined_and_not_null(value) and type_ref.is_instance(value)


_checkers = {
    MatchPolicy.Name: matches_by_name,
    MatchPolicy.NameOrInstance: matches_by_name_or_instance,
}


def get_checker(policy: MatchPolicy) -> typing.Callable:
    return _checkers[MatchPolicy(policy)]


@functools.singledispatch
def as_checker(obj):
    return ensure_callable(obj)


@as_checker.register(MatchPolicy)
def _(obj):
    return get_checker(obj)


@as_checker.register(str)
def _(obj):
    return get_checker(obj)


default_checker = matches_by_name


def type_matches(ref, value, checker=default_checker) -> bool:
    return as_checker(checker)(ref, value)


def type_matches_any(refs, value, checker=default_checker) -> bool:
    checker = as_checker(checker)
    return any(checker(ref, value) for ref in refs)
