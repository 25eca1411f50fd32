'''Type references: what a value is expected to be

A type reference is either a type name (`ByName`) or a class (`ByType`).
Callers may pass plain strings and classes everywhere, `as_type_ref()`
converts them.

'''
import abc
import functools

from . import error
from .introspection import type_of
from .operation import as_basic_type


class TypeRef(abc.ABC):
    __slots__ = tuple()

    @property
    @abc.abstractmethod
    def name(self) -> str:
        '''canonical type name'''

    @abc.abstractmethod
    def is_instance(self, value) -> bool:
        '''nominal check, supports subclasses'''

    def __eq__(self, other):
        if isinstance(other, TypeRef):
            return type(self) is type(other) and self._key() == other._key()
        return NotImplemented

    def __hash__(self):
        return hash((type(self), self._key()))

    def __str__(self):
        return self.name


class ByName(TypeRef):
    __slots__ = ('_name',)

    def __init__(self, name: str):
        self._name = error.ensure_has_type(str, name)

    @property
    def name(self):
        return self._name

    def is_instance(self, value):
        return False

    def _key(self):
        return self._name

    def __repr__(self):
        return 'ByName({!r})'.format(self._name)


class ByType(TypeRef):
    __slots__ = ('_descriptor',)

    def __init__(self, descriptor: type):
        self._descriptor = error.ensure_has_type(type, descriptor)

    @property
    def name(self):
        return self._descriptor.__name__

    def is_instance(self, value):
        return isinstance(value, self._descriptor)

    def _key(self):
        return self._descriptor

    def __repr__(self):
        return 'ByType({})'.format(self.name)


@functools.singledispatch
def as_type_ref(obj) -> TypeRef:
    raise error.InvalidTypeReferenceError(
        '`resolve_type_name` only accepts type names and/or classes.  '
        'Value type received: {};  Value: {}'.format(type_of(obj), obj)
    )


@as_type_ref.register(str)
def _(obj):
    return ByName(obj)


@as_type_ref.register(type)
def _(obj):
    return ByType(obj)


@as_type_ref.register(TypeRef)
def _(obj):
    return obj


@as_basic_type.register(TypeRef)
def type_ref_as_basic_type(v):
    return v.name


def resolve_type_name(ref) -> str:
    return as_type_ref(ref).name


def is_checkable_type_reference(ref) -> bool:
    try:
        as_type_ref(ref)
    except error.InvalidTypeReferenceError:
        return False
    return True
