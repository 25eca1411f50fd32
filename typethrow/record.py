import abc
import collections.abc
import itertools
import types

from .error import (
    AccessError,
    ensure_has_type,
    Error,
    InvalidFieldError,
    RecordError,
)
from .operation import (
    as_basic_type,
    ContractInfo,
    Operation,
)


def _get_input_mapping(values, overrides):
    if not values:
        return overrides

    ensure_has_type(collections.abc.Mapping, values)
    return {**values, **overrides}


def _split_record_namespace(namespace):
    fields = []
    other = {}
    for k, v in namespace.items():
        if isinstance(v, Operation):
            fields.append((k, v))
        else:
            other[k] = v
    return types.SimpleNamespace(
        fields=fields,
        other=other
    )


class RecordMeta(abc.ABCMeta):
    '''Turns operations declared in the class body into record fields'''

    def __new__(cls, name, bases, namespace, **kwds):
        record_base = bases[0]
        if record_base == RecordBase:
            return super().__new__(cls, name, bases, namespace, **kwds)

        def gen_mro_fields(kls):
            for base in reversed(kls.mro()):
                if issubclass(base, RecordBase):
                    yield base._fields.items()

        namespaces = _split_record_namespace(namespace)

        all_bases_fields = (items for base in bases for items in gen_mro_fields(base))
        fields = {k: v for k, v in itertools.chain(*all_bases_fields, namespaces.fields)}
        own_slots = [k for k in fields.keys() if k not in record_base._fields]
        if not record_base._fields:
            own_slots.extend(RecordBase._service_fields)

        cls_dict = {
            '_fields': types.MappingProxyType(fields),
            '__slots__': tuple(own_slots),
            '_contract_info': ContractInfo('convert to ' + name),
        }

        return super().__new__(
            cls, name, (record_base,),
            {**namespaces.other, **cls_dict},
            **kwds
        )


class RecordBase(collections.abc.Mapping):
    '''Base class for immutable records'''

    __slots__ = tuple()
    _fields = {}
    _service_fields = ('_initialized',)

    def __init__(self, values=None, **overrides):
        values = _get_input_mapping(values, overrides)

        self._initialized = False
        self._initialize(values)
        self._initialized = True

    @classmethod
    def gen_fields_from_input(cls, data: collections.abc.Mapping):
        cls_name = cls.__name__

        for name, conversion in cls._fields.items():
            try:
                yield (name, conversion.prepare_field(name, data))
            except Error as err:
                raise RecordError(cls_name, err) from err
            except Exception as err:
                raise RecordError(cls_name, InvalidFieldError(name, err)) from err

    @classmethod
    def get_contract_info(cls):
        return '\n'.join(
            '{} :: {}'.format(name, conversion.info)
            for name, conversion in cls._fields.items()
        )

    def gen_names(self):
        yield from self._fields.keys()

    def gen_fields(self):
        for name in self.gen_names():
            yield (name, getattr(self, name))

    def __eq__(self, other):
        if isinstance(other, collections.abc.Mapping):
            return dict(self.gen_fields()) == dict(other.items())
        return NotImplemented

    __hash__ = None

    def __iter__(self):
        return iter(self.gen_names())

    def __len__(self):
        return len(self._fields)

    def __getitem__(self, name):
        if name not in self._fields:
            raise KeyError(name)
        return getattr(self, name)

    def __repr__(self):
        return '{}({})'.format(
            self.__class__.__name__,
            ', '.join('{}={!r}'.format(k, v) for k, v in self.gen_fields())
        )


class Record(RecordBase, metaclass=RecordMeta):
    __slots__ = tuple()

    def _initialize(self, values):
        for name, value in self.gen_fields_from_input(values):
            setattr(self, name, value)

    def __setattr__(self, name, value):
        if name != '_initialized' and self._initialized:
            raise AccessError(name)
        super().__setattr__(name, value)

    def replace(self, **overrides):
        '''create a copy of the record with some fields replaced'''
        return self.__class__(dict(self.gen_fields()), **overrides)


@as_basic_type.register(RecordBase)
def record_as_basic_type(s):
    return {k: as_basic_type(v) for k, v in s.gen_fields()}
