# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

__all__ = (
    'CodeRegistry',
    'IsoCode',
)

import enum
import types

from . import json
from .errors import InvalidStringCodeError, MarshalError, UnmarshalError

import logging
log = logging.getLogger(__name__)

class CodeRegistry(object):
    '''Read-only two-way mapping between codes and their detail records.

    The forward table maps each code to its details and the reverse index maps
    each canonical short code string back to its code. Both are built once and
    only ever exposed through read-only mappings.

    Detail records are expected to provide a `short_code` attribute and to
    default-construct as an empty record.
    '''

    code_type = None
    details_type = None
    short_code_len = None

    def __init__(self, code_type, details_type, details_table, *, short_code_len):
        self.code_type = code_type
        self.details_type = details_type
        self.short_code_len = short_code_len
        self.empty_details = details_type()

        details_map = {}
        index = {}
        for code, details in details_table:
            code = code_type(code)
            assert code, f'{code!r} cannot carry details'
            assert code not in details_map, f'Duplicate {code_type.__name__} {code!r}'
            short_code = details.short_code
            assert len(short_code) == short_code_len and short_code == short_code.upper(), \
                f'Invalid short code {short_code!r}'
            assert short_code not in index, f'Duplicate short code {short_code!r}'
            details_map[code] = details
            index[short_code] = code
        self.details_map = types.MappingProxyType(details_map)
        self.index = types.MappingProxyType(index)
        self.sorted_codes = tuple(sorted(
            index.values(),
            key=lambda code: details_map[code].short_code))
        log.debug('%s registry: %d codes', code_type.__name__, len(index))
        super().__init__()

    def __len__(self):
        return len(self.index)

    def __iter__(self):
        return iter(self.sorted_codes)

    def __contains__(self, code):
        return code in self.details_map

    def details_of(self, code):
        '''Return the details of `code`; never fails.

        The sentinel, unknown integers and foreign objects all resolve to the
        empty detail record.
        '''
        if not isinstance(code, self.code_type):
            try:
                code = self.code_type(code)
            except (ValueError, TypeError):
                return self.empty_details
        return self.details_map.get(code, self.empty_details)

    def parse(self, s):
        '''Case-insensitive conversion of a short code string to a code.'''
        if type(s) is not str:
            raise TypeError(s)
        if len(s) > self.short_code_len or not s.isascii():
            raise InvalidStringCodeError(code=s)
        try:
            return self.index[s.upper()]
        except KeyError:
            raise InvalidStringCodeError(code=s)

    def list_all(self):
        return list(self.sorted_codes)

    def to_text(self, code):
        short_code = self.details_of(code).short_code
        if not short_code:
            raise MarshalError(code=code)
        return short_code

    def from_text(self, data):
        '''Exact (case-sensitive) conversion of serialized text to a code.'''
        if not data:
            raise UnmarshalError(code=data)
        if isinstance(data, (bytes, bytearray)):
            try:
                s = bytes(data).decode('utf-8')
            except UnicodeDecodeError:
                raise UnmarshalError(code=data)
        elif type(data) is str:
            s = data
        else:
            raise UnmarshalError(code=data)
        try:
            return self.index[s]
        except KeyError:
            raise UnmarshalError(code=data)

    def to_json(self, code):
        return json.dumps(self.to_text(code))

    def from_json(self, data):
        if not data:
            raise UnmarshalError(code=data)
        try:
            obj = json.loads(data)
        except ValueError:
            # includes JSONDecodeError and UnicodeDecodeError
            raise UnmarshalError(code=data)
        if type(obj) is not str:
            raise UnmarshalError(code=data)
        return self.from_text(obj)

    def coerce(self, v):
        if isinstance(v, self.code_type):
            return v
        if type(v) is str:
            return self.parse(v)
        raise TypeError(v)

class IsoCode(json.JSONEncodable, json.JSONDecodable, enum.Enum):
    '''Base of the code enumerations.

    Concrete enumerations define a falsy `NOTSET = 0` sentinel followed by
    their codes, then get a `CodeRegistry` attached as `_registry`.
    '''

    def __bool__(self):
        return self.value != 0

    def __str__(self):
        return self.details.short_code

    @property
    def details(self):
        return type(self)._registry.details_of(self)

    @property
    def display_name(self):
        return self.details.name

    @property
    def number(self):
        return self.details.number

    @property
    def flag(self):
        return self.details.flag

    @classmethod
    def parse(cls, s):
        return cls._registry.parse(s)

    @classmethod
    def list_codes(cls):
        return cls._registry.list_all()

    def marshal_text(self):
        return type(self)._registry.to_text(self)

    @classmethod
    def unmarshal_text(cls, data):
        return cls._registry.from_text(data)

    def marshal_json(self):
        return type(self)._registry.to_json(self)

    @classmethod
    def unmarshal_json(cls, data):
        return cls._registry.from_json(data)

    def __json_encode__(self):
        return self.marshal_text()

    @classmethod
    def __json_decode__(cls, obj):
        if type(obj) is not str:
            raise UnmarshalError(code=obj)
        return cls.unmarshal_text(obj)

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
