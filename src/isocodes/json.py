# -*- coding: utf-8 -*-
# vim: set fileencoding=utf-8 :

__all__ = (
        'JSONEncodable',
        'JSONDecodable',
        'load',
        'loads',
        'dump',
        'dumps',
        'JSONEncoder',
        'JSONDecoder',
        )

from json import JSONEncoder as _JSONEncoder
from json import JSONDecoder as _JSONDecoder
from json import load as _load
from json import loads as _loads
from json import dump as _dump
from json import dumps as _dumps

class JSONEncodable(object):
    '''Objects that know how to represent themselves as a JSON value.

    Subclasses implement `__json_encode__` and return any value the standard
    encoder accepts (for codes, a plain string).
    '''

    def __json_encode__(self):
        raise NotImplementedError

    def json_dump(self, fp, **kwargs):
        return dump(self, fp, **kwargs)

    def json_dumps(self, **kwargs):
        return dumps(self, **kwargs)

class JSONDecodable(object):

    @classmethod
    def __json_decode__(cls, obj):
        raise NotImplementedError

    @classmethod
    def json_load(cls, fp):
        obj = load(fp)
        if not isinstance(obj, cls):
            obj = cls.__json_decode__(obj)
        return obj

    @classmethod
    def json_loads(cls, s):
        obj = loads(s)
        if not isinstance(obj, cls):
            obj = cls.__json_decode__(obj)
        return obj

def load(fp, cls=None, **kwargs):
    if cls is None:
        cls = JSONDecoder
    return _load(fp, cls=cls, **kwargs)

def loads(s, cls=None, **kwargs):
    if cls is None:
        cls = JSONDecoder
    return _loads(s, cls=cls, **kwargs)

def dump(obj, fp, cls=None, **kwargs):
    if cls is None:
        cls = JSONEncoder
    kwargs.setdefault('ensure_ascii', False)
    return _dump(obj, fp, cls=cls, **kwargs)

def dumps(obj, cls=None, **kwargs):
    if cls is None:
        cls = JSONEncoder
    kwargs.setdefault('ensure_ascii', False)
    return _dumps(obj, cls=cls, **kwargs)

class JSONEncoder(_JSONEncoder):

    def default(self, obj):
        if isinstance(obj, JSONEncodable):
            return obj.__json_encode__()
        return super().default(obj)

class JSONDecoder(_JSONDecoder):
    pass

# vim: ft=python ts=8 sw=4 sts=4 ai et fdm=marker
