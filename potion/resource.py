from collections.abc import Mapping

import aniso8601
from werkzeug.utils import cached_property

from .relations import Relations, RelationSource

TIME_FIELD_SUFFIXES = ('_at', '_on')


def _is_time_field(key):
    return key == 'date' or key.endswith(TIME_FIELD_SUFFIXES)


def _decode_time(value):
    try:
        if 'T' in value:
            return aniso8601.parse_datetime(value)
        return aniso8601.parse_date(value)
    except (ValueError, NotImplementedError):
        return value


def decode(value, agent=None):
    """
    Converts decoded JSON into resources: objects become :class:`Resource` instances, arrays become lists, and ISO
    8601 strings in time fields (``*_at``, ``*_on``) become ``datetime`` or ``date`` objects.
    """
    if isinstance(value, Mapping) and not isinstance(value, Resource):
        return Resource(value, agent)
    if isinstance(value, list):
        return [decode(item, agent) for item in value]
    return value


class Resource(RelationSource, Mapping):
    """
    A decoded API object. Fields can be read as items or as attributes; relations to other resources are available
    through :attr:`rels`::

        org = client.organization('github')
        org.login  # 'github'
        org.rels['members'].get().data

    Resources are read-only.

    :param dict fields: decoded JSON object
    :param agent: the :class:`potion.agent.Agent` used for following relations
    :param Relations rels: static relations; derived from the hypermedia metadata in ``fields`` if not given
    """

    def __init__(self, fields=None, agent=None, rels=None):
        fields = fields or {}
        self.__dict__['_agent'] = agent
        self.__dict__['_fields'] = {key: self._decode_field(key, value, agent) for key, value in fields.items()}
        if rels is not None:
            self.__dict__['rels'] = rels
        self.__dict__['_source'] = fields

    @staticmethod
    def _decode_field(key, value, agent):
        if isinstance(value, str) and _is_time_field(key):
            return _decode_time(value)
        return decode(value, agent)

    @cached_property
    def rels(self):
        return Relations.from_resource(self._source, self._agent)

    def relation(self, name):
        return self.rels.relation(name)

    def __getitem__(self, key):
        return self._fields[key]

    def __iter__(self):
        return iter(self._fields)

    def __len__(self):
        return len(self._fields)

    def __getattr__(self, name):
        if name.startswith('__'):
            raise AttributeError(name)
        try:
            return self.__dict__['_fields'][name]
        except KeyError:
            raise AttributeError("'{}' object has no attribute '{}'".format(self.__class__.__name__, name))

    def __setattr__(self, name, value):
        raise AttributeError('{} is read-only'.format(self.__class__.__name__))

    def __delattr__(self, name):
        raise AttributeError('{} is read-only'.format(self.__class__.__name__))

    def __repr__(self):
        return '<Resource {!r}>'.format(self._fields)
