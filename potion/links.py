from collections.abc import Mapping

from .exceptions import UnsupportedMethodError
from .schema import HTTP_METHODS
from .uri import expand, variables

# options with special meaning; any other option is a request parameter
RESERVED_OPTIONS = ('uri', 'query', 'headers', 'context')

QUERY_METHODS = ('GET', 'DELETE')


class EmptyBody(object):
    """
    Marker for a request that must carry a body of zero bytes with an explicit ``Content-Length: 0`` header, as
    opposed to a request with no body at all.
    """

    def __repr__(self):
        return 'EMPTY_BODY'


EMPTY_BODY = EmptyBody()


def _merge_dicts(first, second):
    if first is None:
        return None if second is None else dict(second)
    merged = dict(first)
    merged.update(second or {})
    return merged


class RequestOptions(object):
    """
    Options for a single request. Instances are never modified; :meth:`merge` returns a new instance.

    :param dict uri: values for the URI template
    :param dict query: query string parameters
    :param dict headers: additional request headers
    :param body: ``None`` for no body, :data:`EMPTY_BODY`, or a ``dict`` of request parameters, which are sent as
        the query string for GET and DELETE requests and as a JSON document otherwise
    :param dict context: passed unchanged to the transport (e.g. ``{'timeout': 5}``)
    """

    def __init__(self, uri=None, query=None, headers=None, body=None, context=None):
        self._uri = dict(uri or {})
        self._query = dict(query or {})
        self._headers = dict(headers or {})
        self._body = dict(body) if isinstance(body, Mapping) else body
        self._context = None if context is None else dict(context)

    @property
    def uri(self):
        return dict(self._uri)

    @property
    def query(self):
        return dict(self._query)

    @property
    def headers(self):
        return dict(self._headers)

    @property
    def body(self):
        if isinstance(self._body, dict):
            return dict(self._body)
        return self._body

    @property
    def context(self):
        return None if self._context is None else dict(self._context)

    @classmethod
    def coerce(cls, value):
        """
        Creates request options from ``None``, :data:`EMPTY_BODY`, a :class:`RequestOptions` instance or a mapping.

        In a mapping, the keys ``uri``, ``query``, ``headers`` and ``context`` are read as options; all other keys
        are request parameters.
        """
        if value is None:
            return cls()
        if isinstance(value, RequestOptions):
            return value
        if isinstance(value, EmptyBody):
            return cls(body=EMPTY_BODY)
        if isinstance(value, Mapping):
            params = {k: v for k, v in value.items() if k not in RESERVED_OPTIONS}
            return cls(uri=value.get('uri'),
                       query=value.get('query'),
                       headers=value.get('headers'),
                       context=value.get('context'),
                       body=params or None)
        raise TypeError('Cannot read request options from {!r}'.format(value))

    def merge(self, other):
        """
        Returns new options with the values of ``other`` merged over these. A ``None`` body in ``other`` keeps the
        body of these options.
        """
        other = RequestOptions.coerce(other)

        body = self._body
        if isinstance(body, dict) and isinstance(other._body, dict):
            body = _merge_dicts(body, other._body)
        elif other._body is not None:
            body = other._body

        return RequestOptions(uri=_merge_dicts(self._uri, other._uri),
                              query=_merge_dicts(self._query, other._query),
                              headers=_merge_dicts(self._headers, other._headers),
                              body=body,
                              context=_merge_dicts(self._context, other._context))

    def for_method(self, method):
        """
        Returns ``(query, body)`` for a request with the given method, moving request parameters into the query
        string for GET and DELETE requests.
        """
        query = self.query
        body = self.body
        if method in QUERY_METHODS and isinstance(body, dict):
            query.update(body)
            body = None
        return query, body

    def __eq__(self, other):
        return isinstance(other, RequestOptions) and \
               (self._uri, self._query, self._headers, self._body, self._context) == \
               (other._uri, other._query, other._headers, other._body, other._context)

    def __repr__(self):
        return '{}(uri={!r}, query={!r}, body={!r})'.format(self.__class__.__name__,
                                                          self._uri,
                                                          self._query,
                                                          self._body)


def _verb(method):
    def call(self, options=None, uri_options=None):
        return self.call(method, options, uri_options)

    call.__name__ = method.lower()
    call.__doc__ = 'Sends a {} request to this link. See :meth:`Link.call`.'.format(method)
    return call


class Link(object):
    """
    A relation of a resource, bound to the agent used to dispatch requests.

    .. attribute:: rel

        The relation name

    .. attribute:: href

        A URI template

    .. attribute:: methods

        A ``frozenset`` of upper-case HTTP methods this link supports

    :param str rel: relation name
    :param str href: URI template, absolute or relative to the agent endpoint
    :param methods: supported HTTP methods; defaults to ``('GET',)``
    :param agent: the :class:`potion.agent.Agent` that dispatches requests
    """

    def __init__(self, rel, href, methods=None, agent=None):
        self._rel = rel
        self._href = href
        self._methods = frozenset(m.upper() for m in (methods or ('GET',)))
        self._agent = agent

        unknown = self._methods.difference(HTTP_METHODS)
        if unknown:
            raise ValueError('Unknown HTTP method(s): {}'.format(', '.join(sorted(unknown))))

    @property
    def rel(self):
        return self._rel

    @property
    def href(self):
        return self._href

    @property
    def methods(self):
        return self._methods

    @property
    def agent(self):
        return self._agent

    @property
    def variables(self):
        return variables(self._href)

    def with_methods(self, methods):
        return self.__class__(self._rel, self._href, self._methods.union(methods), self._agent)

    def expand(self, params=None):
        """
        Returns the URI of this link expanded with ``params``, resolved against the agent endpoint.

        :raises MissingParameterError: if a required template variable has no value
        """
        uri = expand(self._href, params or {})
        if self._agent is not None:
            return self._agent.resolve(uri)
        return uri

    def call(self, method, options=None, uri_options=None):
        """
        Sends a request to this link.

        :param str method: HTTP method
        :param options: request options or parameters, or :data:`EMPTY_BODY`; see :meth:`RequestOptions.coerce`
        :param uri_options: more options, merged over ``options``; typically ``{'uri': {...}}``
        :raises UnsupportedMethodError: if ``method`` is not one of :attr:`methods`
        :raises MissingParameterError: if a required template variable has no value
        :return: a :class:`potion.result.Result`
        """
        method = method.upper()
        if method not in self._methods:
            raise UnsupportedMethodError(method, self)

        if self._agent is None:
            raise RuntimeError('Link "{}" is not bound to an agent'.format(self._rel))

        request_options = RequestOptions.coerce(options).merge(uri_options)
        url = self.expand(request_options.uri)
        return self._agent.call(method, url, request_options)

    get = _verb('GET')
    post = _verb('POST')
    put = _verb('PUT')
    patch = _verb('PATCH')
    delete = _verb('DELETE')

    def __eq__(self, other):
        return isinstance(other, Link) and \
               (self._rel, self._href, self._methods) == (other._rel, other._href, other._methods)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self._rel, self._href, self._methods))

    def __repr__(self):
        return '<Link {} {} [{}]>'.format(self._rel, self._href, ', '.join(sorted(self._methods)))
