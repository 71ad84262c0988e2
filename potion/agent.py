import datetime
import logging
from urllib.parse import urlencode

from flask import json
from werkzeug.datastructures import Headers
from werkzeug.http import parse_options_header
from werkzeug.utils import cached_property

from .links import EMPTY_BODY, RequestOptions
from .relations import Relations
from .resource import Resource, decode
from .result import Result
from .root import ROOT_LINKS
from .signals import request_started, request_finished
from .transport import RequestsTransport

log = logging.getLogger(__name__)


def _json_default(value):
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    if isinstance(value, Resource):
        return dict(value)
    raise TypeError('{!r} is not JSON serializable'.format(value))


def _query_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return value


def is_json_mimetype(mimetype):
    return mimetype == 'application/json' or (mimetype.startswith('application/') and mimetype.endswith('+json'))


class Agent(object):
    """
    Builds, sends and decodes the requests of :class:`potion.links.Link` objects.

    :param str endpoint: base URL that relative link targets resolve against
    :param transport: a :class:`potion.transport.Transport`; defaults to :class:`potion.transport.RequestsTransport`
    :param dict headers: headers sent with every request
    :param timeout: default ``timeout`` passed to the transport when a request does not set one
    :param list root_links: JSON hyper-schema links of the API root
    """

    def __init__(self, endpoint, transport=None, headers=None, timeout=None, root_links=None):
        self.endpoint = endpoint.rstrip('/')
        self.transport = transport or RequestsTransport()
        self.headers = dict(headers or {})
        self.timeout = timeout
        self.root_links = ROOT_LINKS if root_links is None else root_links

    @cached_property
    def root(self):
        """
        The API root: a resource with no fields whose relations are the well-known top-level endpoints.
        """
        return Resource({}, self, rels=Relations.from_hyperschema(self.root_links, self))

    def resolve(self, uri):
        if '://' in uri:
            return uri
        return '{}/{}'.format(self.endpoint, uri.lstrip('/'))

    def encode(self, body):
        return json.dumps(body, default=_json_default).encode('utf-8')

    def decode(self, headers, content):
        if not content:
            return None

        mimetype, _ = parse_options_header(headers.get('Content-Type', ''))
        if not is_json_mimetype(mimetype):
            return None
        try:
            data = json.loads(content)
        except ValueError:
            log.warning('Response labelled %s is not valid JSON', mimetype)
            return None
        return decode(data, self)

    def call(self, method, url, options=None):
        """
        Sends a request and returns a :class:`potion.result.Result`, whatever its status.

        :param str method: HTTP method
        :param str url: absolute URL
        :param options: :class:`potion.links.RequestOptions` or anything :meth:`RequestOptions.coerce` accepts
        """
        options = RequestOptions.coerce(options)
        query, body = options.for_method(method)

        if query:
            url = '{}{}{}'.format(url,
                                  '&' if '?' in url else '?',
                                  urlencode(sorted((k, _query_value(v)) for k, v in query.items()), doseq=True))

        headers = dict(self.headers)
        headers.update(options.headers)

        if body is EMPTY_BODY:
            data = b''
            headers['Content-Length'] = '0'
        elif body is None:
            data = None
        else:
            data = self.encode(body)
            headers.setdefault('Content-Type', 'application/json')

        context = options.context or {}
        if self.timeout is not None:
            context.setdefault('timeout', self.timeout)

        request_started.send(self, method=method, url=url, headers=headers, body=data)
        log.debug('%s %s', method, url)

        status, response_headers, content = self.transport.execute(method, url, headers, data, context or None)
        response_headers = Headers(response_headers)

        result = Result(status, self.decode(response_headers, content), response_headers, self)
        log.debug('%s %s -> %s', method, url, result.status)

        request_finished.send(self, result=result)
        return result
