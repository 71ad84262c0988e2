from werkzeug.datastructures import Headers
from werkzeug.http import HTTP_STATUS_CODES
from werkzeug.utils import cached_property

from .relations import Relations


class Result(object):
    """
    The outcome of a request: the HTTP status, the decoded response and the response headers.

    Non-2xx responses are returned as results, too; whether a status means success is for the caller to decide::

        client.root.rels['team'].delete(uri_options={'uri': {'team_id': 1}}).status == 204

    .. attribute:: status

        HTTP status code (``int``)

    .. attribute:: data

        The decoded response: a :class:`potion.resource.Resource`, a list, or ``None`` for empty or non-JSON
        responses.

    .. attribute:: headers

        Response headers (case-insensitive)
    """

    def __init__(self, status, data=None, headers=None, agent=None):
        self._status = int(status)
        self._data = data
        self._headers = Headers(headers or ())
        self._agent = agent

    @property
    def status(self):
        return self._status

    @property
    def data(self):
        return self._data

    @property
    def headers(self):
        return self._headers.copy()

    @property
    def reason(self):
        return HTTP_STATUS_CODES.get(self._status, '')

    @cached_property
    def rels(self):
        """
        Relations from the ``Link`` response header, e.g. ``result.rels['next']``.
        """
        return Relations.from_link_header(self._headers.get('Link'), self._agent)

    def __repr__(self):
        return '<Result {} {}>'.format(self._status, self.reason)
