import requests


class Transport(object):
    """
    Sends HTTP requests for an :class:`potion.agent.Agent`.

    Exceptions raised by a transport are never caught by the client; they reach the caller unchanged.
    """

    def execute(self, method, url, headers, body, context=None):
        """
        :param str method: HTTP method
        :param str url: absolute URL, including any query string
        :param dict headers: request headers
        :param bytes body: request body, or ``None`` to send no body
        :param dict context: transport-specific options passed through by the caller, such as a timeout
        :return: a ``(status, headers, body)`` tuple
        """
        raise NotImplementedError()

    def close(self):
        pass


class RequestsTransport(Transport):
    """
    A transport using a :class:`requests.Session`. Entries of ``context`` are passed as keyword arguments to
    :meth:`requests.Session.request`, e.g. ``{'timeout': 10, 'verify': False}``.

    :param requests.Session session: an optional session, e.g. with authentication configured
    """

    def __init__(self, session=None):
        self.session = session or requests.Session()

    def execute(self, method, url, headers, body, context=None):
        response = self.session.request(method, url, headers=headers, data=body, **(context or {}))
        return response.status_code, response.headers, response.content

    def close(self):
        self.session.close()
