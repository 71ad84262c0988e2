class PotionError(Exception):
    """
    Base class for all errors raised by the Potion client.
    """


class MissingParameterError(PotionError, ValueError):

    def __init__(self, name, template):
        super(MissingParameterError, self).__init__(
            'Missing value for "{}" in URI template "{}"'.format(name, template))
        self.name = name
        self.template = template


class UnknownRelationError(PotionError, KeyError):

    def __init__(self, rel, available=()):
        super(UnknownRelationError, self).__init__(rel)
        self.rel = rel
        self.available = tuple(sorted(available))

    def __str__(self):
        return 'Unknown relation "{}" (available: {})'.format(self.rel, ', '.join(self.available) or 'none')


class UnsupportedMethodError(PotionError):

    def __init__(self, method, link):
        super(UnsupportedMethodError, self).__init__(
            '{} is not supported by relation "{}" (allowed: {})'.format(method, link.rel, ', '.join(sorted(link.methods))))
        self.method = method
        self.link = link


class InvalidRepositoryIdentifierError(PotionError, ValueError):

    def __init__(self, value):
        super(InvalidRepositoryIdentifierError, self).__init__(
            'Cannot read a repository identifier from {!r}'.format(value))
        self.value = value


class InvalidLinkError(PotionError, ValueError):

    def __init__(self, errors):
        self.errors = list(errors)
        super(InvalidLinkError, self).__init__(
            'Invalid link description: {}'.format('; '.join(self._format_errors())))

    def _format_errors(self):
        for error in self.errors:
            path = '/'.join(str(p) for p in error.absolute_path)
            yield '{}: {}'.format(path or '#', error.message)


class TransportError(PotionError):
    """
    Raised by transports that wrap their own connection failures. The client itself never catches or wraps
    exceptions coming out of a transport.
    """
