from collections import OrderedDict
from collections.abc import Mapping

from requests.utils import parse_header_links

from .exceptions import UnknownRelationError
from .links import Link
from .schema import HTTP_METHODS, validate_links, validate_hal_links


class RelationSource(object):
    """
    Anything that can look up a :class:`potion.links.Link` by relation name.
    """

    def relation(self, name):
        """
        :raises UnknownRelationError: if there is no relation named ``name``
        :return: a :class:`potion.links.Link`
        """
        raise NotImplementedError()


class Relations(RelationSource, Mapping):
    """
    A read-only mapping of relation names to :class:`potion.links.Link` objects.

    Relations are built either from a static table of JSON hyper-schema links (:meth:`from_hyperschema`) or from
    the hypermedia metadata of a decoded response (:meth:`from_resource`); both produce the same kind of links.

    :param links: an iterable of :class:`potion.links.Link` objects; links sharing a relation name and
        href are combined; a later link with a different href replaces an earlier one
    """

    def __init__(self, links=()):
        self._links = OrderedDict()
        for link in links:
            previous = self._links.get(link.rel)
            if previous is not None and previous.href == link.href:
                link = previous.with_methods(link.methods)
            self._links[link.rel] = link

    def relation(self, name):
        try:
            return self._links[name]
        except KeyError:
            raise UnknownRelationError(name, self._links.keys())

    def __getitem__(self, name):
        return self.relation(name)

    def __iter__(self):
        return iter(self._links)

    def __len__(self):
        return len(self._links)

    def __repr__(self):
        return '<Relations [{}]>'.format(', '.join(self._links))

    @classmethod
    def from_hyperschema(cls, links, agent=None):
        """
        :param list links: JSON hyper-schema link description objects, e.g.
            ``[{"rel": "team", "href": "/teams/{team_id}", "method": "GET"}]``
        :param agent: the agent links are bound to
        :raises InvalidLinkError: if ``links`` do not match the link description schema
        """
        validate_links(links)
        return cls(Link(link['rel'], link['href'], (link.get('method', 'GET'),), agent) for link in links)

    @classmethod
    def from_resource(cls, fields, agent=None):
        """
        Derives relations from the hypermedia metadata of a decoded response: a ``_links`` object and any field
        named ``url`` or ``<rel>_url``. A relation listed in ``_links`` as an array of links uses its first
        link.

        :param dict fields: the decoded response object
        :param agent: the agent links are bound to
        :raises InvalidLinkError: if ``_links`` is malformed
        """
        links = []

        for key, value in fields.items():
            if not isinstance(value, str):
                continue
            if key == 'url':
                links.append(Link('self', value, HTTP_METHODS, agent))
            elif key.endswith('_url'):
                links.append(Link(key[:-len('_url')], value, HTTP_METHODS, agent))

        hal_links = fields.get('_links')
        if hal_links is not None:
            validate_hal_links(hal_links)
            for rel, link in hal_links.items():
                if isinstance(link, list):
                    link = link[0]
                if 'methods' in link:
                    methods = link['methods']
                elif 'method' in link:
                    methods = (link['method'],)
                else:
                    methods = HTTP_METHODS
                links = [l for l in links if l.rel != rel]
                links.append(Link(rel, link['href'], methods, agent))

        return cls(links)

    @classmethod
    def from_link_header(cls, header, agent=None):
        """
        Reads relations from an HTTP ``Link`` header, such as the pagination links ``next`` and ``last``.
        """
        links = []
        for link in parse_header_links(header or ''):
            if 'url' in link and 'rel' in link:
                for rel in link['rel'].split():
                    links.append(Link(rel, link['url'], ('GET',), agent))
        return cls(links)
