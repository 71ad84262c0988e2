from collections.abc import Mapping

from .exceptions import InvalidRepositoryIdentifierError

OWNER_KEYS = ('owner', 'user', 'username')
NAME_KEYS = ('repo', 'name')


def _first(mapping, keys):
    for key in keys:
        value = mapping.get(key)
        if value is not None:
            return value
    return None


class Repository(object):
    """
    The canonical ``owner``/``repo`` identity of a repository.

    Accepts an ``"owner/name"`` string, a mapping with ``owner`` (or ``user``, ``username``) and ``repo`` (or
    ``name``) keys, a repository :class:`potion.resource.Resource`, whose ``owner`` is a user object with a
    ``login``, or another :class:`Repository`::

        Repository('github/developer.github.com') == Repository({'owner': 'github', 'repo': 'developer.github.com'})

    :raises InvalidRepositoryIdentifierError: if no owner and name can be read from ``value``
    """

    def __init__(self, value):
        if isinstance(value, Repository):
            owner, repo = value.owner, value.repo
        elif isinstance(value, str):
            parts = value.split('/')
            if len(parts) != 2:
                raise InvalidRepositoryIdentifierError(value)
            owner, repo = parts
        elif isinstance(value, Mapping):
            owner = _first(value, OWNER_KEYS)
            if isinstance(owner, Mapping):
                owner = owner.get('login')
            repo = _first(value, NAME_KEYS)
        else:
            raise InvalidRepositoryIdentifierError(value)

        if not isinstance(owner, str) or not isinstance(repo, str) or not owner or not repo:
            raise InvalidRepositoryIdentifierError(value)

        self._owner = owner
        self._repo = repo

    @property
    def owner(self):
        return self._owner

    @property
    def repo(self):
        return self._repo

    @property
    def slug(self):
        return '{}/{}'.format(self._owner, self._repo)

    def uri_params(self):
        return {'owner': self._owner, 'repo': self._repo}

    def __eq__(self, other):
        return isinstance(other, Repository) and (self._owner, self._repo) == (other._owner, other._repo)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self._owner, self._repo))

    def __str__(self):
        return self.slug

    def __repr__(self):
        return '<Repository {}>'.format(self.slug)
