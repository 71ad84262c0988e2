import copy
import os

from flask import Config
from werkzeug.utils import cached_property

from .agent import Agent
from .organizations import OrganizationsMixin
from .users import UsersMixin

__version__ = '0.1.0'

DEFAULT_CONFIG = {
    'API_ENDPOINT': 'https://api.github.com',
    'MEDIA_TYPE': 'application/vnd.github.v3+json',
    'USER_AGENT': 'Potion-Client/{}'.format(__version__),
    'DEFAULT_HEADERS': {},
    'TIMEOUT': None,
}


class Client(UsersMixin, OrganizationsMixin):
    """
    An API client. Configuration is read from the defaults, then from environment variables prefixed with
    ``POTION_`` (e.g. ``POTION_API_ENDPOINT``), then from keyword arguments::

        client = Client(default_headers={'Authorization': 'token XXX'}, timeout=10)
        client.organization('github').login

    =====================  ======================================  =============================================
    Key                    Default                                 Description
    =====================  ======================================  =============================================
    ``API_ENDPOINT``       ``'https://api.github.com'``            Base URL for relative link targets
    ``MEDIA_TYPE``         ``'application/vnd.github.v3+json'``    ``Accept`` header
    ``USER_AGENT``         ``'Potion-Client/<version>'``           ``User-Agent`` header
    ``DEFAULT_HEADERS``    ``{}``                                  Headers sent with every request
    ``TIMEOUT``            ``None``                                Timeout passed to the transport
    =====================  ======================================  =============================================

    :param str endpoint: shorthand for ``api_endpoint``
    :param transport: a :class:`potion.transport.Transport`
    :param list root_links: JSON hyper-schema links of the API root; defaults to :data:`potion.root.ROOT_LINKS`
    """

    def __init__(self, endpoint=None, transport=None, root_links=None, **config):
        self.config = Config(os.getcwd(), defaults=copy.deepcopy(DEFAULT_CONFIG))
        self.config.from_prefixed_env('POTION')
        self.config.from_mapping({key.upper(): value for key, value in config.items()})

        if endpoint is not None:
            self.config['API_ENDPOINT'] = endpoint

        self.transport = transport
        self.root_links = root_links

    @cached_property
    def agent(self):
        headers = {
            'Accept': self.config['MEDIA_TYPE'],
            'User-Agent': self.config['USER_AGENT'],
        }
        headers.update(self.config['DEFAULT_HEADERS'] or {})

        return Agent(self.config['API_ENDPOINT'],
                     transport=self.transport,
                     headers=headers,
                     timeout=self.config['TIMEOUT'],
                     root_links=self.root_links)

    @property
    def root(self):
        return self.agent.root

    @property
    def endpoint(self):
        return self.agent.endpoint
