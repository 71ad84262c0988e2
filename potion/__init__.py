from . import signals, uri
from .agent import Agent
from .client import Client, __version__
from .exceptions import PotionError, MissingParameterError, UnknownRelationError, UnsupportedMethodError, \
    InvalidRepositoryIdentifierError, InvalidLinkError, TransportError
from .links import Link, RequestOptions, EMPTY_BODY
from .relations import Relations, RelationSource
from .repository import Repository
from .resource import Resource
from .result import Result
from .transport import Transport, RequestsTransport

__all__ = (
    'Agent',
    'Client',
    'Link',
    'RequestOptions',
    'EMPTY_BODY',
    'Relations',
    'RelationSource',
    'Repository',
    'Resource',
    'Result',
    'Transport',
    'RequestsTransport',
    'PotionError',
    'MissingParameterError',
    'UnknownRelationError',
    'UnsupportedMethodError',
    'InvalidRepositoryIdentifierError',
    'InvalidLinkError',
    'TransportError',
    'signals',
    'uri',
)
