"""Protocolos e contratos do core da aplicação."""

from .destination_client import DestinationClientProtocol, DestinationError
from .id_map import IdMapStoreProtocol
from .models import (
    MirrorOperation,
    MirrorOutcome,
    MirrorResult,
    ReplyMessage,
    RootMessage,
    SlackMessage,
    SlackMessageEvent,
)
from .normalizer import ContentNormalizerProtocol
from .username_resolver import UsernameResolverProtocol

__all__ = [
    "ContentNormalizerProtocol",
    "DestinationClientProtocol",
    "DestinationError",
    "IdMapStoreProtocol",
    "MirrorOperation",
    "MirrorOutcome",
    "MirrorResult",
    "ReplyMessage",
    "RootMessage",
    "SlackMessage",
    "SlackMessageEvent",
    "UsernameResolverProtocol",
]
