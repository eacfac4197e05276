"""Use cases de espelhamento Slack → Slashwork."""

from .channel_admission import admit_channel
from .dedupe_resolver import DedupeResolver, dedupe_key, mapping_key
from .mirror_message import MirrorSlackMessageUseCase, apply_username_prefix
from .thread_resolver import ThreadResolver, ThreadTarget

__all__ = [
    "DedupeResolver",
    "MirrorSlackMessageUseCase",
    "ThreadResolver",
    "ThreadTarget",
    "admit_channel",
    "apply_username_prefix",
    "dedupe_key",
    "mapping_key",
]
