"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- slack/: extractor de eventos e normalizer de conteúdo (markdown)
"""

from .slack import extract_message_event, normalize_message, normalize_message_content

__all__ = [
    "extract_message_event",
    "normalize_message",
    "normalize_message_content",
]
