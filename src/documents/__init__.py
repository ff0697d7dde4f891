"""Documents retrieved from the content API, with their typed fragments."""

from .document import DEFAULT_DOCUMENT_REGISTRY, Document, DocumentPayload
from .errors import MalformedDocumentError
from .linked import LinkedDocument
from .settings import ParserSettings, build_settings_from_env, configure_logging

__all__ = [
    "Document",
    "DocumentPayload",
    "DEFAULT_DOCUMENT_REGISTRY",
    "LinkedDocument",
    "MalformedDocumentError",
    "ParserSettings",
    "build_settings_from_env",
    "configure_logging",
]
