"""Errors raised while turning API payloads into documents."""

from __future__ import annotations


class MalformedDocumentError(ValueError):
    """Raised when a document payload lacks a required top-level property."""

    def __init__(self, message: str, *, document_id: str | None = None) -> None:
        super().__init__(message)
        self.document_id = document_id
