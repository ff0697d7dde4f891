"""The document aggregate built from one API search result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence
from urllib.parse import unquote_plus

from pydantic import BaseModel, ValidationError

from fragments import DocumentLink, Fragment, FragmentRegistry, WithFragments, build_default_registry

from .errors import MalformedDocumentError
from .linked import LinkedDocument
from .settings import build_settings_from_env

logger = logging.getLogger(__name__)


class DocumentPayload(BaseModel):
    id: str
    uid: str | None = None
    type: str
    href: str
    tags: list[str]
    slugs: list[str]
    linked_documents: list[Any] | None = None
    data: dict[str, dict[str, Any]]


def _build_registry_from_env() -> FragmentRegistry:
    settings = build_settings_from_env()
    return build_default_registry(report_unknown=settings.report_unknown_fragments)


DEFAULT_DOCUMENT_REGISTRY = _build_registry_from_env()


@dataclass(frozen=True)
class Document(WithFragments):
    """Immutable snapshot of a document and its typed fragments."""

    id: str
    type: str
    href: str
    uid: str | None = None
    tags: Sequence[str] = field(default_factory=tuple)
    slugs: Sequence[str] = field(default_factory=tuple)
    linked_documents: Sequence[LinkedDocument] = field(default_factory=tuple)
    fragments: Mapping[str, Fragment] = field(default_factory=lambda: MappingProxyType({}))

    def __hash__(self) -> int:
        return hash((self.id, self.href))

    def get_slug(self) -> str | None:
        """Return the current slug; historical slugs follow it in ``slugs``."""

        return self.slugs[0] if self.slugs else None

    def contains_slug(self, slug: str) -> bool:
        return slug in self.slugs

    def as_document_link(self) -> DocumentLink:
        return DocumentLink(
            id=self.id,
            type=self.type,
            tags=tuple(self.tags),
            slug=self.get_slug(),
            is_broken=False,
            uid=self.uid,
        )

    @classmethod
    def parse(cls, payload: Any, registry: FragmentRegistry | None = None) -> "Document":
        """Build a document from its decoded JSON payload.

        Raises ``MalformedDocumentError`` when ``id``, ``type``, ``href``,
        ``tags``, ``slugs`` or ``data`` is missing. Fragments that cannot be
        parsed are left out instead.
        """

        try:
            model = DocumentPayload.model_validate(payload)
        except ValidationError as exc:
            document_id = payload.get("id") if isinstance(payload, Mapping) else None
            raise MalformedDocumentError(
                f"Document payload is invalid: {exc}",
                document_id=document_id if isinstance(document_id, str) else None,
            ) from exc

        parser = registry or DEFAULT_DOCUMENT_REGISTRY
        fragments: dict[str, Fragment] = {}
        for group, fields in model.data.items():
            for name, value in fields.items():
                if isinstance(value, list):
                    for index, element in enumerate(value):
                        fragment = parser.parse(element)
                        if fragment is not None:
                            fragments[f"{group}.{name}[{index}]"] = fragment
                # The raw value is tried as well, even when it is a list. A list
                # never carries a type tag today, so this is a no-op for arrays.
                fragment = parser.parse(value)
                if fragment is not None:
                    fragments[f"{group}.{name}"] = fragment

        try:
            linked_documents = tuple(LinkedDocument.parse(item) for item in model.linked_documents or [])
        except MalformedDocumentError as exc:
            raise MalformedDocumentError(str(exc), document_id=model.id) from exc
        slugs = tuple(unquote_plus(slug) for slug in model.slugs)

        return cls(
            id=model.id,
            uid=model.uid,
            type=model.type,
            href=model.href,
            tags=tuple(model.tags),
            slugs=slugs,
            linked_documents=linked_documents,
            fragments=MappingProxyType(fragments),
        )

    @classmethod
    def parse_many(
        cls,
        payloads: Iterable[Any],
        *,
        registry: FragmentRegistry | None = None,
        skip_malformed: bool = False,
    ) -> list["Document"]:
        """Parse a list of search results, optionally skipping malformed entries."""

        documents: list[Document] = []
        for payload in payloads:
            try:
                documents.append(cls.parse(payload, registry=registry))
            except MalformedDocumentError as exc:
                if not skip_malformed:
                    raise
                logger.warning("Skipping malformed document %s: %s", exc.document_id or "<unknown>", exc)
        return documents
