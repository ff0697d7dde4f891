"""Link fragments pointing at the web, media library files, or other documents."""

from __future__ import annotations

from abc import abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Mapping, Sequence

from pydantic import Field

from .base import Fragment, StrictModel, validate_payload

LinkResolver = Callable[["DocumentLink"], str | None]


class WebLinkModel(StrictModel):
    url: str
    content_type: str | None = None


class LinkedDocumentModel(StrictModel):
    id: str
    type: str
    uid: str | None = None
    tags: list[str] = Field(default_factory=list)
    slug: str | None = None


class DocumentLinkModel(StrictModel):
    document: LinkedDocumentModel
    isBroken: bool = False


class MediaModel(StrictModel):
    url: str
    name: str | None = None
    kind: str | None = None
    size: int | None = None
    width: int | None = None
    height: int | None = None


class FileLinkModel(StrictModel):
    file: MediaModel


class ImageLinkModel(StrictModel):
    image: MediaModel


class Link(Fragment):
    """Common interface for every link kind."""

    @abstractmethod
    def get_url(self, resolver: LinkResolver | None = None) -> str | None:
        """Return the target URL; document links need a resolver."""

    def as_text(self) -> str | None:
        return self.get_url()


@dataclass(frozen=True)
class WebLink(Link):
    url: str
    content_type: str | None = None

    @classmethod
    def parse(cls, value: object) -> "WebLink | None":
        model = validate_payload(WebLinkModel, value)
        if model is None:
            return None
        return cls(url=model.url, content_type=model.content_type)

    def get_url(self, resolver: LinkResolver | None = None) -> str:
        return self.url


@dataclass(frozen=True)
class DocumentLink(Link):
    """Reference to another document of the same repository."""

    id: str
    type: str
    tags: Sequence[str] = field(default_factory=tuple)
    slug: str | None = None
    is_broken: bool = False
    uid: str | None = None

    @classmethod
    def parse(cls, value: object) -> "DocumentLink | None":
        model = validate_payload(DocumentLinkModel, value)
        if model is None:
            return None
        document = model.document
        return cls(
            id=document.id,
            type=document.type,
            tags=tuple(document.tags),
            slug=document.slug,
            is_broken=model.isBroken,
            uid=document.uid,
        )

    def get_url(self, resolver: LinkResolver | None = None) -> str | None:
        if resolver is None or self.is_broken:
            return None
        return resolver(self)


@dataclass(frozen=True)
class FileLink(Link):
    url: str
    filename: str | None = None
    kind: str | None = None
    size: int | None = None

    @classmethod
    def parse(cls, value: object) -> "FileLink | None":
        model = validate_payload(FileLinkModel, value)
        if model is None:
            return None
        media = model.file
        return cls(url=media.url, filename=media.name, kind=media.kind, size=media.size)

    def get_url(self, resolver: LinkResolver | None = None) -> str:
        return self.url


@dataclass(frozen=True)
class ImageLink(Link):
    url: str
    filename: str | None = None
    kind: str | None = None
    size: int | None = None
    width: int | None = None
    height: int | None = None

    @classmethod
    def parse(cls, value: object) -> "ImageLink | None":
        model = validate_payload(ImageLinkModel, value)
        if model is None:
            return None
        media = model.image
        return cls(
            url=media.url,
            filename=media.name,
            kind=media.kind,
            size=media.size,
            width=media.width,
            height=media.height,
        )

    def get_url(self, resolver: LinkResolver | None = None) -> str:
        return self.url


def parse_link(node: object) -> Link | None:
    """Parse a nested ``{"type": "Link.*", "value": ...}`` node (image ``linkTo``, hyperlink spans)."""

    if not isinstance(node, Mapping):
        return None
    builder = _LINK_BUILDERS.get(node.get("type"))  # type: ignore[arg-type]
    if builder is None or "value" not in node:
        return None
    return builder(node["value"])


_LINK_BUILDERS: dict[str, Callable[[object], Link | None]] = {
    "Link.web": WebLink.parse,
    "Link.document": DocumentLink.parse,
    "Link.file": FileLink.parse,
    "Link.image": ImageLink.parse,
}
