"""oEmbed-backed fragments (videos, tweets, rich media)."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import Field

from .base import Fragment, StrictModel, freeze, validate_payload


class OEmbedModel(StrictModel):
    type: str
    embed_url: str
    provider_name: str | None = None
    width: int | None = None
    height: int | None = None
    html: str | None = None


class EmbedValueModel(StrictModel):
    oembed: dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True)
class Embed(Fragment):
    """Embedded third-party content described by its oEmbed record.

    ``oembed`` is a read-only deep copy of the record; nested objects are
    read-only mappings and arrays are tuples.
    """

    type: str
    url: str
    provider: str | None = None
    width: int | None = None
    height: int | None = None
    html: str | None = None
    oembed: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def parse(cls, value: object) -> "Embed | None":
        wrapper = validate_payload(EmbedValueModel, value)
        if wrapper is None:
            return None
        return cls.from_oembed(wrapper.oembed)

    @classmethod
    def from_oembed(cls, oembed: object) -> "Embed | None":
        model = validate_payload(OEmbedModel, oembed)
        if model is None:
            return None
        return cls(
            type=model.type,
            url=model.embed_url,
            provider=model.provider_name,
            width=model.width,
            height=model.height,
            html=model.html,
            oembed=freeze(oembed),
        )

    def __hash__(self) -> int:
        return hash((self.type, self.url))

    def as_text(self) -> None:
        return None
