"""References to documents that the current document links to."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from pydantic import BaseModel, Field, ValidationError

from .errors import MalformedDocumentError


class LinkedDocumentPayload(BaseModel):
    id: str
    type: str
    tags: list[str] = Field(default_factory=list)
    slug: str | None = None


@dataclass(frozen=True)
class LinkedDocument:
    """Snapshot of a linked document without its fragments."""

    id: str
    type: str
    tags: Sequence[str] = field(default_factory=tuple)
    slug: str | None = None

    @classmethod
    def parse(cls, payload: Any) -> "LinkedDocument":
        try:
            model = LinkedDocumentPayload.model_validate(payload)
        except ValidationError as exc:
            raise MalformedDocumentError(f"Linked document is invalid: {exc}") from exc
        return cls(id=model.id, type=model.type, tags=tuple(model.tags), slug=model.slug)
