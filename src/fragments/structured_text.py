"""Rich text: an ordered list of blocks, each carrying offset-positioned spans."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from pydantic import Field

from .base import Fragment, StrictModel, validate_payload
from .embed import Embed
from .image import ImageView
from .links import Link, parse_link

logger = logging.getLogger(__name__)


class SpanModel(StrictModel):
    start: int
    end: int
    type: str
    data: dict[str, Any] = Field(default_factory=dict)


class TextBlockModel(StrictModel):
    type: str
    text: str = ""
    spans: list[Any] = Field(default_factory=list)
    label: str | None = None


class EmbedBlockModel(StrictModel):
    oembed: dict[str, Any]
    label: str | None = None


@dataclass(frozen=True)
class Span:
    start: int
    end: int


@dataclass(frozen=True)
class Strong(Span):
    pass


@dataclass(frozen=True)
class Em(Span):
    pass


@dataclass(frozen=True)
class Hyperlink(Span):
    link: Link | None = None


@dataclass(frozen=True)
class LabelSpan(Span):
    label: str = ""


@dataclass(frozen=True)
class Block:
    pass


@dataclass(frozen=True)
class TextBlock(Block):
    text: str
    spans: Sequence[Span] = field(default_factory=tuple)
    label: str | None = None


@dataclass(frozen=True)
class Heading(TextBlock):
    level: int = 1


@dataclass(frozen=True)
class Paragraph(TextBlock):
    pass


@dataclass(frozen=True)
class Preformatted(TextBlock):
    pass


@dataclass(frozen=True)
class ListItem(TextBlock):
    ordered: bool = False


@dataclass(frozen=True)
class ImageBlock(Block):
    view: ImageView
    label: str | None = None


@dataclass(frozen=True)
class EmbedBlock(Block):
    embed: Embed
    label: str | None = None


@dataclass(frozen=True)
class StructuredText(Fragment):
    blocks: Sequence[Block] = field(default_factory=tuple)

    @classmethod
    def parse(cls, value: object) -> "StructuredText | None":
        if not isinstance(value, list):
            logger.debug("Expected a list of blocks, got %s", type(value).__name__)
            return None
        blocks: list[Block] = []
        for payload in value:
            block = parse_block(payload)
            if block is None:
                logger.debug("Dropping malformed structured text block: %r", payload)
                continue
            blocks.append(block)
        return cls(blocks=tuple(blocks))

    def get_title(self) -> Heading | None:
        return self._first(Heading)

    def get_first_paragraph(self) -> Paragraph | None:
        return self._first(Paragraph)

    def get_first_preformatted(self) -> Preformatted | None:
        return self._first(Preformatted)

    def get_first_image(self) -> ImageView | None:
        block = self._first(ImageBlock)
        return block.view if block is not None else None

    def as_text(self) -> str:
        return "\n".join(block.text for block in self.blocks if isinstance(block, TextBlock))

    def _first(self, kind):
        for block in self.blocks:
            if isinstance(block, kind):
                return block
        return None


def parse_span(payload: object) -> Span | None:
    model = validate_payload(SpanModel, payload)
    if model is None or model.end < model.start:
        return None
    if model.type == "strong":
        return Strong(start=model.start, end=model.end)
    if model.type == "em":
        return Em(start=model.start, end=model.end)
    if model.type == "hyperlink":
        link = parse_link(model.data)
        if link is None:
            return None
        return Hyperlink(start=model.start, end=model.end, link=link)
    if model.type == "label":
        label = model.data.get("label")
        if not isinstance(label, str):
            return None
        return LabelSpan(start=model.start, end=model.end, label=label)
    return None


def _parse_spans(payloads: list[Any]) -> tuple[Span, ...]:
    spans: list[Span] = []
    for payload in payloads:
        span = parse_span(payload)
        if span is None:
            logger.debug("Dropping malformed span: %r", payload)
            continue
        spans.append(span)
    return tuple(spans)


def _text_block(factory: Callable[..., TextBlock]) -> Callable[[Mapping[str, Any]], Block | None]:
    def build(payload: Mapping[str, Any]) -> Block | None:
        model = validate_payload(TextBlockModel, payload)
        if model is None:
            return None
        return factory(text=model.text, spans=_parse_spans(model.spans), label=model.label)

    return build


def _image_block(payload: Mapping[str, Any]) -> Block | None:
    view = ImageView.parse(payload)
    if view is None:
        return None
    label = payload.get("label")
    return ImageBlock(view=view, label=label if isinstance(label, str) else None)


def _embed_block(payload: Mapping[str, Any]) -> Block | None:
    model = validate_payload(EmbedBlockModel, payload)
    if model is None:
        return None
    embed = Embed.from_oembed(model.oembed)
    if embed is None:
        return None
    return EmbedBlock(embed=embed, label=model.label)


def _heading(level: int) -> Callable[..., TextBlock]:
    def factory(**kwargs: Any) -> TextBlock:
        return Heading(level=level, **kwargs)

    return factory


_BLOCK_BUILDERS: dict[str, Callable[[Mapping[str, Any]], Block | None]] = {
    **{f"heading{level}": _text_block(_heading(level)) for level in range(1, 7)},
    "paragraph": _text_block(Paragraph),
    "preformatted": _text_block(Preformatted),
    "list-item": _text_block(lambda **kwargs: ListItem(ordered=False, **kwargs)),
    "o-list-item": _text_block(lambda **kwargs: ListItem(ordered=True, **kwargs)),
    "image": _image_block,
    "embed": _embed_block,
}


def parse_block(payload: object) -> Block | None:
    """Build one block from its ``{"type": ..., ...}`` payload; unknown kinds are skipped."""

    if not isinstance(payload, Mapping):
        return None
    builder = _BLOCK_BUILDERS.get(payload.get("type"))  # type: ignore[arg-type]
    if builder is None:
        return None
    return builder(payload)
