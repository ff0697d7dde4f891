"""Typed fragment values parsed from content API payloads."""

from .base import Fragment
from .collection import WithFragments
from .embed import Embed
from .group import Group, GroupDoc
from .image import Image, ImageView
from .links import DocumentLink, FileLink, ImageLink, Link, LinkResolver, WebLink
from .registry import DEFAULT_FRAGMENT_REGISTRY, FragmentRegistry, build_default_registry, parse_fragment
from .scalars import Color, Date, GeoPoint, Number, Text, Timestamp
from .structured_text import (
    Block,
    Em,
    EmbedBlock,
    Heading,
    Hyperlink,
    ImageBlock,
    LabelSpan,
    ListItem,
    Paragraph,
    Preformatted,
    Span,
    Strong,
    StructuredText,
    TextBlock,
)

__all__ = [
    "Fragment",
    "WithFragments",
    "Text",
    "Number",
    "Color",
    "Date",
    "Timestamp",
    "GeoPoint",
    "Embed",
    "Image",
    "ImageView",
    "Link",
    "LinkResolver",
    "WebLink",
    "DocumentLink",
    "FileLink",
    "ImageLink",
    "StructuredText",
    "Block",
    "TextBlock",
    "Heading",
    "Paragraph",
    "Preformatted",
    "ListItem",
    "ImageBlock",
    "EmbedBlock",
    "Span",
    "Strong",
    "Em",
    "Hyperlink",
    "LabelSpan",
    "Group",
    "GroupDoc",
    "FragmentRegistry",
    "DEFAULT_FRAGMENT_REGISTRY",
    "build_default_registry",
    "parse_fragment",
]
