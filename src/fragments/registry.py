"""Tag-based dispatch from raw ``{"type", "value"}`` nodes to fragment variants."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from .base import Fragment
from .embed import Embed
from .group import Group
from .image import Image
from .links import DocumentLink, FileLink, ImageLink, WebLink
from .scalars import Color, Date, GeoPoint, Number, Text, Timestamp
from .structured_text import StructuredText

logger = logging.getLogger(__name__)

FragmentBuilder = Callable[[Any], Fragment | None]


def _string(factory: Callable[[str], Fragment]) -> FragmentBuilder:
    def build(value: Any) -> Fragment | None:
        return factory(value) if isinstance(value, str) else None

    return build


def _number(value: Any) -> Fragment | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return Number(value)


class FragmentRegistry:
    """Registry mapping exact, case-sensitive tag strings to fragment builders."""

    def __init__(self, *, report_unknown: bool = True) -> None:
        self._builders: dict[str, FragmentBuilder] = {}
        self._unknown_level = logging.WARNING if report_unknown else logging.DEBUG

    def register(self, tag: str, builder: FragmentBuilder) -> None:
        self._builders[tag] = builder

    def tags(self) -> tuple[str, ...]:
        return tuple(self._builders)

    def parse(self, node: object) -> Fragment | None:
        """Build the fragment for ``node``.

        Returns ``None`` for anything that cannot be represented: a node that is
        not an object, lacks ``type`` or ``value``, carries an unknown tag, or
        whose payload the variant rejects.
        """

        if not isinstance(node, Mapping) or "type" not in node:
            return None
        tag = node["type"]
        builder = self._builders.get(tag) if isinstance(tag, str) else None
        if builder is None:
            logger.log(self._unknown_level, "Ignoring fragment with unknown type %r", tag)
            return None
        if "value" not in node:
            logger.debug("Ignoring %s fragment without a value", tag)
            return None
        fragment = builder(node["value"])
        if fragment is None:
            logger.debug("Ignoring malformed %s fragment", tag)
        return fragment


def build_default_registry(*, report_unknown: bool = True) -> FragmentRegistry:
    """Create a registry with every fragment type the content API emits."""

    registry = FragmentRegistry(report_unknown=report_unknown)
    registry.register("Image", Image.parse)
    registry.register("Color", _string(Color))
    registry.register("GeoPoint", GeoPoint.parse)
    registry.register("Number", _number)
    registry.register("Date", _string(Date))
    registry.register("Timestamp", _string(Timestamp))
    registry.register("Text", _string(Text))
    registry.register("Select", _string(Text))
    registry.register("Embed", Embed.parse)
    registry.register("Link.web", WebLink.parse)
    registry.register("Link.document", DocumentLink.parse)
    registry.register("Link.file", FileLink.parse)
    registry.register("Link.image", ImageLink.parse)
    registry.register("StructuredText", StructuredText.parse)
    registry.register("Group", lambda value: Group.parse(value, registry.parse))
    return registry


DEFAULT_FRAGMENT_REGISTRY = build_default_registry()


def parse_fragment(node: object) -> Fragment | None:
    """Parse ``node`` with the default registry."""

    return DEFAULT_FRAGMENT_REGISTRY.parse(node)
