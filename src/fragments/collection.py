"""Read-only accessors over a bag of named fragments."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Mapping, TypeVar

from .base import Fragment
from .embed import Embed
from .image import Image, ImageView
from .links import Link
from .scalars import Color, Date, GeoPoint, Number, Text, Timestamp
from .structured_text import Heading, Paragraph, StructuredText

if TYPE_CHECKING:
    from .group import Group

FragmentT = TypeVar("FragmentT", bound=Fragment)

_TRUTHY_TEXT = {"yes", "true"}


class WithFragments:
    """Typed lookups shared by documents and group items.

    Subclasses expose a ``fragments`` mapping keyed by field name; for documents
    the key is ``"{type}.{field}"``, with ``[i]`` appended for array elements.
    """

    fragments: Mapping[str, Fragment]

    def get(self, name: str) -> Fragment | None:
        return self.fragments.get(name)

    def get_all(self, name: str) -> list[Fragment]:
        """Return the indexed ``name[i]`` fragments in index order."""

        pattern = re.compile(re.escape(name) + r"\[(\d+)\]")
        indexed: list[tuple[int, Fragment]] = []
        for key, fragment in self.fragments.items():
            match = pattern.fullmatch(key)
            if match:
                indexed.append((int(match.group(1)), fragment))
        return [fragment for _, fragment in sorted(indexed, key=lambda item: item[0])]

    def get_text(self, name: str) -> str | None:
        fragment = self._typed(name, Text)
        return fragment.value if fragment is not None else None

    def get_number(self, name: str) -> Number | None:
        return self._typed(name, Number)

    def get_boolean(self, name: str) -> bool:
        text = self.get_text(name)
        return text is not None and text.strip().lower() in _TRUTHY_TEXT

    def get_date(self, name: str) -> Date | None:
        return self._typed(name, Date)

    def get_timestamp(self, name: str) -> Timestamp | None:
        return self._typed(name, Timestamp)

    def get_color(self, name: str) -> Color | None:
        return self._typed(name, Color)

    def get_geo_point(self, name: str) -> GeoPoint | None:
        return self._typed(name, GeoPoint)

    def get_embed(self, name: str) -> Embed | None:
        return self._typed(name, Embed)

    def get_link(self, name: str) -> Link | None:
        return self._typed(name, Link)

    def get_structured_text(self, name: str) -> StructuredText | None:
        return self._typed(name, StructuredText)

    def get_group(self, name: str) -> "Group | None":
        from .group import Group  # noqa: F811 - group imports this module

        return self._typed(name, Group)

    def get_image(self, name: str, view: str | None = None) -> Image | ImageView | None:
        image = self._typed(name, Image)
        if image is None or view is None:
            return image
        return image.get_view(view)

    def get_first_title(self) -> Heading | None:
        for fragment in self.fragments.values():
            if isinstance(fragment, StructuredText):
                title = fragment.get_title()
                if title is not None:
                    return title
        return None

    def get_first_paragraph(self) -> Paragraph | None:
        for fragment in self.fragments.values():
            if isinstance(fragment, StructuredText):
                paragraph = fragment.get_first_paragraph()
                if paragraph is not None:
                    return paragraph
        return None

    def get_first_image(self) -> ImageView | None:
        for fragment in self.fragments.values():
            if isinstance(fragment, Image):
                return fragment.main
            if isinstance(fragment, StructuredText):
                view = fragment.get_first_image()
                if view is not None:
                    return view
        return None

    def as_text(self) -> str:
        texts = (fragment.as_text() for fragment in self.fragments.values())
        return "\n".join(text for text in texts if text)

    def _typed(self, name: str, kind: type[FragmentT]) -> FragmentT | None:
        fragment = self.fragments.get(name)
        return fragment if isinstance(fragment, kind) else None
