"""Image fragments and their named views (resolutions/crops)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import Field

from .base import Fragment, StrictModel, validate_payload
from .links import Link, parse_link

logger = logging.getLogger(__name__)


class DimensionsModel(StrictModel):
    width: int
    height: int


class ImageViewModel(StrictModel):
    url: str
    dimensions: DimensionsModel
    alt: str | None = None
    copyright: str | None = None
    linkTo: dict[str, Any] | None = None


class ImageValueModel(StrictModel):
    main: dict[str, Any]
    views: dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True)
class ImageView:
    """One rendition of an image at a given size."""

    url: str
    width: int
    height: int
    alt: str | None = None
    copyright: str | None = None
    link_to: Link | None = None

    @classmethod
    def parse(cls, value: object) -> "ImageView | None":
        model = validate_payload(ImageViewModel, value)
        if model is None:
            return None
        return cls(
            url=model.url,
            width=model.dimensions.width,
            height=model.dimensions.height,
            alt=model.alt,
            copyright=model.copyright,
            link_to=parse_link(model.linkTo),
        )

    def ratio(self) -> float:
        return self.width / self.height if self.height else 0.0


@dataclass(frozen=True)
class Image(Fragment):
    main: ImageView
    views: Mapping[str, ImageView] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def parse(cls, value: object) -> "Image | None":
        """Parse the named views first, then the main view; a bad main view drops the image."""

        model = validate_payload(ImageValueModel, value)
        if model is None:
            return None

        views: dict[str, ImageView] = {}
        for name, payload in model.views.items():
            view = ImageView.parse(payload)
            if view is None:
                logger.debug("Dropping malformed image view '%s'", name)
                continue
            views[name] = view

        main = ImageView.parse(model.main)
        if main is None:
            return None
        return cls(main=main, views=MappingProxyType(views))

    def __hash__(self) -> int:
        return hash((self.main, tuple(self.views.items())))

    def get_view(self, name: str) -> ImageView | None:
        if name == "main":
            return self.main
        return self.views.get(name)

    def as_text(self) -> str | None:
        return self.main.alt
