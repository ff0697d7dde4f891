"""Single-value fragments: text, numbers, colors, dates and geo-points."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from .base import Fragment, StrictModel, validate_payload

_TIMESTAMP_FORMATS = ("%Y-%m-%dT%H:%M:%S%z", "%Y-%m-%dT%H:%M:%S.%f%z")


class GeoPointModel(StrictModel):
    latitude: float
    longitude: float


@dataclass(frozen=True)
class Text(Fragment):
    """Plain string content; also used for ``Select`` fields."""

    value: str

    def as_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number(Fragment):
    value: int | float

    def as_int(self) -> int:
        return int(self.value)

    def as_text(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Color(Fragment):
    """Hex color such as ``#ff0000``."""

    hex_value: str

    def as_text(self) -> str:
        return self.hex_value


@dataclass(frozen=True)
class Date(Fragment):
    """Calendar date kept as the ``YYYY-MM-DD`` string sent by the API."""

    value: str

    def as_date(self) -> date:
        return date.fromisoformat(self.value)

    def as_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class Timestamp(Fragment):
    """Point in time kept as the ISO-8601 string sent by the API.

    Offsets may come without a colon, e.g. ``2014-06-18T15:30:00+0000``.
    """

    value: str

    def as_datetime(self) -> datetime:
        for fmt in _TIMESTAMP_FORMATS:
            try:
                return datetime.strptime(self.value, fmt)
            except ValueError:
                continue
        raise ValueError(f"Unrecognised timestamp '{self.value}'")

    def as_text(self) -> str:
        return self.value


@dataclass(frozen=True)
class GeoPoint(Fragment):
    latitude: float
    longitude: float

    @classmethod
    def parse(cls, value: object) -> "GeoPoint | None":
        model = validate_payload(GeoPointModel, value)
        if model is None:
            return None
        return cls(latitude=model.latitude, longitude=model.longitude)

    def as_text(self) -> str:
        return f"{self.latitude},{self.longitude}"
