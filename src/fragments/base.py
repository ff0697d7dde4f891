"""Base contract shared by every fragment variant."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class StrictModel(BaseModel):
    """Payload model that rejects coercion (``"1.5"`` is not a float, ``True`` is not an int)."""

    model_config = ConfigDict(strict=True)


class Fragment(ABC):
    """One typed content value belonging to a document field."""

    @abstractmethod
    def as_text(self) -> str | None:
        """Return the plain-text rendition of the fragment, if it has one."""


def freeze(value: Any) -> Any:
    """Return a read-only deep copy of decoded JSON: mappings become proxies, lists become tuples."""

    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def validate_payload(model: type[ModelT], value: Any) -> ModelT | None:
    """Validate ``value`` against ``model``; ``None`` when the payload is malformed."""

    if not isinstance(value, Mapping):
        logger.debug("Expected an object for %s, got %s", model.__name__, type(value).__name__)
        return None
    try:
        return model.model_validate(_plain(value))
    except ValidationError as exc:
        logger.debug("Discarding malformed %s payload: %s", model.__name__, exc)
        return None
