"""Repeatable groups: ordered lists of nested fragment bags."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Sequence

from .base import Fragment
from .collection import WithFragments

logger = logging.getLogger(__name__)

FragmentParser = Callable[[object], Fragment | None]


@dataclass(frozen=True)
class GroupDoc(WithFragments):
    """One item of a group, keyed by bare field name."""

    fragments: Mapping[str, Fragment] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def parse(cls, value: Mapping[str, object], parse_fragment: FragmentParser) -> "GroupDoc":
        fragments: dict[str, Fragment] = {}
        for name, node in value.items():
            fragment = parse_fragment(node)
            if fragment is not None:
                fragments[name] = fragment
        return cls(fragments=MappingProxyType(fragments))

    def __hash__(self) -> int:
        return hash(tuple(self.fragments.items()))


@dataclass(frozen=True)
class Group(Fragment):
    docs: Sequence[GroupDoc] = field(default_factory=tuple)

    @classmethod
    def parse(cls, value: object, parse_fragment: FragmentParser) -> "Group | None":
        """Parse every field-map in ``value`` through ``parse_fragment``, recursing into nested groups."""

        if not isinstance(value, list):
            logger.debug("Expected a list of group items, got %s", type(value).__name__)
            return None
        docs: list[GroupDoc] = []
        for item in value:
            if not isinstance(item, Mapping):
                logger.debug("Skipping group item that is not an object: %r", item)
                continue
            docs.append(GroupDoc.parse(item, parse_fragment))
        return cls(docs=tuple(docs))

    def __iter__(self) -> Iterator[GroupDoc]:
        return iter(self.docs)

    def __len__(self) -> int:
        return len(self.docs)

    def __getitem__(self, index: int) -> GroupDoc:
        return self.docs[index]

    def as_text(self) -> str:
        texts = (doc.as_text() for doc in self.docs)
        return "\n".join(text for text in texts if text)
