# -*- coding: utf-8 -*-
"""
Node attributes for the DOT output.

Attribute kinds: label, shape, color, penwidth.
AttrSet keeps at most one attribute per kind; inserting a kind that is
already present leaves the stored value untouched (first write wins).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Iterable, Iterator, Optional, Union


def escape_dot_string(text: str) -> str:
    """
    Escape text for use inside a double-quoted DOT string.
    """
    return (
        str(text)
        .replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


class ShapeKind(Enum):
    RECTANGLE = "rectangle"
    DIAMOND = "diamond"


@dataclass(frozen=True)
class Label:
    kind: ClassVar[str] = "label"
    text: str

    @property
    def value(self) -> str:
        return self.text

    def as_dot(self) -> str:
        return f'label="{escape_dot_string(self.text)}"'


@dataclass(frozen=True)
class Shape:
    kind: ClassVar[str] = "shape"
    shape: ShapeKind

    @property
    def value(self) -> str:
        return self.shape.value

    def as_dot(self) -> str:
        return f"shape={self.shape.value}"


@dataclass(frozen=True)
class Color:
    kind: ClassVar[str] = "color"
    name: str

    @property
    def value(self) -> str:
        return self.name

    def as_dot(self) -> str:
        return f"color={self.name}"


@dataclass(frozen=True)
class PenWidth:
    kind: ClassVar[str] = "penwidth"
    width: int

    @property
    def value(self) -> int:
        return self.width

    def as_dot(self) -> str:
        return f"penwidth={int(self.width)}"


Attr = Union[Label, Shape, Color, PenWidth]


class AttrSet:
    """
    Mapping kind -> attribute, in insertion order.
    """

    def __init__(self, attrs: Iterable[Attr] = ()):
        self._by_kind: Dict[str, Attr] = {}
        for a in attrs:
            self.insert(a)

    def insert(self, attr: Attr) -> bool:
        """
        Store `attr` unless its kind is already present.
        Returns True if stored.
        """
        if attr.kind in self._by_kind:
            return False
        self._by_kind[attr.kind] = attr
        return True

    def get(self, kind: str) -> Optional[Attr]:
        return self._by_kind.get(kind)

    def layered(self, *attrs: Attr) -> "AttrSet":
        """
        Copy of this set with `attrs` inserted on top (same first-write-wins policy).
        """
        out = AttrSet(self._by_kind.values())
        for a in attrs:
            out.insert(a)
        return out

    def as_dict(self) -> Dict[str, Any]:
        return {k: a.value for k, a in self._by_kind.items()}

    def __contains__(self, kind: object) -> bool:
        return kind in self._by_kind

    def __iter__(self) -> Iterator[Attr]:
        return iter(self._by_kind.values())

    def __len__(self) -> int:
        return len(self._by_kind)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttrSet):
            return NotImplemented
        return self._by_kind == other._by_kind

    def __repr__(self) -> str:
        return f"AttrSet({list(self._by_kind.values())!r})"
