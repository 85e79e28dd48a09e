"""Selector model: FragmentKind enum and the Fragment value type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """Kind of a single selector fragment."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMBINATOR = "combinator"


@dataclass(frozen=True)
class Fragment:
    """One rendered selector segment.

    Attributes:
        kind: What the fragment selects on.
        text: The pre-rendered text, e.g. ``#main`` for an id.
    """

    kind: FragmentKind
    text: str

    def __str__(self) -> str:
        return self.text
