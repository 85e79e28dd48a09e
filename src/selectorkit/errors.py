"""Error hierarchy for selector building."""

from __future__ import annotations

from typing import Sequence

from selectorkit.model import FragmentKind


class SelectorError(Exception):
    """Base error for all selectorkit errors."""

    def __init__(self, message: str, *, kind: FragmentKind) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateSegmentError(SelectorError):
    """An element, id or pseudo-element fragment was added a second time."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one "
            f"time inside the selector (repeated: {kind.value})",
            kind=kind,
        )


class OrderError(SelectorError):
    """A fragment was added out of the priority order."""

    def __init__(
        self,
        kind: FragmentKind,
        previous: FragmentKind,
        order: Sequence[FragmentKind] = tuple(FragmentKind),
    ) -> None:
        # combinators are left out of the listed order
        listed = ", ".join(k.value for k in order if k is not FragmentKind.COMBINATOR)
        super().__init__(
            f"Selector parts should be arranged in the following order: {listed} "
            f"({kind.value} placed after {previous.value})",
            kind=kind,
        )
        self.previous = previous
        self.order = tuple(order)
