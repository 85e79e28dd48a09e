"""Ordering and uniqueness rules for selector fragments.

Each check takes the kinds of a proposed fragment sequence and raises a
:class:`~selectorkit.errors.SelectorError` when the sequence breaks a rule.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from selectorkit.errors import DuplicateSegmentError, OrderError
from selectorkit.model import FragmentKind


# ---------------------------------------------------------------------------
# Rule set
# ---------------------------------------------------------------------------

DEFAULT_ORDER: tuple[FragmentKind, ...] = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
    FragmentKind.COMBINATOR,
)

DEFAULT_SINGLE: frozenset[FragmentKind] = frozenset({
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.PSEUDO_ELEMENT,
})


@dataclass(frozen=True)
class SelectorRules:
    """The rule set a builder validates against.

    ``order`` must list every :class:`FragmentKind` exactly once.
    """

    order: tuple[FragmentKind, ...] = DEFAULT_ORDER
    single: frozenset[FragmentKind] = field(default=DEFAULT_SINGLE)

    def __post_init__(self) -> None:
        object.__setattr__(self, "order", tuple(self.order))
        object.__setattr__(self, "single", frozenset(self.single))
        if sorted(k.value for k in self.order) != sorted(k.value for k in FragmentKind):
            raise ValueError(
                "order must list every fragment kind exactly once, got "
                + ", ".join(k.value for k in self.order)
            )

    def index(self, kind: FragmentKind) -> int:
        """Priority index of *kind*; lower sorts first."""
        return self.order.index(kind)


DEFAULT_RULES = SelectorRules()


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def distinct_kinds(kinds: Iterable[FragmentKind]) -> list[FragmentKind]:
    """Return *kinds* with repeats dropped, keeping first-occurrence order."""
    seen: list[FragmentKind] = []
    for kind in kinds:
        if kind not in seen:
            seen.append(kind)
    return seen


def check_duplicates(
    kinds: Sequence[FragmentKind], rules: SelectorRules = DEFAULT_RULES
) -> None:
    """Single-occurrence kinds may appear at most once."""
    seen: set[FragmentKind] = set()
    for kind in kinds:
        if kind in seen and kind in rules.single:
            raise DuplicateSegmentError(kind)
        seen.add(kind)


def check_order(
    kinds: Sequence[FragmentKind], rules: SelectorRules = DEFAULT_RULES
) -> None:
    """Distinct kinds must appear in strictly increasing priority."""
    if len(kinds) == 1:
        return
    distinct = distinct_kinds(kinds)
    for previous, kind in zip(distinct, distinct[1:]):
        if rules.index(kind) <= rules.index(previous):
            raise OrderError(kind, previous, rules.order)


def validate(
    kinds: Sequence[FragmentKind], rules: SelectorRules = DEFAULT_RULES
) -> None:
    """Run the duplicate check, then the order check."""
    check_duplicates(kinds, rules)
    check_order(kinds, rules)
