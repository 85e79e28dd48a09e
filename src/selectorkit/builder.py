"""Fluent CSS selector builder.

Every operation returns a new :class:`SelectorBuilder`; the receiver is
never modified, so ``css_selector_builder`` can start any number of chains::

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

from selectorkit.errors import SelectorError
from selectorkit.model import Fragment, FragmentKind
from selectorkit.rules import DEFAULT_RULES, SelectorRules, validate

__all__ = ["SelectorBuilder", "css_selector_builder"]

logger = logging.getLogger(__name__)


class Stringifiable(Protocol):
    def stringify(self) -> str: ...


@dataclass(frozen=True)
class SelectorBuilder:
    """An immutable, ordered sequence of selector fragments."""

    fragments: tuple[Fragment, ...] = ()
    rules: SelectorRules = field(default=DEFAULT_RULES)

    # --- fragments --------------------------------------------------------

    def element(self, name: Any) -> SelectorBuilder:
        return self._append(FragmentKind.ELEMENT, f"{name}")

    def id(self, name: Any) -> SelectorBuilder:
        return self._append(FragmentKind.ID, f"#{name}")

    def class_(self, name: Any) -> SelectorBuilder:
        return self._append(FragmentKind.CLASS, f".{name}")

    def attr(self, expr: Any) -> SelectorBuilder:
        return self._append(FragmentKind.ATTRIBUTE, f"[{expr}]")

    def pseudo_class(self, name: Any) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_CLASS, f":{name}")

    def pseudo_element(self, name: Any) -> SelectorBuilder:
        return self._append(FragmentKind.PSEUDO_ELEMENT, f"::{name}")

    def combine(
        self, left: Stringifiable, combinator: str, right: Stringifiable
    ) -> SelectorBuilder:
        """Join two independently built selectors with *combinator*.

        The result is ``"<left> <combinator> <right>"``. Combining is
        expected to be the only step of its chain. It sorts last in the
        priority order, so it may follow other fragments (their text is
        simply concatenated in front), but any non-combinator fragment
        appended after it raises :class:`~selectorkit.errors.OrderError`.
        """
        return self._append(
            FragmentKind.COMBINATOR,
            f"{left.stringify()} {combinator} {right.stringify()}",
        )

    # --- output -----------------------------------------------------------

    def stringify(self) -> str:
        """Concatenate all fragment texts in order."""
        return "".join(fragment.text for fragment in self.fragments)

    @property
    def kinds(self) -> tuple[FragmentKind, ...]:
        return tuple(fragment.kind for fragment in self.fragments)

    def __str__(self) -> str:
        return self.stringify()

    def __len__(self) -> int:
        return len(self.fragments)

    def __getattr__(self, name: str) -> Any:
        # `class` is a keyword; getattr(builder, "class") still resolves.
        if name == "class":
            return self.class_
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    # --- internals --------------------------------------------------------

    def _append(self, kind: FragmentKind, text: str) -> SelectorBuilder:
        fragments = self.fragments + (Fragment(kind=kind, text=text),)
        try:
            validate([f.kind for f in fragments], self.rules)
        except SelectorError as exc:
            logger.debug(
                "Rejected %s fragment %r after %r: %s",
                kind.value, text, self.stringify(), exc,
            )
            raise
        return SelectorBuilder(fragments=fragments, rules=self.rules)


css_selector_builder = SelectorBuilder()
