"""selectorkit: a fluent builder for simplified CSS selector strings."""

from selectorkit.builder import SelectorBuilder, css_selector_builder
from selectorkit.errors import DuplicateSegmentError, OrderError, SelectorError
from selectorkit.model import Fragment, FragmentKind
from selectorkit.rules import DEFAULT_RULES, SelectorRules

__version__ = "0.1.0"

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "SelectorError",
    "DuplicateSegmentError",
    "OrderError",
    "Fragment",
    "FragmentKind",
    "SelectorRules",
    "DEFAULT_RULES",
]
