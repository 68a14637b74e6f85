"""
Selectors package
-----------------
Build CSS selectors fragment by fragment, in the order CSS requires, and
join them with combinators into selector text.
"""

from .base import Selector
from .builder import CssSelectorBuilder, css_selector_builder
from .combinator import Combinator, CombinedSelector
from .fragments import (
    DuplicateFragmentError,
    FragmentCategory,
    InvalidCombinatorError,
    OutOfOrderError,
    SelectorBuildError,
)
from .simple import SimpleSelector

__all__ = [
    "Selector",
    "SimpleSelector",
    "CombinedSelector",
    "Combinator",
    "CssSelectorBuilder",
    "css_selector_builder",
    "FragmentCategory",
    "SelectorBuildError",
    "DuplicateFragmentError",
    "OutOfOrderError",
    "InvalidCombinatorError",
]
