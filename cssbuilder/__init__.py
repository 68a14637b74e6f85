"""
CSS selector builder.

    from cssbuilder import css_selector_builder as b
    b.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
"""

from cssbuilder.selectors import (
    Combinator,
    CombinedSelector,
    CssSelectorBuilder,
    DuplicateFragmentError,
    InvalidCombinatorError,
    OutOfOrderError,
    Selector,
    SelectorBuildError,
    SimpleSelector,
    css_selector_builder,
)

__all__ = [
    "Combinator",
    "CombinedSelector",
    "CssSelectorBuilder",
    "DuplicateFragmentError",
    "InvalidCombinatorError",
    "OutOfOrderError",
    "Selector",
    "SelectorBuildError",
    "SimpleSelector",
    "css_selector_builder",
]
