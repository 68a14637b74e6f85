# cssbuilder/selectors/builder.py
from __future__ import annotations

"""Selector builder facade
--------------------------
One entry point per fragment kind, each starting a fresh SimpleSelector,
plus `combine` for building combinator trees:

    builder = css_selector_builder
    builder.combine(
        builder.element("div").id("main").class_("container"),
        "+",
        builder.element("table").id("data"),
    ).stringify()  # -> 'div#main.container + table#data'
"""

from typing import Union

from cssbuilder.selectors.base import Selector
from cssbuilder.selectors.combinator import Combinator, CombinedSelector
from cssbuilder.selectors.simple import SimpleSelector
from cssbuilder.utils.logger import get_logger

log = get_logger(__name__)


class CssSelectorBuilder:
    """Stateless facade; safe to share."""

    def element(self, value: str) -> SimpleSelector:
        return SimpleSelector().element(value)

    def id(self, value: str) -> SimpleSelector:
        return SimpleSelector().id(value)

    def class_(self, value: str) -> SimpleSelector:
        return SimpleSelector().class_(value)

    def attr(self, value: str) -> SimpleSelector:
        return SimpleSelector().attr(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return SimpleSelector().pseudo_element(value)

    def combine(
        self,
        selector1: Selector,
        combinator: Union[Combinator, str],
        selector2: Selector,
    ) -> CombinedSelector:
        """Join two selectors. Neither operand is modified."""
        for side in (selector1, selector2):
            if not isinstance(side, Selector):
                raise TypeError(f"combine() expects selectors with stringify(), got {type(side).__name__}")
        try:
            symbol = Combinator.coerce(combinator)
        except ValueError:
            log.debug(f"rejected combinator {combinator!r}")
            raise
        return CombinedSelector(left=selector1, combinator=symbol, right=selector2)


css_selector_builder = CssSelectorBuilder()

element = css_selector_builder.element
id = css_selector_builder.id
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine

__all__ = [
    "CssSelectorBuilder",
    "css_selector_builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]
