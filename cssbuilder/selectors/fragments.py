# cssbuilder/selectors/fragments.py
from __future__ import annotations

"""Fragment categories and build errors
---------------------------------------
A simple selector is written in a fixed order: element, id, classes,
attributes, pseudo-classes, pseudo-element. Each fragment kind maps to a
category; a selector node only ever moves forward through them.
"""

from enum import IntEnum


class FragmentCategory(IntEnum):
    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


# Categories that may appear at most once per simple selector
SINGLE_USE = frozenset({FragmentCategory.ELEMENT, FragmentCategory.ID, FragmentCategory.PSEUDO_ELEMENT})


class SelectorBuildError(ValueError):
    """Base class for selectors assembled in a way CSS does not allow."""


class DuplicateFragmentError(SelectorBuildError):
    def __init__(self, category: FragmentCategory) -> None:
        self.category = category
        super().__init__(
            f"{category.label} already set: element, id and pseudo-element "
            "should not occur more than one time inside the selector"
        )


class OutOfOrderError(SelectorBuildError):
    def __init__(self, category: FragmentCategory, reached: FragmentCategory) -> None:
        self.category = category
        self.reached = reached
        super().__init__(
            f"cannot add {category.label} after {reached.label}: selector parts should be "
            "arranged in the following order: element, id, class, attribute, pseudo-class, pseudo-element"
        )


class InvalidCombinatorError(SelectorBuildError):
    def __init__(self, symbol: object) -> None:
        self.symbol = symbol
        super().__init__(f"unknown combinator {symbol!r}; expected one of ' ', '>', '+', '~'")


__all__ = [
    "FragmentCategory",
    "SINGLE_USE",
    "SelectorBuildError",
    "DuplicateFragmentError",
    "OutOfOrderError",
    "InvalidCombinatorError",
]
