# cssbuilder/selectors/simple.py
from __future__ import annotations

"""Simple selector builder
--------------------------
Mutable, chainable builder for one non-combined selector. Ordering and
uniqueness are checked at the call that adds a fragment, so a bad chain
fails exactly where it goes wrong.
"""

from typing import Any, Dict, List, Optional

from cssbuilder.selectors.fragments import (
    SINGLE_USE,
    DuplicateFragmentError,
    FragmentCategory,
    OutOfOrderError,
)
from cssbuilder.utils.logger import get_logger

log = get_logger(__name__)


class SimpleSelector:
    """
    element#id.class[attr]:pseudo-class::pseudo-element

    Every mutator returns the selector itself:
        SimpleSelector().element("a").attr('href$=".png"').pseudo_class("focus")
    """

    def __init__(self) -> None:
        self._element: Optional[str] = None
        self._id: Optional[str] = None
        self._classes: List[str] = []
        self._attributes: List[str] = []
        self._pseudo_classes: List[str] = []
        self._pseudo_element: Optional[str] = None
        self._highest = FragmentCategory.NONE

    # ---------- State ----------

    @property
    def highest_category(self) -> FragmentCategory:
        return self._highest

    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self._classes)

    @property
    def attributes(self) -> tuple[str, ...]:
        return tuple(self._attributes)

    @property
    def pseudo_classes(self) -> tuple[str, ...]:
        return tuple(self._pseudo_classes)

    def _is_set(self, category: FragmentCategory) -> bool:
        if category == FragmentCategory.ELEMENT:
            return self._element is not None
        if category == FragmentCategory.ID:
            return self._id is not None
        return self._pseudo_element is not None

    def _advance(self, category: FragmentCategory) -> None:
        # Duplicate wins over ordering when both apply
        if category in SINGLE_USE and self._is_set(category):
            log.debug(f"rejected second {category.label} on {self.stringify()!r}")
            raise DuplicateFragmentError(category)
        if category < self._highest:
            log.debug(f"rejected {category.label} after {self._highest.label} on {self.stringify()!r}")
            raise OutOfOrderError(category, self._highest)
        self._highest = max(self._highest, category)

    # ---------- Fragments ----------

    def element(self, value: str) -> "SimpleSelector":
        self._advance(FragmentCategory.ELEMENT)
        self._element = value
        return self

    def id(self, value: str) -> "SimpleSelector":
        self._advance(FragmentCategory.ID)
        self._id = value
        return self

    def class_(self, value: str) -> "SimpleSelector":
        self._advance(FragmentCategory.CLASS)
        self._classes.append(value)
        return self

    def attr(self, value: str) -> "SimpleSelector":
        """Add a raw attribute expression, e.g. 'href$=".png"'. Written verbatim inside [...]."""
        self._advance(FragmentCategory.ATTRIBUTE)
        self._attributes.append(value)
        return self

    def pseudo_class(self, value: str) -> "SimpleSelector":
        self._advance(FragmentCategory.PSEUDO_CLASS)
        self._pseudo_classes.append(value)
        return self

    def pseudo_element(self, value: str) -> "SimpleSelector":
        self._advance(FragmentCategory.PSEUDO_ELEMENT)
        self._pseudo_element = value
        return self

    # ---------- Output ----------

    def stringify(self) -> str:
        parts = [self._element or ""]
        if self._id is not None:
            parts.append(f"#{self._id}")
        parts.extend(f".{c}" for c in self._classes)
        parts.extend(f"[{a}]" for a in self._attributes)
        parts.extend(f":{p}" for p in self._pseudo_classes)
        if self._pseudo_element is not None:
            parts.append(f"::{self._pseudo_element}")
        return "".join(parts)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "element": self._element,
            "id": self._id,
            "classes": list(self._classes),
            "attrs": list(self._attributes),
            "pseudo_classes": list(self._pseudo_classes),
            "pseudo_element": self._pseudo_element,
        }

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SimpleSelector({self.stringify()!r})"
