# cssbuilder/selectors/combinator.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

from cssbuilder.selectors.base import Selector
from cssbuilder.selectors.fragments import InvalidCombinatorError
from cssbuilder.selectors.simple import SimpleSelector


class Combinator(str, Enum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def coerce(cls, symbol: Union["Combinator", str]) -> "Combinator":
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidCombinatorError(symbol) from None


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator; either side may itself be combined."""
    left: Selector
    combinator: Combinator
    right: Selector

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator.value} {self.right.stringify()}"

    def simple_selectors(self) -> Iterator[SimpleSelector]:
        """Yield the simple selectors at the leaves, left to right."""
        for side in (self.left, self.right):
            if isinstance(side, CombinedSelector):
                yield from side.simple_selectors()
            elif isinstance(side, SimpleSelector):
                yield side

    def __str__(self) -> str:
        return self.stringify()
