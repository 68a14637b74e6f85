# cssbuilder/selectors/base.py
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Selector(Protocol):
    """Anything that renders to selector text: simple or combined."""

    def stringify(self) -> str:
        ...
