"""Rectangle model: width, height and area."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Rectangle:
    """A plain rectangle. Width and height are not validated."""

    width: Any
    height: Any

    def area(self) -> Any:
        """Return ``width * height``."""
        return self.width * self.height
