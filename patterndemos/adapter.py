"""Adapter: present a corner-based legacy rectangle as a size-based one."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class Rectangle(ABC):
    """A drawable rectangle."""

    @abstractmethod
    def draw(self) -> None:
        """Draw the rectangle."""


class LegacyRectangle:
    """A rectangle given by two corners."""

    def __init__(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self.x1, self.y1, self.x2, self.y2 = x1, y1, x2, y2
        print(f"LegacyRectangle: create. {self._corners()}")

    def _corners(self) -> str:
        return f"({self.x1},{self.y1})=>({self.x2},{self.y2})"

    def old_draw(self) -> str:
        """Draw using the legacy interface and return the line drawn."""
        line = f"LegacyRectangle: oldDraw. {self._corners()}"
        print(line)
        return line


class RectangleAdapter(Rectangle):
    """A rectangle given by origin and size, drawn through a legacy rectangle."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self._legacy = LegacyRectangle(x, y, x + width, y + height)
        print(f"RectangleAdapter: create. ({x},{y}),width={width}, height = {height}")

    def draw(self) -> None:
        print("Rectangle: draw")
        self._legacy.old_draw()


def main(argv: list[str] | None = None) -> int:
    """Create an adapted rectangle and draw it."""
    rectangle: Rectangle = RectangleAdapter(120, 200, 60, 40)
    rectangle.draw()
    return 0


if __name__ == "__main__":
    sys.exit(main())