"""Rectangle model: a width/height pair with an area computation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A rectangle with *width* and *height* stored verbatim.

    No validation is applied; any values supporting ``*`` work.
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height
