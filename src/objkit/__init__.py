"""objkit: rectangle values, JSON codec helpers and a CSS selector builder."""

__version__ = "0.1.0"
