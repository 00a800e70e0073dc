"""Bisection root finding, minimum enclosing circles and point-in-polygon tests."""

__version__ = "0.1.0"