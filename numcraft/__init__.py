"""Arithmetic, number-base, finance, geometry, text, matrix and pattern utilities with menu-driven tools."""

__version__ = "0.1.0"