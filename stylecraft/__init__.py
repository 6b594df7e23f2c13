"""Stylecraft - themeable stylesheet generation for Qt applications."""

__version__ = "0.1.0"
