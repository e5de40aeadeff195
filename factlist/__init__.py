"""Fact Check List Pattern teaching demo."""

__version__ = "0.1.0"
