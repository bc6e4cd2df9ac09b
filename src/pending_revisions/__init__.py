"""Editing-mode policies and pending revision decisions for managed content."""

__version__ = "0.1.0"
