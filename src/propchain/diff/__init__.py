"""Comparison of the levels of a property chain."""

from .inspector import ChainInspector, KeyChange, ChangeType

__all__ = ["ChainInspector", "KeyChange", "ChangeType"]
