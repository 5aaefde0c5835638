"""
Analyzer module.

Contains the derived, on-demand classifications of IR nodes.
"""

from __future__ import annotations

from .classifier import enum_value_kind, is_enum, literal_kind

__all__ = [
    "is_enum",
    "enum_value_kind",
    "literal_kind",
]
