"""Adapters for showing an optional value through a control that always needs one.

The placeholder stands in for ``None`` on the way out, and a value equal to
the placeholder is read back as ``None``.
"""
from typing import TypeVar

T = TypeVar("T")


def to_display(value: T | None, placeholder: T) -> T:
    return placeholder if value is None else value


def from_display(value: T, placeholder: T) -> T | None:
    return None if value == placeholder else value
