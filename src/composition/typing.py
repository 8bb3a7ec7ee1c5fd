"""Shared typing aliases for the composition package."""

from __future__ import annotations

from typing import Callable, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

Transformation = Callable[[A], B]

__all__ = ["A", "B", "C", "Transformation"]
