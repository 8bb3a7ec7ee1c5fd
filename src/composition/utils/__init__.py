"""Utility helpers for the :mod:`composition` package."""

from .logging import InvocationCounter, setup_logging

__all__ = ["InvocationCounter", "setup_logging"]
