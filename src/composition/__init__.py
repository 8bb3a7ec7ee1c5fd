"""composition
==============

Two-stage composition of unary callables, with small demo programs showing
both the pipe ordering and the mathematical ordering.
"""

from .functional import compose, compose_after, identity

__all__ = ["compose", "compose_after", "identity"]
