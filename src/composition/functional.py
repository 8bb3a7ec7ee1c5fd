"""Composition of unary callables.

Two orderings are offered under distinct names:

* :func:`compose` chains in pipe order, ``compose(f, g)(a) == g(f(a))``.
* :func:`compose_after` chains in mathematical order, ``compose_after(g, f)(a) == g(f(a))``.

Neither helper validates its arguments or catches anything raised by the
stages; a failure in the first stage means the second is never called.
"""

from __future__ import annotations

from typing import Callable

from .typing import A, B, C


def compose(f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """Return a callable applying ``f`` first and ``g`` second."""

    def _inner(value: A) -> C:
        return g(f(value))

    return _inner


def compose_after(g: Callable[[B], C], f: Callable[[A], B]) -> Callable[[A], C]:
    """Return ``g`` after ``f``; the right-hand argument runs first."""

    return compose(f, g)


def identity(value: A) -> A:
    return value


__all__ = ["compose", "compose_after", "identity"]
