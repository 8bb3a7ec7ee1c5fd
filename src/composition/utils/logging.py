"""Console logging and stage-invocation tracing for the demos.

:func:`setup_logging` routes demo results (INFO) and stage activity (DEBUG)
through a rich console. :class:`InvocationCounter` wraps individual stages so
callers can see how often each one ran; the CLI prints it for ``--trace``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict

from rich.console import Console
from rich.logging import RichHandler

from ..typing import A, B


def setup_logging(level: str = "INFO", rich_tracebacks: bool = True) -> None:
    """Send demo log records to a rich console; unknown level names mean INFO."""

    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    handler = RichHandler(console=Console(), rich_tracebacks=rich_tracebacks, show_path=False)
    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
    )


@dataclass
class InvocationCounter:
    """Track how many times each labelled stage has been called."""

    counts: Dict[str, int] = field(default_factory=dict)

    def incr(self, **kwargs: int) -> None:
        for key, value in kwargs.items():
            self.counts[key] = self.counts.get(key, 0) + int(value)

    def counted(self, label: str, fn: Callable[[A], B]) -> Callable[[A], B]:
        """Wrap ``fn`` so every call is recorded under ``label`` before it runs."""

        def _inner(value: A) -> B:
            self.incr(**{label: 1})
            return fn(value)

        return _inner

    def __getitem__(self, label: str) -> int:
        return self.counts.get(label, 0)


__all__ = ["setup_logging", "InvocationCounter"]
