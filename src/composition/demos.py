"""Three small programs chaining a producer into a transformer.

``complex_thing`` and ``hello_world`` build a string from a constant producer
and a suffix; ``valuable_items`` pretends to read integers for a key and counts
the ones at or below a threshold.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from .config import AffixDemoConfig, AppConfig, ValuableItemsConfig
from .functional import compose, compose_after
from .typing import Transformation
from .utils.logging import InvocationCounter

logger = logging.getLogger(__name__)


class UnknownDemoError(KeyError):
    """Raised when a demo name is not registered."""


@dataclass(frozen=True)
class DemoResult:
    name: str
    value: Any
    message: str


def _stage(counter: Optional[InvocationCounter], label: str, fn: Transformation) -> Transformation:
    if counter is None:
        return fn
    return counter.counted(label, fn)


def producing(text: str) -> Callable[[Any], str]:
    """Return a transformation that ignores its input and yields ``text``."""

    return lambda _: text


def appending(suffix: str) -> Callable[[str], str]:
    return lambda value: value + suffix


def reading_from_db(records: List[int]) -> Callable[[str], np.ndarray]:
    """Return a stand-in lookup yielding ``records`` whatever the key."""

    def _read(key: str) -> np.ndarray:
        logger.debug("Reading %d records for key %r", len(records), key)
        return np.asarray(records, dtype=np.int64)

    return _read


def counting_valuable_items(threshold: int) -> Callable[[np.ndarray], int]:
    """Return a transformation counting the elements ``<= threshold``."""

    def _count(values: np.ndarray) -> int:
        return int(np.count_nonzero(np.asarray(values) <= threshold))

    return _count


def complex_thing(cfg: AffixDemoConfig, counter: Optional[InvocationCounter] = None) -> DemoResult:
    make_thing = compose(
        _stage(counter, "complex_thing.produce", producing(cfg.prefix)),
        _stage(counter, "complex_thing.append", appending(cfg.suffix)),
    )
    thing = make_thing(None)
    return DemoResult("complex_thing", thing, thing)


def hello_world(cfg: AffixDemoConfig, counter: Optional[InvocationCounter] = None) -> DemoResult:
    # Mathematical order: the appender is written first but runs last.
    greet = compose_after(
        _stage(counter, "hello_world.append", appending(cfg.suffix)),
        _stage(counter, "hello_world.produce", producing(cfg.prefix)),
    )
    greeting = greet(None)
    return DemoResult("hello_world", greeting, greeting)


def valuable_items(cfg: ValuableItemsConfig, counter: Optional[InvocationCounter] = None) -> DemoResult:
    how_many_valuable_items = compose(
        _stage(counter, "valuable_items.read", reading_from_db(cfg.records)),
        _stage(counter, "valuable_items.count", counting_valuable_items(cfg.threshold)),
    )
    count = how_many_valuable_items(cfg.key)
    return DemoResult("valuable_items", count, f"Valuable items: {count}")


DEMOS: Dict[str, Callable[[AppConfig, Optional[InvocationCounter]], DemoResult]] = {
    "complex_thing": lambda config, counter: complex_thing(config.demos.complex_thing, counter),
    "hello_world": lambda config, counter: hello_world(config.demos.hello_world, counter),
    "valuable_items": lambda config, counter: valuable_items(config.demos.valuable_items, counter),
}


def run_demo(name: str, config: AppConfig, counter: Optional[InvocationCounter] = None) -> DemoResult:
    """Run the demo registered under ``name``."""

    try:
        runner = DEMOS[name]
    except KeyError as exc:
        raise UnknownDemoError(f"Unknown demo '{name}'; expected one of {sorted(DEMOS)}.") from exc
    result = runner(config, counter)
    logger.info("Demo %s produced %r", name, result.value)
    return result


def run_all(config: AppConfig, counter: Optional[InvocationCounter] = None) -> List[DemoResult]:
    return [run_demo(name, config, counter) for name in DEMOS]


__all__ = [
    "UnknownDemoError",
    "DemoResult",
    "producing",
    "appending",
    "reading_from_db",
    "counting_valuable_items",
    "complex_thing",
    "hello_world",
    "valuable_items",
    "DEMOS",
    "run_demo",
    "run_all",
]
