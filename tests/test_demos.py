from __future__ import annotations

import numpy as np
import pytest

from composition.config import AffixDemoConfig, ValuableItemsConfig, default_config
from composition.demos import (
    DEMOS,
    UnknownDemoError,
    complex_thing,
    counting_valuable_items,
    hello_world,
    reading_from_db,
    run_all,
    run_demo,
    valuable_items,
)
from composition.utils.logging import InvocationCounter


def test_complex_thing_default():
    result = complex_thing(default_config().demos.complex_thing)
    assert result.value == "ComplexThing"
    assert result.message == "ComplexThing"


def test_hello_world_default():
    result = hello_world(default_config().demos.hello_world)
    assert result.value == "HelloWorld"


def test_hello_world_runs_producer_before_appender():
    counter = InvocationCounter()
    result = hello_world(AffixDemoConfig(prefix="Good", suffix="bye"), counter)
    assert result.value == "Goodbye"
    assert counter.counts == {"hello_world.produce": 1, "hello_world.append": 1}
    assert list(counter.counts) == ["hello_world.produce", "hello_world.append"]


def test_valuable_items_default():
    result = valuable_items(default_config().demos.valuable_items)
    assert result.value == 3
    assert result.message == "Valuable items: 3"


def test_valuable_items_custom_threshold():
    cfg = ValuableItemsConfig(key="other", records=[5, 10, 15], threshold=10)
    assert valuable_items(cfg).value == 2


def test_reading_from_db_ignores_key():
    read = reading_from_db([1, 2, 3, 0, -1, 100])
    np.testing.assert_array_equal(read("someKey"), read("anotherKey"))
    np.testing.assert_array_equal(read("someKey"), np.array([1, 2, 3, 0, -1, 100]))


def test_counting_valuable_items_returns_int():
    count = counting_valuable_items(1)
    value = count(np.array([1, 2, 3, 0, -1, 100]))
    assert value == 3
    assert isinstance(value, int)
    assert count(np.array([], dtype=np.int64)) == 0


def test_each_stage_runs_once():
    counter = InvocationCounter()
    run_all(default_config(), counter)
    assert len(counter.counts) == 6
    assert all(calls == 1 for calls in counter.counts.values())


def test_run_all_in_registry_order():
    results = run_all(default_config())
    assert [result.name for result in results] == list(DEMOS)
    assert [result.message for result in results] == ["ComplexThing", "HelloWorld", "Valuable items: 3"]


def test_run_demo_unknown_name():
    with pytest.raises(UnknownDemoError, match="nope"):
        run_demo("nope", default_config())
