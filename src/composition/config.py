"""Configuration utilities for the composition demos."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping

import yaml


class ConfigError(ValueError):
    """Raised when a configuration value has the wrong shape."""


@dataclass
class AffixDemoConfig:
    """A produced prefix and the suffix appended to it."""

    prefix: str
    suffix: str


@dataclass
class ValuableItemsConfig:
    """Fake lookup table and the threshold below which an item is valuable."""

    key: str = "someKey"
    records: List[int] = field(default_factory=lambda: [1, 2, 3, 0, -1, 100])
    threshold: int = 1


@dataclass
class DemosConfig:
    complex_thing: AffixDemoConfig = field(default_factory=lambda: AffixDemoConfig("Complex", "Thing"))
    hello_world: AffixDemoConfig = field(default_factory=lambda: AffixDemoConfig("Hello", "World"))
    valuable_items: ValuableItemsConfig = field(default_factory=ValuableItemsConfig)


@dataclass
class LoggingConfig:
    """Logging verbosity and formatting options."""

    level: str = "INFO"
    rich_tracebacks: bool = True


@dataclass
class AppConfig:
    """Top-level configuration object composed of sub-configurations."""

    demos: DemosConfig = field(default_factory=DemosConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def default_config() -> AppConfig:
    return AppConfig()


def load_yaml(path: Path) -> Mapping[str, Any]:
    """Load a YAML document and return a mapping."""

    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigError(f"{path} must contain a mapping at the top level, got {type(raw).__name__}.")
    return raw


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"'{name}' must be a mapping, got {type(value).__name__}.")
    return value


def _coerce_int(value: Any, name: str) -> int:
    # bool is an int subclass; floats would be truncated.
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ConfigError(f"'{name}' must be an integer, got {value!r}.")
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigError(f"'{name}' must be an integer, got {value!r}.") from exc


def _affix(raw: Mapping[str, Any], default: AffixDemoConfig) -> AffixDemoConfig:
    return AffixDemoConfig(
        prefix=str(raw.get("prefix", default.prefix)),
        suffix=str(raw.get("suffix", default.suffix)),
    )


def _records(value: Any) -> List[int]:
    if not isinstance(value, list):
        raise ConfigError(f"'records' must be a list of integers, got {type(value).__name__}.")
    return [_coerce_int(item, "records") for item in value]


def load_app_config(path: Path) -> AppConfig:
    """Load :class:`AppConfig` from ``path``, falling back to defaults per key.

    Sections that are not mappings and integer fields holding anything other
    than an integer (or a string spelling one) raise :class:`ConfigError`.
    """

    raw = load_yaml(Path(path))
    demos = _section(raw, "demos")
    logging_cfg = _section(raw, "logging")
    defaults = default_config()

    valuable = _section(demos, "valuable_items")
    valuable_default = defaults.demos.valuable_items

    app_config = AppConfig(
        demos=DemosConfig(
            complex_thing=_affix(_section(demos, "complex_thing"), defaults.demos.complex_thing),
            hello_world=_affix(_section(demos, "hello_world"), defaults.demos.hello_world),
            valuable_items=ValuableItemsConfig(
                key=str(valuable.get("key", valuable_default.key)),
                records=_records(valuable.get("records", valuable_default.records)),
                threshold=_coerce_int(valuable.get("threshold", valuable_default.threshold), "threshold"),
            ),
        ),
        logging=LoggingConfig(
            level=str(logging_cfg.get("level", "INFO")),
            rich_tracebacks=bool(logging_cfg.get("rich_tracebacks", True)),
        ),
    )
    return app_config


__all__ = [
    "ConfigError",
    "AffixDemoConfig",
    "ValuableItemsConfig",
    "DemosConfig",
    "LoggingConfig",
    "AppConfig",
    "default_config",
    "load_yaml",
    "load_app_config",
]
