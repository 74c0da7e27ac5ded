from pathlib import Path
from typing import Any, Optional

import yaml

from bounded_value.bounded_value import BoundedValue, ClampPolicy
from bounded_value.logger import Logger, StdLoggingLogger
from bounded_value.parameter import BoundedParameter


class Config:
    """Иммутабельная обёртка над секцией YAML с доступом по ключу через точку."""
    __slots__ = ('_data',)

    def __init__(self, data: Optional[dict[str, Any]] = None):
        object.__setattr__(self, '_data', {} if data is None else data)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Config is immutable. Cannot set attribute '{name}'")

    def get(self, key: str, default: Any = None) -> Any:
        node = self._data
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return Config(node) if isinstance(node, dict) else node

    def __getattr__(self, key: str) -> Any:
        value = self.get(key)
        if value is None:
            raise AttributeError(f"Config has no attribute '{key}'")
        return value


def load_config(config_path: str | Path) -> Config:
    config_path = Path(config_path)
    if config_path.suffix not in ('.yaml', '.yml'):
        config_path = config_path.with_suffix('.yaml')

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path.resolve()}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return Config(yaml.safe_load(f) or {})


def _read_bounds(config: Config) -> tuple[Any, Any]:
    missing = [key for key in ("min", "max") if config.get(key) is None]
    if missing:
        raise ValueError(f"Bounded value config is missing keys: {missing}")
    return config.get("min"), config.get("max")


def make_bounded_value_from_config(config: Config) -> BoundedValue:
    min_val, max_val = _read_bounds(config)
    policy = ClampPolicy.from_str(config.get("policy", ClampPolicy.BOTH.value))
    bounded = BoundedValue.between(min_val, max_val, policy)

    initial = config.get("initial")
    if initial is not None:
        bounded = bounded.set(initial)
    return bounded


def make_bounded_parameter_from_config(
    config: Config, logger: Optional[Logger] = None
) -> BoundedParameter:
    """Без явного логгера сообщения о клиппинге уходят в logging."""
    min_val, max_val = _read_bounds(config)
    return BoundedParameter(
        min_val,
        max_val,
        config.get("initial"),
        name=config.get("name", "PARAM"),
        logger=logger or StdLoggingLogger(),
        policy=config.get("policy", ClampPolicy.BOTH.value),
    )
