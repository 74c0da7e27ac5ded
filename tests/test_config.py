import logging

import pytest

from bounded_value import BoundedParameter, ClampPolicy
from bounded_value.config import (
    Config,
    load_config,
    make_bounded_parameter_from_config,
    make_bounded_value_from_config,
)


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_load_config_resolves_suffix(tmp_path):
    _write(tmp_path / "gains.yaml", "kp:\n  min: 0.0\n  max: 2.0\n  initial: 0.5\n")
    config = load_config(tmp_path / "gains")
    assert config.kp.max == 2.0
    assert config.get("kp.initial") == 0.5
    assert config.get("kd.min", 7) == 7


def test_load_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_empty_config_loads_as_empty(tmp_path):
    config = load_config(_write(tmp_path / "empty.yaml", ""))
    assert config.get("min") is None


def test_config_is_immutable():
    config = Config({"min": 1})
    with pytest.raises(AttributeError):
        config.min = 2
    assert config.min == 1


def test_make_bounded_value_from_config():
    bounded = make_bounded_value_from_config(
        Config({"min": 10, "max": 0, "initial": 42, "policy": "asymmetric"})
    )
    assert (bounded.min, bounded.max, bounded.value) == (0, 10, 10)
    assert bounded.policy is ClampPolicy.ASYMMETRIC


def test_make_bounded_value_defaults_to_min():
    bounded = make_bounded_value_from_config(Config({"min": 3, "max": 9}))
    assert bounded.value == 3
    assert bounded.policy is ClampPolicy.BOTH


def test_missing_bounds_raise():
    with pytest.raises(ValueError, match="max"):
        make_bounded_value_from_config(Config({"min": 0}))


def test_unknown_policy_raises():
    with pytest.raises(ValueError):
        make_bounded_value_from_config(Config({"min": 0, "max": 1, "policy": "wrap"}))


def test_make_bounded_parameter_from_config(tmp_path):
    _write(tmp_path / "env.yaml", "ki:\n  name: KI\n  min: 0.0\n  max: 1.0\n  initial: 0.25\n")
    param = make_bounded_parameter_from_config(load_config(tmp_path / "env.yaml").ki)
    assert isinstance(param, BoundedParameter)
    assert param.name == "KI"
    assert param.value == 0.25


def test_parameter_from_config_logs_through_std_logging(caplog):
    param = make_bounded_parameter_from_config(Config({"name": "KD", "min": 0, "max": 5}))
    with caplog.at_level(logging.INFO, logger="bounded_value"):
        param.value = 9
    assert param.value == 5
    assert caplog.records[-1].getMessage() == "[KD] value 9 clipped to 5"
