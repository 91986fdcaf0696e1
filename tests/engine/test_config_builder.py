import json

import pytest

from rsearch.engine.algorithm.config import RandomSearchConfig, RandomSearchConfigData
from rsearch.foundation.exceptions import ConfigurationError, MissingConfigError


def test_default_config():
    cfg = RandomSearchConfig.default()
    assert isinstance(cfg, RandomSearchConfigData)
    assert cfg.max_iterations == 100
    assert cfg.batch_size == 1
    assert cfg.stop_at_optimum is True
    assert cfg.target is None
    assert cfg.record_history is True
    assert cfg.log_interval == 0


def test_fluent_builder_sets_every_field():
    cfg = (
        RandomSearchConfig()
        .max_iterations(500)
        .batch_size(50)
        .stop_at_optimum(False)
        .target(0.01)
        .record_history(False)
        .log_interval(10)
        .fixed()
    )
    assert cfg.to_dict() == {
        "max_iterations": 500,
        "batch_size": 50,
        "stop_at_optimum": False,
        "target": 0.01,
        "record_history": False,
        "log_interval": 10,
    }


def test_config_is_frozen():
    cfg = RandomSearchConfig.default()
    with pytest.raises(Exception):
        cfg.max_iterations = 3  # type: ignore[misc]


def test_to_json_roundtrips_through_from_dict():
    cfg = RandomSearchConfig().max_iterations(7).batch_size(3).fixed()
    data = json.loads(cfg.to_json())
    assert RandomSearchConfigData.from_dict(data) == cfg


def test_missing_max_iterations():
    with pytest.raises(MissingConfigError, match="max_iterations"):
        RandomSearchConfig().batch_size(4).fixed()


@pytest.mark.parametrize(
    "builder",
    [
        lambda: RandomSearchConfig().max_iterations(0),
        lambda: RandomSearchConfig().max_iterations(10).batch_size(0),
        lambda: RandomSearchConfig().max_iterations(10).log_interval(-1),
        lambda: RandomSearchConfig().max_iterations(10).target(float("nan")),
    ],
)
def test_invalid_values_rejected(builder):
    with pytest.raises(ConfigurationError):
        builder().fixed()


def test_from_dict_rejects_unknown_option():
    with pytest.raises(ConfigurationError, match="pop_size"):
        RandomSearchConfigData.from_dict({"max_iterations": 10, "pop_size": 20})


def test_from_dict_rejects_builder_internals():
    with pytest.raises(ConfigurationError):
        RandomSearchConfigData.from_dict({"max_iterations": 10, "fixed": True})
