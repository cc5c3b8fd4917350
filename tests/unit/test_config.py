"""tests/unit/test_config.py"""
import pytest
from rulechain.core.config import DEFAULT_CONFIG, EngineConfig, RuleChainConfig
from rulechain.symbolic.engine import InferenceEngine
from rulechain.version import VERSION_INFO, __version__


def test_defaults():
    assert DEFAULT_CONFIG.engine.max_passes == 100
    assert DEFAULT_CONFIG.server.example is None
    assert InferenceEngine().config.max_passes == 100


def test_for_example():
    cfg = RuleChainConfig.for_example("animal")
    assert cfg.server.example == "animal"
    assert DEFAULT_CONFIG.server.example is None


def test_max_passes_must_be_positive():
    with pytest.raises(ValueError):
        EngineConfig(max_passes=0)


def test_version_string():
    assert __version__ == str(VERSION_INFO)
    assert __version__.count(".") == 2
