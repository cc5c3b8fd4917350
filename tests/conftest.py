"""
tests/conftest.py
==================
Shared pytest fixtures for all RuleChain tests.
"""

import pytest
from rulechain.core.config import EngineConfig
from rulechain.symbolic.engine import InferenceEngine
from rulechain.symbolic.knowledge import MEDICAL, load_knowledge_base


# ─── ENGINES ──────────────────────────────────────────────────────


@pytest.fixture
def engine():
    return InferenceEngine(config=EngineConfig(log_trace=False))


@pytest.fixture
def flu_engine(engine):
    """Two chained rules and the symptoms that trigger both."""
    engine.add_rule(["fever", "cough"], "infection")
    engine.add_rule(["infection", "body_aches"], "flu")
    for fact in ("fever", "cough", "body_aches"):
        engine.add_fact(fact)
    return engine


@pytest.fixture
def medical_engine(engine):
    load_knowledge_base(engine, MEDICAL)
    return engine


# ─── CALLBACKS ────────────────────────────────────────────────────


@pytest.fixture
def log_sink():
    """A notification hook that records every (kind, message) pair."""
    events = []

    def sink(kind, message):
        events.append((kind, message))

    sink.events = events
    return sink
