"""
rulechain/__init__.py — Public API exports
"""

from rulechain.core.config import DEFAULT_CONFIG, EngineConfig, RuleChainConfig
from rulechain.core.exceptions import (
    InvalidFactError,
    InvalidRuleError,
    KnowledgeBaseError,
    RuleChainError,
)
from rulechain.core.types import (
    DerivationResult,
    Rule,
    TraceEvent,
    TraceKind,
)
from rulechain.symbolic.engine import InferenceEngine
from rulechain.symbolic.knowledge import EXAMPLES, KnowledgeBase, load_knowledge_base
from rulechain.symbolic.rules import RuleLoader, RuleValidator
from rulechain.version import __version__

__all__ = [
    "InferenceEngine",
    "Rule",
    "DerivationResult",
    "TraceEvent",
    "TraceKind",
    "KnowledgeBase",
    "EXAMPLES",
    "load_knowledge_base",
    "RuleLoader",
    "RuleValidator",
    "EngineConfig",
    "RuleChainConfig",
    "DEFAULT_CONFIG",
    "RuleChainError",
    "InvalidRuleError",
    "InvalidFactError",
    "KnowledgeBaseError",
    "__version__",
]
