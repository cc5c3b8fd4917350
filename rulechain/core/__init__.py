"""rulechain/core — Types, configuration and exceptions."""

from rulechain.core.config import DEFAULT_CONFIG, EngineConfig, RuleChainConfig, ServerConfig
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
    normalize_token,
)

__all__ = [
    "DEFAULT_CONFIG",
    "EngineConfig",
    "RuleChainConfig",
    "ServerConfig",
    "RuleChainError",
    "InvalidRuleError",
    "InvalidFactError",
    "KnowledgeBaseError",
    "DerivationResult",
    "Rule",
    "TraceEvent",
    "TraceKind",
    "normalize_token",
]
