"""rulechain/symbolic — Forward-chaining inference layer."""

from rulechain.symbolic.engine import InferenceEngine
from rulechain.symbolic.knowledge import (
    EXAMPLES,
    KnowledgeBase,
    get_example,
    load_knowledge_base,
)
from rulechain.symbolic.rules import RuleLoader, RuleValidator, parse_conditions, parse_rule
from rulechain.symbolic.trace import TraceRecorder, conclusions, format_trace

__all__ = [
    "InferenceEngine",
    "EXAMPLES",
    "KnowledgeBase",
    "get_example",
    "load_knowledge_base",
    "RuleLoader",
    "RuleValidator",
    "parse_conditions",
    "parse_rule",
    "TraceRecorder",
    "conclusions",
    "format_trace",
]
