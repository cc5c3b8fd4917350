"""
rulechain/core/exceptions.py
============================
Custom exception hierarchy for RuleChain.

All exceptions carry structured context so callers can
programmatically handle different failure modes.
"""

from __future__ import annotations
from typing import Optional


class RuleChainError(Exception):
    """Base exception for all RuleChain errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidRuleError(RuleChainError, ValueError):
    """Raised when a rule is rejected at creation time: no conditions,
    a blank condition, a blank conclusion, or a non-string token.

    The engine is left unchanged when this is raised.
    """

    pass


class InvalidFactError(RuleChainError, ValueError):
    """Raised when a fact token is not a string."""

    pass


class KnowledgeBaseError(RuleChainError):
    """Raised when a knowledge base cannot be found, parsed,
    or is structurally invalid."""

    def __init__(self, message: str, source: Optional[str] = None, context: Optional[dict] = None):
        super().__init__(message, context)
        self.source = source
