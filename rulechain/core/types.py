"""
rulechain/core/types.py
=======================
Foundation type system for RuleChain.
Every module imports from here. No circular dependencies.

Logical basis:
  - A Rule encodes a propositional Horn clause: c1 ∧ c2 ∧ ... ∧ cn → q
  - Facts are atomic propositions named by normalized string tokens
  - A DerivationResult is the audit record of one fixpoint computation
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from rulechain.core.exceptions import InvalidRuleError


def normalize_token(token: str) -> str:
    """Canonical form of a fact token: trimmed and lowercased."""
    return token.strip().lower()


# ─────────────────────────────────────────────
#  ENUMERATIONS
# ─────────────────────────────────────────────

class TraceKind(Enum):
    """Kinds of events emitted while forward chaining.

    START:           run begins, carries the starting fact set
    ITERATION_CHECK: one per pass over the rule set
    FIRE:            a rule fired and contributed a new fact
    NEW_FACT:        a fact was derived
    DONE:            run finished, carries the summary counts
    """
    START           = "start"
    ITERATION_CHECK = "iteration-check"
    FIRE            = "fire"
    NEW_FACT        = "new-fact"
    DONE            = "done"


# ─────────────────────────────────────────────
#  RULES
# ─────────────────────────────────────────────

@dataclass(frozen=True)
class Rule:
    """A propositional IF-THEN rule.

    Formal structure:
        conditions[0] AND conditions[1] AND ... → conclusion

    Tokens are normalized at construction, so equality between
    tokens is purely structural afterwards. Condition order is kept
    for display; it plays no part in satisfaction.

    Frozen: whether a rule fired during a run is tracked by the
    engine, never on the rule itself.

    Example:
        Rule(1, ("fever", "cough"), "respiratory_infection")
    """
    id:          int
    conditions:  Tuple[str, ...]
    conclusion:  str

    def __post_init__(self):
        conditions = self.conditions
        if isinstance(conditions, str) or not isinstance(conditions, Iterable):
            raise InvalidRuleError(
                "Rule conditions must be a sequence of tokens",
                context={"conditions": conditions},
            )
        conditions = list(conditions)
        if not conditions:
            raise InvalidRuleError("Rule must have at least one condition")
        for c in conditions + [self.conclusion]:
            if not isinstance(c, str):
                raise InvalidRuleError(
                    f"Rule tokens must be strings, got {type(c).__name__}",
                    context={"token": c},
                )

        normalized = tuple(normalize_token(c) for c in conditions)
        if not all(normalized):
            raise InvalidRuleError(
                "Rule conditions must not be blank",
                context={"conditions": conditions},
            )
        conclusion = normalize_token(self.conclusion)
        if not conclusion:
            raise InvalidRuleError("Rule must have a non-blank conclusion")

        object.__setattr__(self, "conditions", normalized)
        object.__setattr__(self, "conclusion", conclusion)

    def is_satisfied(self, facts) -> bool:
        """True iff every condition is a member of ``facts``."""
        return all(c in facts for c in self.conditions)

    def describe(self) -> str:
        return f"IF {' AND '.join(self.conditions)} THEN {self.conclusion}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "conditions": list(self.conditions),
            "conclusion": self.conclusion,
        }

    def __str__(self) -> str:
        return f"Rule {self.id}: {self.describe()}"


# ─────────────────────────────────────────────
#  TRACE & RESULT TYPES
# ─────────────────────────────────────────────

@dataclass
class TraceEvent:
    """One step of the reasoning path.

    ``details`` carries the structured payload of the event:
        ITERATION_CHECK → {"pass": n}
        FIRE            → {"rule_id", "conditions", "conclusion"}
        NEW_FACT        → {"fact"}
        DONE            → {"fired_rules", "new_facts", "iterations"}
    """
    kind:       TraceKind
    message:    str
    details:    Dict[str, Any] = field(default_factory=dict)
    timestamp:  float = field(default_factory=time.time, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "details": dict(self.details),
            "timestamp": self.timestamp,
        }


@dataclass
class DerivationResult:
    """Report of a single forward-chaining run.

    iterations counts every pass executed, including the final pass
    in which nothing fired.
    """
    new_facts:    List[str] = field(default_factory=list)
    fired_rules:  List[Rule] = field(default_factory=list)
    iterations:   int = 0
    trace:        List[TraceEvent] = field(default_factory=list)

    @property
    def fired_rule_ids(self) -> List[int]:
        return [r.id for r in self.fired_rules]

    def source_of(self, fact: str) -> Optional[Rule]:
        """The rule that derived ``fact`` in this run, if any."""
        token = normalize_token(fact)
        for rule in self.fired_rules:
            if rule.conclusion == token:
                return rule
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "new_facts": list(self.new_facts),
            "fired_rules": [r.to_dict() for r in self.fired_rules],
            "iterations": self.iterations,
            "trace": [e.to_dict() for e in self.trace],
        }
