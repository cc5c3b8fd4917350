"""
rulechain/symbolic/engine.py
============================
Main InferenceEngine: owns the rule set and the fact set, and
derives new facts by forward chaining until a fixpoint.

This is the 'brain' of RuleChain.
Servers, scripts and tests interact with it through this interface.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Set

from rulechain.core.config import EngineConfig
from rulechain.core.exceptions import InvalidFactError
from rulechain.core.types import DerivationResult, Rule, TraceKind, normalize_token
from rulechain.symbolic.trace import (
    LogCallback,
    TraceRecorder,
    check_message,
    done_message,
    fire_message,
    new_fact_message,
    start_message,
)

logger = logging.getLogger(__name__)


class InferenceEngine:
    """Forward-chaining inference engine over propositional rules.

    Responsibilities:
        1. Maintain the rules, in the order they were added
        2. Maintain the fact set, partitioned into given and derived facts
        3. Run forward chaining to a fixpoint (bounded by max_passes)
        4. Emit a trace of every reasoning step

    The engine has a single owner. It does no locking; callers sharing
    one instance across threads must serialise access themselves.

    Usage:
        engine = InferenceEngine()
        engine.add_rule(["fever", "cough"], "infection")
        engine.add_fact("fever")
        engine.add_fact("cough")
        result = engine.forward_chain()
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        log_callback: Optional[LogCallback] = None,
    ):
        self.config = config or EngineConfig()
        self._rules: List[Rule] = []
        self._facts: Dict[str, None] = {}      # insertion-ordered set
        self._derived: Dict[str, None] = {}    # subset of _facts produced by rules
        self._fired: Set[int] = set()          # rule ids fired in the current run
        self._rule_counter = 0
        self._log_callback = log_callback

    def set_log_callback(self, callback: Optional[LogCallback]) -> None:
        """Register ``callback(kind, message)`` for trace events; None disables it."""
        self._log_callback = callback

    # ─── RULE MANAGEMENT ───────────────────────────────────────────

    def add_rule(self, conditions: Iterable[str], conclusion: str) -> Rule:
        """Create a rule with the next sequential id.

        Raises InvalidRuleError if conditions are empty or any token
        is blank; the id counter is only advanced on success.
        """
        rule = Rule(self._rule_counter + 1, conditions, conclusion)
        self._rule_counter = rule.id
        self._rules.append(rule)
        logger.debug(f"Rule added: {rule}")
        return rule

    def remove_rule(self, rule_id: int) -> bool:
        for i, rule in enumerate(self._rules):
            if rule.id == rule_id:
                del self._rules[i]
                self._fired.discard(rule_id)
                logger.debug(f"Rule removed: {rule_id}")
                return True
        return False

    def get_rule(self, rule_id: int) -> Optional[Rule]:
        return next((r for r in self._rules if r.id == rule_id), None)

    @property
    def rules(self) -> List[Rule]:
        return list(self._rules)

    @property
    def rule_count(self) -> int:
        return len(self._rules)

    def is_fired(self, rule_id: int) -> bool:
        """Whether the rule fired during the most recent run."""
        return rule_id in self._fired

    def reset_rules(self) -> None:
        """Clear every fired marker so all rules are eligible again."""
        self._fired.clear()

    # ─── FACT MANAGEMENT ───────────────────────────────────────────

    def add_fact(self, fact: str, derived: bool = False) -> bool:
        """Add a fact. Returns True iff the fact set changed.

        Blank and already-known facts are no-ops.
        """
        token = self._normalize_fact(fact)
        if not token or token in self._facts:
            return False
        self._facts[token] = None
        if derived:
            self._derived[token] = None
        logger.debug(f"Fact added: {token}" + (" (derived)" if derived else ""))
        return True

    def remove_fact(self, fact: str) -> None:
        token = self._normalize_fact(fact)
        if token in self._facts:
            del self._facts[token]
            self._derived.pop(token, None)
            logger.debug(f"Fact removed: {token}")

    def has_fact(self, fact: str) -> bool:
        return self._normalize_fact(fact) in self._facts

    @property
    def facts(self) -> List[str]:
        return list(self._facts)

    @property
    def given_facts(self) -> List[str]:
        return [f for f in self._facts if f not in self._derived]

    @property
    def derived_facts(self) -> List[str]:
        return list(self._derived)

    @property
    def fact_count(self) -> int:
        return len(self._facts)

    def clear_derived(self) -> None:
        """Drop every derived fact. Given facts are untouched."""
        for token in self._derived:
            self._facts.pop(token, None)
        self._derived.clear()

    def clear_all(self) -> None:
        """Return to the empty-engine state, including the id counter."""
        self._rules.clear()
        self._facts.clear()
        self._derived.clear()
        self._fired.clear()
        self._rule_counter = 0
        logger.debug("Engine cleared")

    # ─── MAIN REASONING ────────────────────────────────────────────

    def forward_chain(self) -> DerivationResult:
        """Derive every fact reachable from the given facts.

        Steps:
            1. Reset fired markers and purge derived facts from earlier runs
            2. Pass over the unfired rules in id order; a satisfied rule fires
               once, adding its conclusion unless it is already known
            3. Repeat while a pass fired something, up to max_passes
            4. Report new facts, fired rules and the number of passes

        Rules earlier in id order fire first within a pass, so their
        conclusions are visible to later rules in that same pass.
        """
        self.reset_rules()
        self.clear_derived()

        trace = TraceRecorder(self._log_callback, log_trace=self.config.log_trace)
        result = DerivationResult()

        trace.emit(TraceKind.START, start_message(self.facts), facts=self.facts)

        changed = True
        passes = 0
        while changed and passes < self.config.max_passes:
            changed = False
            passes += 1
            trace.emit(TraceKind.ITERATION_CHECK, check_message(passes), **{"pass": passes})

            for rule in self._rules:
                if rule.id in self._fired or not rule.is_satisfied(self._facts):
                    continue

                self._fired.add(rule.id)
                if rule.conclusion in self._facts:
                    continue

                self.add_fact(rule.conclusion, derived=True)
                changed = True
                result.fired_rules.append(rule)
                result.new_facts.append(rule.conclusion)

                trace.emit(
                    TraceKind.FIRE,
                    fire_message(rule),
                    rule_id=rule.id,
                    conditions=list(rule.conditions),
                    conclusion=rule.conclusion,
                )
                trace.emit(TraceKind.NEW_FACT, new_fact_message(rule.conclusion), fact=rule.conclusion)

        if changed:
            logger.warning(
                f"Forward chaining stopped at the {self.config.max_passes}-pass cap "
                "before reaching a fixpoint"
            )

        result.iterations = passes
        trace.emit(
            TraceKind.DONE,
            done_message(len(result.fired_rules), len(result.new_facts)),
            fired_rules=len(result.fired_rules),
            new_facts=len(result.new_facts),
            iterations=passes,
        )
        result.trace = trace.events

        logger.info(
            f"Forward chaining complete: {len(result.fired_rules)} rules fired, "
            f"{len(result.new_facts)} new facts in {passes} passes"
        )
        return result

    run_forward_chaining = forward_chain

    # ─── PRIVATE HELPERS ───────────────────────────────────────────

    @staticmethod
    def _normalize_fact(fact: str) -> str:
        if not isinstance(fact, str):
            raise InvalidFactError(
                f"Fact tokens must be strings, got {type(fact).__name__}",
                context={"fact": fact},
            )
        return normalize_token(fact)
