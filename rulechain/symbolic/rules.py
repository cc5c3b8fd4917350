"""
rulechain/symbolic/rules.py
===========================
Rule management: text parsing, JSON loading, validation.

Rules are the domain knowledge of RuleChain.
This module provides:
    1. parse_conditions / parse_rule — read rules typed by a person
    2. RuleLoader    — load and save knowledge bases as JSON
    3. RuleValidator — flag rule sets that feed back into themselves
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Set, Tuple

from rulechain.core.exceptions import InvalidRuleError, KnowledgeBaseError
from rulechain.core.types import Rule
from rulechain.symbolic.knowledge import KnowledgeBase

logger = logging.getLogger(__name__)

RULE_ARROW = "->"


# ─────────────────────────────────────────────
#  TEXT PARSING
# ─────────────────────────────────────────────


def parse_conditions(text: str) -> List[str]:
    """Split ``"fever, cough"`` into tokens, dropping blank pieces."""
    return [c.strip() for c in text.split(",") if c.strip()]


def parse_rule(text: str) -> Tuple[List[str], str]:
    """Parse ``"fever, cough -> infection"`` into (conditions, conclusion)."""
    if RULE_ARROW not in text:
        raise InvalidRuleError(
            f"Rule '{text}' is missing '{RULE_ARROW}'",
            context={"text": text},
        )
    if text.count(RULE_ARROW) > 1:
        raise InvalidRuleError(
            f"Rule '{text}' has more than one '{RULE_ARROW}'",
            context={"text": text},
        )
    lhs, rhs = text.split(RULE_ARROW, 1)
    conditions = parse_conditions(lhs)
    conclusion = rhs.strip()
    if not conditions or not conclusion:
        raise InvalidRuleError(
            f"Rule '{text}' needs at least one condition and a conclusion",
            context={"text": text},
        )
    return conditions, conclusion


# ─────────────────────────────────────────────
#  RULE LOADER
# ─────────────────────────────────────────────


class RuleLoader:
    """Load knowledge bases from JSON or dict config.

    JSON format:
    {
      "name": "Medical Diagnosis",
      "rules": [
        {"conditions": ["fever", "cough"], "conclusion": "respiratory_infection"}
      ],
      "facts": ["fever", "cough"],
      "quick_facts": ["fever", "cough", "sneezing"]
    }

    A bare list is accepted as a rules-only knowledge base.
    """

    @classmethod
    def from_json(cls, path: str) -> KnowledgeBase:
        p = Path(path)
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise KnowledgeBaseError(f"Cannot read knowledge base: {e}", source=str(path)) from e
        return cls.from_dict(data, key=p.stem)

    @classmethod
    def from_dict(cls, data: Any, key: str = "custom") -> KnowledgeBase:
        if isinstance(data, list):
            data = {"rules": data}
        if not isinstance(data, dict):
            raise KnowledgeBaseError(
                f"Knowledge base must be an object or a list, got {type(data).__name__}",
                source=key,
            )

        rules = []
        for i, item in enumerate(_list_field(data, "rules", key)):
            try:
                conditions = item["conditions"]
                conclusion = item["conclusion"]
            except (KeyError, TypeError) as e:
                raise KnowledgeBaseError(
                    f"Rule #{i + 1} needs 'conditions' and 'conclusion'",
                    source=key,
                    context={"rule": item},
                ) from e
            if isinstance(conditions, str):
                conditions = parse_conditions(conditions)
            elif not isinstance(conditions, list):
                raise KnowledgeBaseError(
                    f"Rule #{i + 1} conditions must be a list or a comma-separated string",
                    source=key,
                    context={"rule": item},
                )
            rules.append((list(conditions), conclusion))

        kb = KnowledgeBase(
            key=key,
            name=data.get("name", key),
            rules=rules,
            facts=_list_field(data, "facts", key),
            quick_facts=_list_field(data, "quick_facts", key),
        )
        logger.info(f"Loaded {len(kb.rules)} rules and {len(kb.facts)} facts from '{key}'.")
        return kb

    @classmethod
    def to_dict(cls, kb: KnowledgeBase) -> Dict[str, Any]:
        return {
            "name": kb.name,
            "rules": [
                {"conditions": list(conditions), "conclusion": conclusion}
                for conditions, conclusion in kb.rules
            ],
            "facts": list(kb.facts),
            "quick_facts": list(kb.quick_facts),
        }

    @classmethod
    def to_json(cls, kb: KnowledgeBase, path: str) -> None:
        Path(path).write_text(json.dumps(cls.to_dict(kb), indent=2), encoding="utf-8")


def _list_field(data: Dict[str, Any], name: str, key: str) -> List[Any]:
    """A list-valued knowledge-base field; missing or null means empty."""
    value = data.get(name)
    if value is None:
        return []
    if not isinstance(value, list):
        raise KnowledgeBaseError(
            f"'{name}' must be a list, got {type(value).__name__}",
            source=key,
            context={name: value},
        )
    return list(value)


# ─────────────────────────────────────────────
#  RULE VALIDATOR
# ─────────────────────────────────────────────


class RuleValidator:
    """Advisory checks on a rule set.

    Checks:
        1. No rule concludes one of its own conditions
        2. No conclusion feeds back (transitively) into the rule that produced it
        3. No two rules with the same conditions and conclusion

    None of these stop forward chaining from terminating, since each
    rule fires at most once per run. They usually point at a typo.
    """

    @classmethod
    def validate(cls, rules: List[Rule]) -> List[str]:
        """Returns list of warning strings. Empty = clean."""
        warnings = []
        seen: Dict[Tuple[frozenset, str], int] = {}

        for rule in rules:
            signature = (frozenset(rule.conditions), rule.conclusion)
            if signature in seen:
                warnings.append(f"Rule {rule.id} duplicates rule {seen[signature]}")
            else:
                seen[signature] = rule.id

            if rule.conclusion in rule.conditions:
                warnings.append(f"Rule {rule.id} concludes its own condition '{rule.conclusion}'")

        warnings.extend(cls._check_circular(rules))
        return warnings

    @classmethod
    def _check_circular(cls, rules: List[Rule]) -> List[str]:
        """Detect conclusions that are transitive preconditions of themselves."""
        # token → tokens it helps derive
        leads_to: Dict[str, Set[str]] = {}
        for rule in rules:
            for cond in rule.conditions:
                leads_to.setdefault(cond, set()).add(rule.conclusion)

        errors = []
        for rule in rules:
            if rule.conclusion in rule.conditions:
                continue  # already reported as self-referential
            reachable = cls._reachable(rule.conclusion, leads_to)
            looped = [c for c in rule.conditions if c in reachable]
            if looped:
                errors.append(
                    f"Circular dependency: rule {rule.id} conclusion '{rule.conclusion}' "
                    f"leads back to '{looped[0]}'"
                )
        return errors

    @staticmethod
    def _reachable(start: str, leads_to: Dict[str, Set[str]]) -> Set[str]:
        seen: Set[str] = set()
        stack = [start]
        while stack:
            token = stack.pop()
            for nxt in leads_to.get(token, ()):
                if nxt not in seen:
                    seen.add(nxt)
                    stack.append(nxt)
        return seen
