"""
rulechain/symbolic/knowledge.py
===============================
Knowledge bases: a named bundle of rules, starting facts and
quick-fact suggestions that can be loaded into an engine in one go.

Three knowledge bases ship with RuleChain:
    medical — symptom → diagnosis → recommendation chains
    tech    — hardware and network troubleshooting
    animal  — classification by observable features
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from rulechain.core.exceptions import InvalidFactError, KnowledgeBaseError
from rulechain.core.types import Rule
from rulechain.symbolic.engine import InferenceEngine

logger = logging.getLogger(__name__)

RuleSpec = Tuple[List[str], str]   # (conditions, conclusion)


@dataclass
class KnowledgeBase:
    key:          str
    name:         str
    rules:        List[RuleSpec] = field(default_factory=list)
    facts:        List[str] = field(default_factory=list)
    quick_facts:  List[str] = field(default_factory=list)

    def suggestions(self, engine: InferenceEngine) -> List[str]:
        """Quick facts the engine does not know yet."""
        return [f for f in self.quick_facts if not engine.has_fact(f)]


def load_knowledge_base(engine: InferenceEngine, kb: KnowledgeBase) -> None:
    """Replace the engine's contents with ``kb``.

    Rules get fresh ids starting at 1, in the order listed. Every rule
    and fact is validated before the engine is touched, so a bad
    knowledge base raises and leaves the engine as it was.
    """
    rules = [Rule(i + 1, conditions, conclusion) for i, (conditions, conclusion) in enumerate(kb.rules)]
    for fact in kb.facts:
        if not isinstance(fact, str):
            raise InvalidFactError(
                f"Fact tokens must be strings, got {type(fact).__name__}",
                context={"fact": fact, "knowledge_base": kb.key},
            )

    engine.clear_all()
    for rule in rules:
        engine.add_rule(rule.conditions, rule.conclusion)
    for fact in kb.facts:
        engine.add_fact(fact)
    logger.info(f"Loaded knowledge base '{kb.name}': {engine.rule_count} rules, {engine.fact_count} facts")


# ─── BUNDLED EXAMPLES ─────────────────────────────────────────────

MEDICAL = KnowledgeBase(
    key="medical",
    name="Medical Diagnosis",
    rules=[
        (["fever", "cough"], "respiratory_infection"),
        (["respiratory_infection", "body_aches"], "flu"),
        (["flu", "high_fever"], "severe_flu"),
        (["sneezing", "runny_nose"], "common_cold"),
        (["fever", "cough", "loss_of_taste"], "possible_covid"),
        (["fever", "sore_throat", "swollen_glands"], "possible_strep"),
        (["flu"], "recommend_rest"),
        (["flu"], "recommend_fluids"),
        (["severe_flu"], "recommend_doctor_visit"),
    ],
    facts=["fever", "cough", "body_aches"],
    quick_facts=[
        "fever", "cough", "body_aches", "sneezing", "runny_nose",
        "sore_throat", "high_fever", "loss_of_taste", "fatigue", "headache",
    ],
)

TECH = KnowledgeBase(
    key="tech",
    name="Tech Support",
    rules=[
        (["no_power"], "check_power_cable"),
        (["check_power_cable", "cable_connected"], "check_outlet"),
        (["has_power", "no_display"], "check_monitor"),
        (["check_monitor", "monitor_on"], "check_video_cable"),
        (["slow_computer"], "check_processes"),
        (["check_processes", "high_cpu"], "close_programs"),
        (["check_processes", "high_memory"], "add_more_ram"),
        (["no_internet"], "check_wifi"),
        (["check_wifi", "wifi_connected"], "restart_router"),
        (["restart_router", "still_no_internet"], "contact_isp"),
    ],
    facts=["slow_computer", "high_cpu"],
    quick_facts=[
        "no_power", "has_power", "no_display", "slow_computer", "no_internet",
        "cable_connected", "monitor_on", "high_cpu", "high_memory", "wifi_connected",
    ],
)

ANIMAL = KnowledgeBase(
    key="animal",
    name="Animal Classification",
    rules=[
        (["has_feathers"], "bird"),
        (["bird", "can_fly"], "flying_bird"),
        (["bird", "cannot_fly", "swims"], "penguin"),
        (["flying_bird", "small", "sings"], "songbird"),
        (["has_fur", "gives_milk"], "mammal"),
        (["mammal", "has_stripes"], "zebra"),
        (["mammal", "has_spots", "long_neck"], "giraffe"),
        (["mammal", "lives_in_water"], "whale_or_dolphin"),
        (["has_scales", "lives_in_water"], "fish"),
        (["has_scales", "has_legs"], "reptile"),
    ],
    facts=["has_feathers", "can_fly", "small", "sings"],
    quick_facts=[
        "has_feathers", "can_fly", "cannot_fly", "swims", "small", "sings",
        "has_fur", "gives_milk", "has_stripes", "has_spots", "long_neck", "lives_in_water",
    ],
)

EXAMPLES: Dict[str, KnowledgeBase] = {kb.key: kb for kb in (MEDICAL, TECH, ANIMAL)}


def get_example(key: str) -> KnowledgeBase:
    try:
        return EXAMPLES[key]
    except KeyError:
        raise KnowledgeBaseError(
            f"Unknown example '{key}'. Available: {', '.join(sorted(EXAMPLES))}",
            source=key,
        ) from None
