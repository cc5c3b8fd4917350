"""tests/unit/test_knowledge.py — Bundled knowledge bases"""
import pytest
from rulechain.core.exceptions import InvalidFactError, InvalidRuleError, KnowledgeBaseError
from rulechain.symbolic.knowledge import (
    ANIMAL,
    EXAMPLES,
    MEDICAL,
    TECH,
    KnowledgeBase,
    get_example,
    load_knowledge_base,
)


class TestExamples:
    def test_registry(self):
        assert set(EXAMPLES) == {"medical", "tech", "animal"}
        assert get_example("tech") is TECH

    def test_unknown_example_raises(self):
        with pytest.raises(KnowledgeBaseError) as exc:
            get_example("astrology")
        assert exc.value.source == "astrology"

    def test_load_replaces_engine_contents(self, engine):
        engine.add_rule(["old"], "stale")
        engine.add_fact("old")
        load_knowledge_base(engine, MEDICAL)
        assert engine.rule_count == len(MEDICAL.rules)
        assert engine.rules[0].id == 1
        assert engine.facts == ["fever", "cough", "body_aches"]

    def test_bad_rule_leaves_engine_untouched(self, engine):
        engine.add_rule(["x"], "y")
        engine.add_fact("x")
        bad = KnowledgeBase("bad", "Bad", rules=[(["a"], "b"), ([], "c")])
        with pytest.raises(InvalidRuleError):
            load_knowledge_base(engine, bad)
        assert [r.describe() for r in engine.rules] == ["IF x THEN y"]
        assert engine.facts == ["x"]

    def test_bad_fact_leaves_engine_untouched(self, engine):
        engine.add_rule(["x"], "y")
        engine.add_fact("x")
        bad = KnowledgeBase("bad", "Bad", rules=[(["a"], "b")], facts=["a", 7])
        with pytest.raises(InvalidFactError):
            load_knowledge_base(engine, bad)
        assert engine.rule_count == 1
        assert engine.facts == ["x"]

    def test_suggestions_skip_known_facts(self, medical_engine):
        suggestions = MEDICAL.suggestions(medical_engine)
        assert "fever" not in suggestions
        assert suggestions[0] == "sneezing"


class TestExampleRuns:
    def test_medical(self, medical_engine):
        result = medical_engine.forward_chain()
        assert result.new_facts == [
            "respiratory_infection", "flu", "recommend_rest", "recommend_fluids",
        ]
        assert result.iterations == 2

    def test_medical_severe(self, medical_engine):
        medical_engine.add_fact("high_fever")
        result = medical_engine.forward_chain()
        assert "severe_flu" in result.new_facts
        assert result.new_facts[-1] == "recommend_doctor_visit"

    def test_tech(self, engine):
        load_knowledge_base(engine, TECH)
        result = engine.forward_chain()
        assert result.new_facts == ["check_processes", "close_programs"]

    def test_animal(self, engine):
        load_knowledge_base(engine, ANIMAL)
        result = engine.forward_chain()
        assert result.new_facts == ["bird", "flying_bird", "songbird"]
        assert result.fired_rule_ids == [1, 2, 4]
