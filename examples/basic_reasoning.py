"""
examples/basic_reasoning.py
=============================
Minimal RuleChain example: two chained rules, one run.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from rulechain import InferenceEngine


def main():
    engine = InferenceEngine()
    engine.set_log_callback(lambda kind, message: print(f"[{kind}] {message}"))

    engine.add_rule(["philosopher"], "human")
    engine.add_rule(["human"], "mortal")
    engine.add_fact("Philosopher")

    result = engine.forward_chain()
    assert result.new_facts == ["human", "mortal"], "Should derive: human, then mortal"
    print(f"Derived {result.new_facts} in {result.iterations} passes")
    print("✓ Basic reasoning test passed.")


if __name__ == "__main__":
    main()
