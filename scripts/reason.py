#!/usr/bin/env python3
"""
scripts/reason.py
==================
Run RuleChain forward chaining from the command line.

Usage:
    python scripts/reason.py --example medical
    python scripts/reason.py --rule "fever, cough -> infection" \
                             --rule "infection, body_aches -> flu" \
                             --facts fever cough body_aches
    python scripts/reason.py --rules kb/medical.json --facts high_fever --verbose
"""
import argparse
import logging
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


def main():
    parser = argparse.ArgumentParser(description="RuleChain Reasoning CLI")
    parser.add_argument("--example", default=None,
                        help="Bundled knowledge base: medical, tech, animal")
    parser.add_argument("--rules",   default=None,
                        help="Path to knowledge base JSON")
    parser.add_argument("--rule",    action="append", default=[],
                        help="Rule e.g. 'fever, cough -> infection' (repeatable)")
    parser.add_argument("--facts",   nargs="*", default=[],
                        help="Extra given facts")
    parser.add_argument("--max-passes", type=int, default=100)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    from rulechain.core.config import EngineConfig
    from rulechain.core.exceptions import RuleChainError
    from rulechain.symbolic.engine import InferenceEngine
    from rulechain.symbolic.knowledge import get_example, load_knowledge_base
    from rulechain.symbolic.rules import RuleLoader, RuleValidator, parse_rule
    from rulechain.symbolic.trace import conclusions, format_trace

    engine = InferenceEngine(config=EngineConfig(max_passes=args.max_passes, log_trace=args.verbose))

    try:
        if args.example:
            load_knowledge_base(engine, get_example(args.example))
            print(f"Loaded example '{args.example}'")
        if args.rules:
            kb = RuleLoader.from_json(args.rules)
            for conditions, conclusion in kb.rules:
                engine.add_rule(conditions, conclusion)
            for fact in kb.facts:
                engine.add_fact(fact)
            print(f"Loaded {len(kb.rules)} rules from {args.rules}")
        for text in args.rule:
            engine.add_rule(*parse_rule(text))
    except RuleChainError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    for fact in args.facts:
        engine.add_fact(fact)

    for warning in RuleValidator.validate(engine.rules):
        print(f"warning: {warning}", file=sys.stderr)

    print("Rules:")
    for rule in engine.rules:
        print(f"  {rule}")
    print(f"Facts: {', '.join(engine.given_facts) or '(none)'}")
    print()

    result = engine.forward_chain()
    print(format_trace(result.trace))
    print()
    print("Conclusions:")
    rows = conclusions(result, engine.derived_facts)
    if not rows:
        print("  (none)")
    for fact, source in rows:
        print(f"  {fact}  [{source}]")


if __name__ == "__main__":
    main()
