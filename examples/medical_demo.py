import logging

from rulechain import InferenceEngine, load_knowledge_base
from rulechain.symbolic.knowledge import MEDICAL
from rulechain.symbolic.trace import conclusions, format_trace

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """
    Medical demo:
      - Input: fever, cough, body_aches
      - Chain: respiratory_infection → flu → rest + fluids
      - Then add high_fever and re-run: severe_flu → doctor visit
    """
    engine = InferenceEngine()
    load_knowledge_base(engine, MEDICAL)

    result = engine.forward_chain()
    print(format_trace(result.trace))
    for fact, source in conclusions(result, engine.derived_facts):
        print(f"  {fact:<28} {source}")

    # Previous conclusions are recomputed from scratch on every run.
    engine.add_fact("high_fever")
    result = engine.forward_chain()
    logger.info(f"After high_fever: {result.new_facts}")
    assert "recommend_doctor_visit" in result.new_facts

    print("Still worth checking:", ", ".join(MEDICAL.suggestions(engine)))


if __name__ == "__main__":
    main()
