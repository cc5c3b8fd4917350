"""
rulechain/deployment/server/routes.py
=====================================
REST API routes for the RuleChain inference server.
"""
from __future__ import annotations
import threading
from typing import Any, Dict, List
from fastapi import APIRouter
from pydantic import BaseModel

from rulechain.symbolic.engine import InferenceEngine
from rulechain.symbolic.knowledge import EXAMPLES, get_example, load_knowledge_base
from rulechain.symbolic.trace import conclusions

router = APIRouter()

# ─── Request/Response Models ────────────────────────────────────

class RuleRequest(BaseModel):
    conditions: List[str]               # ["fever", "cough"]
    conclusion: str

class FactRequest(BaseModel):
    fact: str

class RuleResponse(BaseModel):
    id:         int
    conditions: List[str]
    conclusion: str

class FactsResponse(BaseModel):
    given:   List[str]
    derived: List[str]
    total:   int

class RunResponse(BaseModel):
    new_facts:   List[str]
    fired_rules: List[RuleResponse]
    iterations:  int
    conclusions: List[Dict[str, str]]
    trace:       List[Dict[str, Any]]

# ─── Shared engine instance ─────────────────────────────────────
# The engine has no locking of its own; every route goes through _lock.
_engine = None
_lock = threading.Lock()

def get_engine() -> InferenceEngine:
    global _engine
    if _engine is None:
        _engine = InferenceEngine()
    return _engine

def reset_engine() -> None:
    global _engine
    _engine = None

def _facts_response(engine: InferenceEngine) -> FactsResponse:
    return FactsResponse(
        given=engine.given_facts,
        derived=engine.derived_facts,
        total=engine.fact_count,
    )

# ─── Routes ─────────────────────────────────────────────────────

@router.get("/rules", response_model=List[RuleResponse])
async def list_rules():
    with _lock:
        return [RuleResponse(**r.to_dict()) for r in get_engine().rules]

@router.post("/rules", response_model=RuleResponse, status_code=201)
async def add_rule(request: RuleRequest):
    with _lock:
        rule = get_engine().add_rule(request.conditions, request.conclusion)
    return RuleResponse(**rule.to_dict())

@router.delete("/rules/{rule_id}")
async def remove_rule(rule_id: int):
    with _lock:
        removed = get_engine().remove_rule(rule_id)
    return {"removed": removed, "rule_id": rule_id}

@router.get("/facts", response_model=FactsResponse)
async def list_facts():
    with _lock:
        return _facts_response(get_engine())

@router.post("/facts")
async def add_fact(request: FactRequest):
    with _lock:
        engine = get_engine()
        added = engine.add_fact(request.fact)
        return {"added": added, "facts": _facts_response(engine)}

@router.delete("/facts/{fact}", response_model=FactsResponse)
async def remove_fact(fact: str):
    with _lock:
        engine = get_engine()
        engine.remove_fact(fact)
        return _facts_response(engine)

@router.post("/run", response_model=RunResponse)
async def run():
    with _lock:
        engine = get_engine()
        result = engine.forward_chain()
        rows = conclusions(result, engine.derived_facts)
    return RunResponse(
        new_facts=result.new_facts,
        fired_rules=[RuleResponse(**r.to_dict()) for r in result.fired_rules],
        iterations=result.iterations,
        conclusions=[{"fact": fact, "source": source} for fact, source in rows],
        trace=[e.to_dict() for e in result.trace],
    )

@router.post("/reset")
async def reset():
    with _lock:
        get_engine().clear_all()
    return {"status": "cleared"}

@router.get("/examples")
async def list_examples():
    return [
        {"key": kb.key, "name": kb.name, "rules": len(kb.rules), "facts": kb.facts}
        for kb in EXAMPLES.values()
    ]

@router.post("/examples/{key}")
async def load_example(key: str):
    kb = get_example(key)
    with _lock:
        engine = get_engine()
        load_knowledge_base(engine, kb)
        return {
            "loaded": kb.name,
            "rules": engine.rule_count,
            "facts": engine.facts,
            "suggestions": kb.suggestions(engine),
        }
