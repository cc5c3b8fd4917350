"""
rulechain/symbolic/trace.py
===========================
Trace recording and rendering for forward-chaining runs.

The engine never talks to a presentation layer directly. It hands
each event to a TraceRecorder, which keeps the event for the
DerivationResult and forwards ``(kind, message)`` to whatever
callback the caller registered.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Tuple

from rulechain.core.types import DerivationResult, TraceEvent, TraceKind

logger = logging.getLogger(__name__)

LogCallback = Callable[[str, str], None]


class TraceRecorder:
    """Collects the trace of one run and notifies the registered callback."""

    def __init__(self, callback: Optional[LogCallback] = None, log_trace: bool = True):
        self._callback = callback
        self._log_trace = log_trace
        self._events: List[TraceEvent] = []

    def emit(self, kind: TraceKind, message: str, **details) -> TraceEvent:
        event = TraceEvent(kind=kind, message=message, details=details)
        self._events.append(event)
        if self._log_trace:
            logger.debug(f"[{kind.value}] {message}")
        if self._callback is not None:
            self._callback(kind.value, message)
        return event

    @property
    def events(self) -> List[TraceEvent]:
        return list(self._events)

    def count(self, kind: TraceKind) -> int:
        return sum(1 for e in self._events if e.kind is kind)


# ─── MESSAGE FORMATTING ───────────────────────────────────────────


def quote_facts(facts) -> str:
    facts = list(facts)
    if not facts:
        return "(none)"
    return ", ".join(f'"{f}"' for f in facts)


def start_message(facts: List[str]) -> str:
    return f"Starting with {len(facts)} facts: {quote_facts(facts)}"


def check_message(pass_number: int) -> str:
    return f"Iteration {pass_number} - Checking rules..."


def fire_message(rule) -> str:
    conds = " AND ".join(f'"{c}"' for c in rule.conditions)
    return f'Rule {rule.id} FIRED: IF {conds} THEN "{rule.conclusion}"'


def new_fact_message(fact: str) -> str:
    return f'New fact: "{fact}"'


def done_message(fired: int, new_facts: int) -> str:
    return f"Complete: {fired} rules fired, {new_facts} new facts"


# ─── RENDERING ────────────────────────────────────────────────────


def format_trace(events: List[TraceEvent]) -> str:
    """Render events as ``HH:MM:SS [kind] message`` lines."""
    lines = []
    for event in events:
        stamp = time.strftime("%H:%M:%S", time.localtime(event.timestamp))
        lines.append(f"{stamp} [{event.kind.value}] {event.message}")
    return "\n".join(lines)


def conclusions(result: DerivationResult, derived_facts: List[str]) -> List[Tuple[str, str]]:
    """Pair every derived fact with where it came from.

    Facts derived in ``result`` are attributed to their rule;
    anything else in ``derived_facts`` is reported as plain "Inferred".
    """
    rows = []
    for fact in derived_facts:
        rule = result.source_of(fact)
        rows.append((fact, f"From Rule {rule.id}" if rule else "Inferred"))
    return rows
