"""
tests/integration/test_cli.py
==============================
End-to-end runs of scripts/reason.py.
"""

import json
import subprocess
import sys
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "reason.py"


def run_cli(*args):
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_example_run():
    proc = run_cli("--example", "medical")
    assert proc.returncode == 0, proc.stderr
    assert "Rule 1 FIRED" in proc.stdout
    assert "flu  [From Rule 2]" in proc.stdout


def test_inline_rules_and_facts():
    proc = run_cli(
        "--rule", "a -> b",
        "--rule", "b, a -> c",
        "--facts", "A",
    )
    assert proc.returncode == 0, proc.stderr
    assert "c  [From Rule 2]" in proc.stdout


def test_rules_file(tmp_path):
    kb = tmp_path / "kb.json"
    kb.write_text(json.dumps({
        "rules": [{"conditions": ["x"], "conclusion": "y"}],
        "facts": ["x"],
    }))
    proc = run_cli("--rules", str(kb))
    assert proc.returncode == 0, proc.stderr
    assert "y  [From Rule 1]" in proc.stdout


def test_cycle_warning():
    proc = run_cli("--rule", "a -> b", "--rule", "b -> a", "--facts", "a")
    assert proc.returncode == 0
    assert "Circular dependency" in proc.stderr


def test_bad_rule_exits_with_error():
    proc = run_cli("--rule", "no arrow here")
    assert proc.returncode == 2
    assert "error:" in proc.stderr


def test_no_conclusions():
    proc = run_cli("--rule", "a -> b")
    assert proc.returncode == 0
    assert "(none)" in proc.stdout


def test_malformed_rules_file_exits_with_error(tmp_path):
    kb = tmp_path / "kb.json"
    kb.write_text(json.dumps({"rules": [{"conditions": 5, "conclusion": "x"}]}))
    proc = run_cli("--rules", str(kb))
    assert proc.returncode == 2
    assert "error:" in proc.stderr
    assert "Traceback" not in proc.stderr
