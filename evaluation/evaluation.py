#!/usr/bin/env python3
"""
Evaluation runner for the Huffman codebook test suite.

This evaluation script:
- Runs pytest on the tests/ folder
- Collects individual test results with pass/fail status
- Generates a structured JSON report with environment metadata

Run with:
    python evaluation/evaluation.py [--output report.json]
"""
import argparse
import json
import os
import platform
import subprocess
import sys
import uuid
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
STATUS_WORDS = {
    " PASSED": "passed",
    " FAILED": "failed",
    " ERROR": "error",
    " SKIPPED": "skipped",
    " XFAIL": "skipped",
    " XPASS": "passed",
}


def generate_run_id():
    """Generate a short unique run ID."""
    return uuid.uuid4().hex[:8]


def _git(*args):
    try:
        result = subprocess.run(["git", *args], capture_output=True, text=True, timeout=5, cwd=str(PROJECT_ROOT))
    except (OSError, subprocess.TimeoutExpired):
        return "unknown"
    if result.returncode != 0:
        return "unknown"
    return result.stdout.strip()


def get_environment_info():
    """Collect environment information for the report."""
    return {
        "python_version": platform.python_version(),
        "platform": platform.platform(),
        "os": platform.system(),
        "architecture": platform.machine(),
        "git_commit": _git("rev-parse", "HEAD")[:8],
        "git_branch": _git("rev-parse", "--abbrev-ref", "HEAD"),
    }


def parse_pytest_verbose_output(output):
    """Parse pytest verbose output to extract test results.

    Matches lines like ``tests/test_core.py::test_prefix_free PASSED [ 10%]``.
    """
    tests = []
    for line in output.splitlines():
        line = line.strip()
        if "::" not in line:
            continue
        for status_word, outcome in STATUS_WORDS.items():
            if status_word in line:
                nodeid = line.split(status_word)[0].strip()
                tests.append({
                    "nodeid": nodeid,
                    "name": nodeid.split("::")[-1],
                    "outcome": outcome,
                })
                break
    return tests


def summarize(tests):
    summary = {"total": len(tests)}
    for outcome in ("passed", "failed", "error", "skipped"):
        summary[outcome] = sum(1 for t in tests if t["outcome"] == outcome)
    return summary


def run_pytest(tests_dir, timeout=300):
    """
    Run pytest on the tests/ folder.

    Returns:
        dict with test results
    """
    print(f"\n{'=' * 60}")
    print("RUNNING TESTS")
    print(f"{'=' * 60}")
    print(f"Tests directory: {tests_dir}")

    cmd = [sys.executable, "-m", "pytest", str(tests_dir), "-v", "--tb=short"]
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
            env=env,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        print("❌ Test execution timed out")
        return {
            "success": False,
            "exit_code": -1,
            "tests": [],
            "summary": {"error": "Test execution timed out"},
            "stdout": "",
            "stderr": "",
        }

    tests = parse_pytest_verbose_output(result.stdout)
    summary = summarize(tests)

    print(
        f"\nResults: {summary['passed']} passed, {summary['failed']} failed, "
        f"{summary['error']} errors, {summary['skipped']} skipped (total: {summary['total']})"
    )
    for test in tests:
        status_icon = {"passed": "✅", "failed": "❌", "error": "💥", "skipped": "⏭️"}[test["outcome"]]
        print(f"  {status_icon} {test['nodeid']}: {test['outcome']}")

    return {
        "success": result.returncode == 0,
        "exit_code": result.returncode,
        "tests": tests,
        "summary": summary,
        "stdout": result.stdout[-3000:],
        "stderr": result.stderr[-1000:],
    }


def generate_output_path(now=None):
    """Generate output path in format: evaluation/YYYY-MM-DD/HH-MM-SS/report.json"""
    now = now or datetime.now()
    return PROJECT_ROOT / "evaluation" / now.strftime("%Y-%m-%d") / now.strftime("%H-%M-%S") / "report.json"


def main(argv=None):
    """Main entry point for evaluation."""
    parser = argparse.ArgumentParser(description="Run the Huffman codebook test suite and write a report")
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file path (default: evaluation/YYYY-MM-DD/HH-MM-SS/report.json)",
    )
    parser.add_argument("--tests", type=str, default=str(PROJECT_ROOT / "tests"), help="Tests directory")
    args = parser.parse_args(argv)

    run_id = generate_run_id()
    started_at = datetime.now()
    print(f"Run ID: {run_id}")
    print(f"Started at: {started_at.isoformat()}")

    results = run_pytest(args.tests)
    success = results["success"]

    finished_at = datetime.now()
    duration = (finished_at - started_at).total_seconds()

    report = {
        "run_id": run_id,
        "started_at": started_at.isoformat(),
        "finished_at": finished_at.isoformat(),
        "duration_seconds": round(duration, 6),
        "success": success,
        "error": None if success else "Test suite failed",
        "environment": get_environment_info(),
        "results": results,
    }

    output_path = Path(args.output) if args.output else generate_output_path(started_at)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(report, f, indent=2)
    print(f"\n✅ Report saved to: {output_path}")

    print(f"\n{'=' * 60}")
    print("EVALUATION COMPLETE")
    print(f"{'=' * 60}")
    print(f"Run ID: {run_id}")
    print(f"Duration: {duration:.2f}s")
    print(f"Success: {'✅ YES' if success else '❌ NO'}")

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
