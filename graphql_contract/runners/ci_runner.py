#!/usr/bin/env python3
"""
CI/CD test runner for the GraphQL contract suite
Builds a pytest command for the requested profile and runs it
"""

import argparse
import logging
import multiprocessing
import os
import subprocess
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from graphql_contract.config import get_config
from graphql_contract.logging_setup import configure_logging

logger = logging.getLogger(__name__)

PROFILES = {
    "smoke": ["-m", "smoke"],
    "contract": ["-m", "contract"],
    "unit": ["-m", "unit"],
    "full": [],
}

DEFAULT_JUNIT_PATH = "test-results/junit.xml"


def default_workers() -> int:
    """Half of the available cores, at least one"""
    return max(1, multiprocessing.cpu_count() // 2)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GraphQL contract suite runner")
    parser.add_argument("--profile", choices=sorted(PROFILES), default="full", help="Test selection profile")
    parser.add_argument("--workers", default=None, help="pytest-xdist workers: a number or 'auto'")
    parser.add_argument("--coverage", action="store_true", help="Collect coverage (70%% threshold)")
    parser.add_argument("--junit", default=DEFAULT_JUNIT_PATH, help="JUnit XML report path")
    parser.add_argument("--timeout", type=int, default=30, help="Per-test timeout in seconds")
    parser.add_argument("--ci", action="store_true", help="Fail fast and shorten tracebacks")
    parser.add_argument("pytest_args", nargs="*", help="Extra arguments passed to pytest")
    return parser


def build_pytest_command(args: argparse.Namespace, max_failures: int = 1) -> List[str]:
    """Translate runner arguments into a pytest command line"""
    cmd = [sys.executable, "-m", "pytest"]
    cmd.extend(PROFILES[args.profile])
    cmd.append(f"--timeout={args.timeout}")
    cmd.append(f"--junitxml={args.junit}")

    if args.workers:
        workers = args.workers if args.workers == "auto" else str(int(args.workers))
        cmd.extend(["-n", workers])

    if args.coverage:
        cmd.extend([
            "--cov=graphql_contract",
            "--cov-report=term-missing",
            "--cov-report=html",
            "--cov-report=xml",
            "--cov-report=json",
            "--cov-fail-under=70",
        ])

    if args.ci:
        cmd.extend([f"--maxfail={max_failures}", "--tb=short"])

    cmd.extend(args.pytest_args)
    return cmd


def run(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config()
    configure_logging(config)
    args.ci = args.ci or config.ci

    Path(args.junit).parent.mkdir(parents=True, exist_ok=True)

    cmd = build_pytest_command(args, config.fail_fast_max_failures)
    env = os.environ.copy()
    if args.ci:
        env["CI"] = "true"

    logger.info(f"Profile: {args.profile} against {config.api_url}")
    logger.info(f"Command: {' '.join(cmd)}")

    start_time = time.time()
    process = subprocess.run(cmd, env=env)
    duration = time.time() - start_time

    if process.returncode == 0:
        logger.info(f"{args.profile} tests completed successfully in {duration:.2f}s")
    else:
        logger.error(f"{args.profile} tests failed (exit {process.returncode}) after {duration:.2f}s")

    return process.returncode


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
