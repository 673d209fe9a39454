#!/usr/bin/env python3
"""
Test runner for the link shortener.

Extra arguments go straight to pytest, e.g.
    python run_tests.py -k redirect
The SQLite file the fixtures create is removed afterwards.
"""

import os
import subprocess
import sys

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
TEST_DB = os.path.join(PROJECT_ROOT, "test.db")


def run_tests(pytest_args):
    """Run the suite from the project root and return pytest's exit code"""
    command = [sys.executable, "-m", "pytest", "tests/", "--tb=short"]
    command.extend(pytest_args or ["-v"])

    try:
        return subprocess.run(command, cwd=PROJECT_ROOT).returncode
    finally:
        if os.path.exists(TEST_DB):
            os.remove(TEST_DB)


if __name__ == "__main__":
    sys.exit(run_tests(sys.argv[1:]))
