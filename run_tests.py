"""
Simple test runner script.
Run with: python run_tests.py [extra pytest args]

Finds the root level test_*.py files and everything under tests/.
"""

import subprocess
import sys

if __name__ == "__main__":
    result = subprocess.run(
        [
            sys.executable, "-m", "pytest",
            "-v",
            "--tb=short",
            ".",
            "tests/",
            *sys.argv[1:],
        ],
        cwd=".",
    )
    sys.exit(result.returncode)
