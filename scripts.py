"""Development task runners.

Run a task by name, e.g. ``python scripts.py run_tests``.
"""

import subprocess
import sys


def run_tests() -> None:
    subprocess.run(["pytest"], check=True)


def run_lint() -> None:
    subprocess.run(["flake8", "src", "tests"], check=True)


def run_typecheck() -> None:
    subprocess.run(["mypy", "src"], check=True)


def run_format() -> None:
    subprocess.run(["black", "src", "tests"], check=True)


def run_coverage() -> None:
    """Run the suite with branch coverage of the package and write coverage.xml."""
    subprocess.run(
        ["pytest", "--cov=directory_tree", "--cov-branch", "--cov-report=xml", "--cov-report=term-missing"],
        check=True,
    )


if __name__ == "__main__":
    globals()[sys.argv[1]]()
