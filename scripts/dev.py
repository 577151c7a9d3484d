#!/usr/bin/env python3
"""Makefile-like script for common precheck development tasks."""

import subprocess
import sys


def run(command: str) -> int:
    """Run a shell command and return exit code."""
    print(f"Running: {command}")
    return subprocess.call(command, shell=True)


def install():
    """Install the package in development mode."""
    return run("pip install -e '.[dev]'")


def test():
    """Run tests with coverage."""
    return run("pytest tests/ -v --cov=precheck --cov-report=term")


def test_unit():
    """Run only unit tests."""
    return run("pytest tests/unit/ -v -m unit")


def lint():
    """Run code quality checks."""
    for cmd in (
        "black --check precheck/ tests/",
        "isort --check precheck/ tests/",
        "flake8 precheck/ tests/",
    ):
        if run(cmd) != 0:
            return 1
    return 0


def format_code():
    """Format code with black and isort."""
    run("black precheck/ tests/")
    run("isort precheck/ tests/")


def clean():
    """Clean build artifacts."""
    run("rm -rf build/ dist/ *.egg-info .pytest_cache/ .coverage")
    run("find . -type d -name __pycache__ -exec rm -rf {} + 2>/dev/null || true")


if __name__ == "__main__":
    commands = {
        "install": install,
        "test": test,
        "test-unit": test_unit,
        "lint": lint,
        "format": format_code,
        "clean": clean,
    }

    if len(sys.argv) < 2 or sys.argv[1] not in commands:
        print(f"Usage: python {sys.argv[0]} {{{','.join(commands.keys())}}}")
        sys.exit(1)

    sys.exit(commands[sys.argv[1]]())
