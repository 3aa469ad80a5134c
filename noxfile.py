"""Automation sessions for linting, type checking, and tests."""

from __future__ import annotations

import nox

PYTHON_VERSIONS = ["3.11", "3.12"]


@nox.session(python=PYTHON_VERSIONS)
def lint(session: nox.Session) -> None:
    """Run Ruff lint checks."""
    session.install("uv")
    session.run("uv", "pip", "install", ".[dev]")
    session.run("ruff", "check", "--fix", ".")


@nox.session(python=PYTHON_VERSIONS)
def typecheck(session: nox.Session) -> None:
    """Run static type checking."""
    session.install("uv")
    session.run("uv", "pip", "install", ".[dev]")
    session.run("mypy", "src")
    session.run("pyright", "src")


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run unit and integration tests with coverage."""
    session.install("uv")
    session.run("uv", "pip", "install", ".[test]")
    session.run(
        "pytest",
        "--cov=sweeper",
        "--cov-report=term-missing",
        "--cov-report=xml",
        *session.posargs,
    )


@nox.session(python=PYTHON_VERSIONS[0])
def sweep_samples(session: nox.Session) -> None:
    """Generate the sample workspace and dry-run the sweeper over it."""
    session.install("uv")
    session.run("uv", "pip", "install", ".")
    session.run("python", "create-samples.py", "--output", "temp/samples", "--force")
    session.run("sweeper", "temp/samples", "--dry-run", "--log-level", "DEBUG")
    session.run(
        "sweeper",
        "temp/samples",
        "--manifest",
        "package.json",
        "--artifact",
        "node_modules",
        "--dry-run",
        "--log-level",
        "DEBUG",
    )
