"""
Command-Line Interface

Public API:
    - run: Execute the CLI with given arguments, returns exit code
    - main: Console script entry point
"""

from cli.main import main, run

__all__ = [
    "main",
    "run",
]
