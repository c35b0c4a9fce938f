"""Allows `python -m cli ...` during development."""

from cli.main import main

main()
