"""Operational command-line scripts (run with python -m scripts.<name>)."""
