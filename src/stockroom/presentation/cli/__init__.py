"""Stockroom command-line interface (Typer)."""
