"""Typer command surface for funcinit."""
