"""Helpers shared by the CLI: number formatting, value parsing, extra math functions."""
