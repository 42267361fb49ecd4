"""CLI module for blockwatch."""
