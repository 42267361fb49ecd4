"""Utility helpers for blockwatch."""
