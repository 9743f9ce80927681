"""Shared helpers for format-tools commands."""
