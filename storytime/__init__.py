"""Storytime: characters, recurring generation jobs and per-character chat archives."""

__version__ = "0.1.0"
