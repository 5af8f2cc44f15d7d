"""Shared helpers: canonical JSON, determinism, exit codes."""
