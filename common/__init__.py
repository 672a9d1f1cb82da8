"""Shared helpers for commands, containers, files and logging."""
