"""Bundled JSON schemas and their validation helpers."""
