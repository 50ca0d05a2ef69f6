"""Compiled-in detection policy."""
