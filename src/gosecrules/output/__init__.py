"""Reporters: terminal (Rich) and JSON."""
