"""Packaged game content."""
