"""Gemroll: a side-scrolling ball platformer on procedural terrain."""

__version__ = "0.1.0"
