"""Presentation interfaces for Gemroll."""

from .base import RenderSink, HudSink, NullSink

__all__ = ["RenderSink", "HudSink", "NullSink"]
