"""Tick-driven island simulation: events, input, replay, scene, world physics and lighting."""

__version__ = "0.1.0"
__all__ = ["__version__"]