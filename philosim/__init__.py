"""Threaded dining philosophers simulation with an ordered event log."""

__version__ = "0.1.0"
__all__ = ["arguments", "clock", "events", "philosopher", "simulation"]