"""Jaipur forward model: a deterministic rules engine for the Jaipur card game."""

__version__ = "0.1.0"
