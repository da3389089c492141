"""Finger-jointed box generator for laser and CNC cutting."""

__version__ = "0.1.0"
