"""Persistence layer for lottery draws, second-kill events and their participants."""

__version__ = "0.1.0"
