"""Game state and rules for a top-down arcade survivor shooter."""

__version__ = "0.1.0"