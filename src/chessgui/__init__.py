"""Click-driven chess board front-end on top of an external rules engine."""

__version__ = "0.1.0"
