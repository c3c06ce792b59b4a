"""Local print shop pickup delivery option generator."""

__version__ = "0.1.0"
