"""KeyShorty: catalogue keyboard shortcuts per application."""

__version__ = "1.0.0"
