"""Tokenized real-world-asset swap backend."""

__version__ = "0.1.0"
