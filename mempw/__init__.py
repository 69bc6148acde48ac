"""mempw: memorable word-based password generator."""

__version__ = "1.0.0"
