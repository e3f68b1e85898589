"""Single-screen Snake on pygame."""

__version__ = "0.1.0"
