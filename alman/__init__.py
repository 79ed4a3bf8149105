"""Shell alias manager with suggestions drawn from command history."""

__version__ = "0.1.0"

__all__ = ["__version__"]