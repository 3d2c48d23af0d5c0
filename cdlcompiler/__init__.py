"""A small compiler that turns CDL programs into JavaScript."""

__version__ = "0.1.0"

__all__ = ["__version__"]