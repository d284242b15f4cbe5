"""shapekit: geometry value library with a Click CLI."""

__version__ = "0.1.0"
