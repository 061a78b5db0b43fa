"""Scene objects kept in JSON: named colours, file I/O, observable data and view models."""

__version__ = "0.1.0"