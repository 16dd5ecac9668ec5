"""Read-only data access for races."""

__version__ = "0.1.0"
