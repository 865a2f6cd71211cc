"""File-backed records and observable services for small desk applications."""

__version__ = "0.1.0"