"""Asset-root resolution and validation for build units."""

__version__ = "0.1.0"
