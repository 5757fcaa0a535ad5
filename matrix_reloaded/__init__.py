"""Live viewer and Excel exporter for JSON decision matrices."""

__version__ = "0.1.0"
