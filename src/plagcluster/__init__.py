"""Near-duplicate detection and clustering for assignment documents."""

__version__ = "0.1.0"
