"""Browse a markdown link catalog with search, filters and pagination."""

__version__ = "0.1.0"
