"""Reference-aware editing of OpenAPI documents."""

__version__ = "0.1.0"
