"""prefixer: idempotently inject or remove literal prefixes across a file tree."""

__version__ = "0.1.0"
