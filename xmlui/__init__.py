"""Parser that turns a compact XML-like user interface markup into tag sequences, with supporting utilities."""

__version__ = "0.1.0"