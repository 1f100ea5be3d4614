"""Generate and sort reStructuredText docs for GSC script functions and methods."""

__version__ = "0.1.0"