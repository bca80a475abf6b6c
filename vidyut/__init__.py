"""Sanskrit sandhi generation and splitting, with Paninian sound, tag and term utilities."""

__version__ = "0.1.0"