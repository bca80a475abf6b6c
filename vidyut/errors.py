"""Errors raised while loading sandhi rules."""


class SandhiError(Exception):
    """Base class for errors raised by the sandhi tools."""


class EmptyFileError(SandhiError):
    """The rules file holds no rules."""

    def __init__(self, message: str = "Sandhi file is empty.") -> None:
        super().__init__(message)


class CsvFormatError(SandhiError, ValueError):
    """The rules file is not well-formed CSV."""