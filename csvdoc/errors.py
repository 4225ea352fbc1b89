"""Conversion error hierarchy."""

from __future__ import annotations

from typing import Optional, Tuple


class ConversionError(Exception):
    """Base exception for all conversion errors."""


class EmptyInputError(ConversionError):
    """No files, no output format, or a file with no content."""


class InvalidPayloadError(EmptyInputError):
    """A submitted payload is not valid base64."""


class DecodeError(ConversionError):
    """None of the candidate encodings could decode the bytes."""

    def __init__(self, attempted: Tuple[str, ...], guess: Optional[str] = None) -> None:
        self.attempted = attempted
        self.guess = guess
        message = f"Unable to decode content as {' or '.join(attempted)}"
        if guess:
            message += f" (closest match: {guess})"
        super().__init__(message)


class ParseError(ConversionError):
    """Tabular text could not be split into rows (malformed quoting)."""


class UnsupportedFormatError(ConversionError):
    """The requested output format is not one of markdown, yaml or xml."""

    def __init__(self, output_format: object) -> None:
        self.output_format = output_format
        super().__init__(f"Unsupported output format: {output_format}")


class NoConvertibleDataError(ConversionError):
    """Batch-level: no file in the batch produced any output."""
