"""
Exceptions raised by awscred.

Everything derives from AWSCredentialsError so callers can catch the whole
family with a single except clause.
"""

from typing import Optional, Union
from pathlib import Path

__all__ = [
    'AWSCredentialsError',
    'CredentialsFileError',
    'PathResolutionError',
    'ParseError',
    'InvalidSectionHeader',
    'KeyOutsideSection',
    'MalformedLine',
    'InvalidValue',
]

class AWSCredentialsError(Exception):
    """Base class for all awscred errors."""


class CredentialsFileError(AWSCredentialsError):
    """Raised when the credentials file cannot be read or written."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class PathResolutionError(CredentialsFileError):
    """Raised when the default credentials path cannot be determined."""


class ParseError(AWSCredentialsError):
    """
    Raised when credentials text is malformed.

    Attributes:
        line_no: 1-based number of the offending line
        line: The offending line, without its line terminator
    """
    description = "Malformed credentials file"

    def __init__(self, line_no: int, line: str):
        super().__init__(f"{self.description} (line {line_no}): {line!r}")
        self.line_no = line_no
        self.line = line


class InvalidSectionHeader(ParseError):
    """Raised for a [section] header with an empty or unterminated name."""
    description = "Invalid section header"


class KeyOutsideSection(ParseError):
    """Raised for a key = value line that precedes every section header."""
    description = "Key outside of any section"


class MalformedLine(ParseError):
    """Raised for a line that is neither a header, assignment nor comment."""
    description = "Malformed line"


class InvalidValue(AWSCredentialsError, ValueError):
    """Raised when a profile name, key or value would break the file format."""
