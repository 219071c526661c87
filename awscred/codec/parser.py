"""
Credentials file parser.

Reads the INI-like AWS credentials format into a CredentialsStore. Comments
and blank lines are dropped, so they do not survive a parse/serialize round
trip. Parsing stops at the first malformed line.
"""

from typing import Optional

from ..errors import InvalidSectionHeader, KeyOutsideSection, MalformedLine
from ..profiles.store import CredentialsStore, Profile

__all__ = ['parse']

_COMMENT_PREFIXES = ("#", ";")

def parse(text: str) -> CredentialsStore:
    """
    Parse credentials file text.

    A section name that appears more than once merges into the first
    occurrence; later keys overwrite earlier ones in place.

    Args:
        text: Contents of a credentials file

    Returns:
        CredentialsStore: The parsed profiles, in file order

    Raises:
        InvalidSectionHeader: For an empty or unterminated [section] header
        KeyOutsideSection: For an assignment before the first header
        MalformedLine: For any other line that cannot be understood
    """
    store = CredentialsStore()
    current: Optional[Profile] = None

    # Only "\n" (and "\r\n") ends a line; str.splitlines() would also break
    # on characters such as "\x0c" or "\u2028" that values may contain
    for line_no, raw in enumerate(text.split("\n"), start=1):
        raw = raw.rstrip("\r")
        line = raw.strip()

        if not line or line.startswith(_COMMENT_PREFIXES):
            continue

        if line.startswith("["):
            if not line.endswith("]"):
                raise InvalidSectionHeader(line_no, raw)
            name = line[1:-1].strip()
            if not name:
                raise InvalidSectionHeader(line_no, raw)
            current = store.get_or_create(name)
            continue

        if "=" not in line:
            raise MalformedLine(line_no, raw)
        if current is None:
            raise KeyOutsideSection(line_no, raw)

        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            raise MalformedLine(line_no, raw)
        current.set(key, value.strip())

    return store
