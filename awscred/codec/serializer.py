"""
Credentials file serializer.
"""

from typing import List

from ..errors import InvalidValue
from ..profiles.store import CredentialsStore, Profile

__all__ = ['serialize']

def _serialize_profile(profile: Profile) -> str:
    lines = [f"[{profile.name}]"]
    for key, value in profile.items():
        if "\n" in value or "\r" in value:
            raise InvalidValue(f"Value of {key!r} in profile {profile.name!r} contains a newline")
        lines.append(f"{key} = {value}")
    return "\n".join(lines) + "\n"

def serialize(store: CredentialsStore) -> str:
    """
    Render a store in the credentials file format.

    Profiles are written in store order and separated by one blank line;
    there is no blank line after the last profile. An empty store renders
    as an empty string.

    Args:
        store: The store to render

    Returns:
        str: The file contents
    """
    sections: List[str] = [_serialize_profile(p) for p in store]
    return "\n".join(sections)
