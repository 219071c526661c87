"""
In-memory model of an AWS credentials file.

A CredentialsStore is an ordered collection of Profile entries, and every
Profile is an ordered mapping of keys to values. Both keep insertion order
so that serializing a store gives stable output.
"""

from typing import Dict, Iterator, List, Optional, Tuple

from ..errors import InvalidValue

__all__ = [
    'Profile',
    'CredentialsStore',
    'normalize_profile_name',
    'normalize_key',
    'normalize_value',
]

_NEWLINES = ("\n", "\r")
_RESERVED_KEY_PREFIXES = ("[", "#", ";")

def _has_newline(text: str) -> bool:
    return any(c in text for c in _NEWLINES)

def normalize_profile_name(name: str) -> str:
    """
    Strip surrounding whitespace from a profile name and validate it.

    Args:
        name: Profile name as given by the caller

    Returns:
        str: The normalized name

    Raises:
        InvalidValue: If the name is empty or contains a newline
    """
    if not isinstance(name, str):
        raise InvalidValue(f"Profile name must be a string, got {type(name).__name__}")
    name = name.strip()
    if not name:
        raise InvalidValue("Profile name must not be empty")
    if _has_newline(name):
        raise InvalidValue(f"Profile name must not contain a newline: {name!r}")
    return name

def normalize_key(key: str) -> str:
    """
    Strip surrounding whitespace from a key and validate it.

    A key must survive being written as ``key = value`` and read back, so it
    cannot contain ``=`` or a newline, and cannot look like a section header
    or a comment.
    """
    if not isinstance(key, str):
        raise InvalidValue(f"Key must be a string, got {type(key).__name__}")
    key = key.strip()
    if not key:
        raise InvalidValue("Key must not be empty")
    if "=" in key or _has_newline(key):
        raise InvalidValue(f"Key must not contain '=' or a newline: {key!r}")
    if key.startswith(_RESERVED_KEY_PREFIXES):
        raise InvalidValue(f"Key must not start with '[', '#' or ';': {key!r}")
    return key

def normalize_value(value: str) -> str:
    """Strip surrounding whitespace from a value and reject embedded newlines."""
    if not isinstance(value, str):
        raise InvalidValue(f"Value must be a string, got {type(value).__name__}")
    value = value.strip()
    if _has_newline(value):
        raise InvalidValue("Value must not contain a newline")
    return value


class Profile:
    """A named section of the credentials file."""

    def __init__(self, name: str, values: Optional[Dict[str, str]] = None):
        self.name = normalize_profile_name(name)
        self._values: Dict[str, str] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(key.strip(), default)

    def set(self, key: str, value: str) -> None:
        """
        Assign a value, overwriting an existing key in its original position.

        Raises:
            InvalidValue: If the key or value cannot be written to the file
        """
        self._values[normalize_key(key)] = normalize_value(value)

    def remove(self, key: str) -> Optional[str]:
        """Remove a key, returning its value or None if it was absent."""
        return self._values.pop(key.strip(), None)

    def keys(self) -> List[str]:
        return list(self._values)

    def items(self) -> List[Tuple[str, str]]:
        return list(self._values.items())

    def copy(self) -> "Profile":
        return Profile(self.name, self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Profile):
            return NotImplemented
        return self.name == other.name and self.items() == other.items()

    def __repr__(self) -> str:
        # Values are secrets, only show key names
        return f"Profile(name={self.name!r}, keys={self.keys()!r})"


class CredentialsStore:
    """
    Ordered collection of profiles keyed by unique name.

    The store owns its Profile objects: lookups hand out the stored
    instance, not a copy, so mutations through a Profile are visible to
    the store immediately.
    """

    def __init__(self, profiles: Optional[List[Profile]] = None):
        self._profiles: Dict[str, Profile] = {}
        for profile in profiles or []:
            self.add(profile)

    def get(self, name: str) -> Optional[Profile]:
        """Return the profile with the given name, or None."""
        return self._profiles.get(name.strip())

    def get_or_create(self, name: str) -> Profile:
        """
        Return the named profile, appending a new empty one if absent.

        Args:
            name: Profile name

        Returns:
            Profile: The stored profile instance
        """
        name = normalize_profile_name(name)
        profile = self._profiles.get(name)
        if profile is None:
            profile = Profile(name)
            self._profiles[name] = profile
        return profile

    def add(self, profile: Profile) -> Profile:
        """
        Add a profile, merging it into an existing profile of the same name.

        Keys of the added profile overwrite existing keys in place; new keys
        are appended.
        """
        existing = self._profiles.get(profile.name)
        if existing is None:
            self._profiles[profile.name] = profile
            return profile
        for key, value in profile.items():
            existing.set(key, value)
        return existing

    def remove(self, name: str) -> Optional[Profile]:
        """Remove a profile, returning it or None if it was absent."""
        return self._profiles.pop(name.strip(), None)

    def names(self) -> List[str]:
        return list(self._profiles)

    def copy(self) -> "CredentialsStore":
        """Return a deep copy, e.g. to keep a snapshot before mutating."""
        return CredentialsStore([p.copy() for p in self._profiles.values()])

    def __iter__(self) -> Iterator[Profile]:
        return iter(list(self._profiles.values()))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CredentialsStore):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"CredentialsStore(profiles={self.names()!r})"
