"""
Fluent mutator for a single profile.

Usage:
    creds.with_profile("default") \\
        .set_access_key_id("AKIA...") \\
        .set_secret_access_key("...")
"""

from typing import List, Optional, Tuple

from .credentials import ACCESS_KEY_ID, SECRET_ACCESS_KEY, SESSION_TOKEN, Credentials
from .store import Profile, normalize_value

__all__ = ['ProfileHandle']

class ProfileHandle:
    """
    Chainable view onto a Profile owned by a CredentialsStore.

    Every setter writes straight into the stored profile and returns the
    handle itself. There is no commit step and no undo.
    """

    def __init__(self, profile: Profile):
        self.profile = profile

    @property
    def name(self) -> str:
        return self.profile.name

    def set(self, key: str, value: str) -> "ProfileHandle":
        """
        Set an arbitrary key.

        Raises:
            InvalidValue: If the key or value would break the file format
        """
        self.profile.set(key, value)
        return self

    def remove(self, key: str) -> "ProfileHandle":
        """Remove a key. Removing an absent key is a no-op."""
        self.profile.remove(key)
        return self

    def set_access_key_id(self, value: str) -> "ProfileHandle":
        return self.set(ACCESS_KEY_ID, value)

    def set_secret_access_key(self, value: str) -> "ProfileHandle":
        return self.set(SECRET_ACCESS_KEY, value)

    def set_session_token(self, value: Optional[str]) -> "ProfileHandle":
        """Set the session token, or remove it when value is None."""
        if value is None:
            return self.clear_session_token()
        return self.set(SESSION_TOKEN, value)

    def clear_session_token(self) -> "ProfileHandle":
        return self.remove(SESSION_TOKEN)

    def set_credentials(self, credentials: Credentials) -> "ProfileHandle":
        """
        Set all three recognized fields from a Credentials object.

        Every field is validated before any is written, so a rejected
        value leaves the profile untouched.

        Raises:
            InvalidValue: If any field would break the file format
        """
        access_key_id = normalize_value(credentials.access_key_id)
        secret_access_key = normalize_value(credentials.secret_access_key)
        session_token = credentials.session_token
        if session_token is not None:
            session_token = normalize_value(session_token)

        return self.set_access_key_id(access_key_id) \
            .set_secret_access_key(secret_access_key) \
            .set_session_token(session_token)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.profile.get(key, default)

    def get_access_key_id(self) -> Optional[str]:
        return self.get(ACCESS_KEY_ID)

    def get_secret_access_key(self) -> Optional[str]:
        return self.get(SECRET_ACCESS_KEY)

    def get_session_token(self) -> Optional[str]:
        return self.get(SESSION_TOKEN)

    def get_credentials(self) -> Optional[Credentials]:
        """
        Read the recognized fields back as a Credentials object.

        Returns:
            Optional[Credentials]: None unless both the access key id and
                the secret access key are present
        """
        access_key_id = self.get_access_key_id()
        secret_access_key = self.get_secret_access_key()
        if access_key_id is None or secret_access_key is None:
            return None
        return Credentials(access_key_id, secret_access_key, self.get_session_token())

    def keys(self) -> List[str]:
        return self.profile.keys()

    def items(self) -> List[Tuple[str, str]]:
        return self.profile.items()

    def __repr__(self) -> str:
        return f"ProfileHandle({self.profile!r})"
