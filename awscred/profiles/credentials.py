"""
Credentials value type.

Holds the three recognized fields of a profile and converts from the
shapes boto3 hands out: the ``Credentials`` mapping of an STS response and
the resolved credentials of a boto3 Session.
"""

from typing import Any, Mapping, Optional

import boto3

from ..errors import InvalidValue

__all__ = [
    'ACCESS_KEY_ID',
    'SECRET_ACCESS_KEY',
    'SESSION_TOKEN',
    'Credentials',
]

ACCESS_KEY_ID = "aws_access_key_id"
SECRET_ACCESS_KEY = "aws_secret_access_key"
SESSION_TOKEN = "aws_session_token"

class Credentials:
    """An access key pair with an optional session token."""

    def __init__(self, access_key_id: str, secret_access_key: str,
                 session_token: Optional[str] = None):
        self.access_key_id = access_key_id
        self.secret_access_key = secret_access_key
        self.session_token = session_token

    @classmethod
    def from_sts(cls, credentials: Mapping[str, Any]) -> "Credentials":
        """
        Build credentials from the ``Credentials`` entry of an STS response.

        Works with the output of ``assume_role``, ``get_session_token`` and
        ``get_federation_token``.

        Args:
            credentials: Mapping with AccessKeyId, SecretAccessKey and
                optionally SessionToken

        Returns:
            Credentials: The converted credentials

        Raises:
            InvalidValue: If the access key id or secret access key is missing
        """
        access_key_id = credentials.get("AccessKeyId")
        if not access_key_id:
            raise InvalidValue("Missing access key id")
        secret_access_key = credentials.get("SecretAccessKey")
        if not secret_access_key:
            raise InvalidValue("Missing secret access key")
        return cls(access_key_id, secret_access_key, credentials.get("SessionToken"))

    @classmethod
    def from_session(cls, session: Optional[boto3.Session] = None) -> "Credentials":
        """
        Build credentials from whatever a boto3 Session resolves.

        Args:
            session: Session to read from (a default Session if None)

        Returns:
            Credentials: A frozen snapshot of the session credentials

        Raises:
            InvalidValue: If the session has no credentials
        """
        if session is None:
            session = boto3.Session()
        resolved = session.get_credentials()
        if resolved is None:
            raise InvalidValue("Session has no credentials")
        frozen = resolved.get_frozen_credentials()
        return cls(frozen.access_key, frozen.secret_key, frozen.token)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Credentials):
            return NotImplemented
        return (self.access_key_id == other.access_key_id
                and self.secret_access_key == other.secret_access_key
                and self.session_token == other.session_token)

    def __repr__(self) -> str:
        token = ", session_token=..." if self.session_token else ""
        return f"Credentials(access_key_id={self.access_key_id!r}{token})"
