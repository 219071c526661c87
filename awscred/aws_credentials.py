"""
AWS Credentials File Manager

This module provides the AWSCredentials facade, which loads an AWS
credentials file, hands out fluent handles for editing its profiles and
writes the result back. Nothing is persisted until write() or write_to()
is called.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from .codec import parse, serialize
from .errors import CredentialsFileError
from .profiles import Credentials, CredentialsStore, ProfileHandle
from .utils.paths import get_default_credentials_path, get_default_profile_name

__all__ = ['AWSCredentials']

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_FILE_MODE = 0o600
_DIR_MODE = 0o700

def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise CredentialsFileError(f"Credentials file not found: {path}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialsFileError(f"Could not read credentials file {path}: {e}", path) from e

def _write_plain(path: Path, text: str) -> None:
    # The mode only applies when the file is created
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _FILE_MODE)
    with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)

def _write_atomic(path: Path, text: str) -> None:
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            os.chmod(tmp_name, stat.S_IMODE(path.stat().st_mode))
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


class AWSCredentials:
    """
    A loaded (or new) credentials file.

    Example:
        creds = AWSCredentials.load()
        creds.with_profile("default") \\
            .set_access_key_id("ACCESS_KEY") \\
            .set_secret_access_key("SECRET_KEY")
        creds.write()
    """

    def __init__(self, path: Optional[PathLike] = None,
                 store: Optional[CredentialsStore] = None):
        """
        Create an instance without touching the file system.

        Args:
            path: File that write() targets; None leaves it unbound
            store: Initial profiles (an empty store if None)
        """
        self._path = Path(path) if path is not None else None
        self.store = store if store is not None else CredentialsStore()

    @classmethod
    def load(cls) -> "AWSCredentials":
        """
        Load the default credentials file (~/.aws/credentials).

        Raises:
            PathResolutionError: If the default path cannot be resolved
            CredentialsFileError: If the file is missing or unreadable
            ParseError: If the file is malformed
        """
        return cls.load_from(get_default_credentials_path())

    @classmethod
    def load_from(cls, path: PathLike) -> "AWSCredentials":
        """
        Load credentials from the given file.

        Args:
            path: Credentials file to read; write() targets it afterwards

        Returns:
            AWSCredentials: The loaded credentials

        Raises:
            CredentialsFileError: If the file is missing or unreadable
            ParseError: If the file is malformed
        """
        path = Path(path)
        store = parse(_read_text(path))
        logger.debug("Loaded %d profile(s) from %s", len(store), path)
        return cls(path, store)

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def with_profile(self, name: str) -> ProfileHandle:
        """
        Return a handle on the named profile, creating it if it is absent.

        Raises:
            InvalidValue: If the name is empty or contains a newline
        """
        return ProfileHandle(self.store.get_or_create(name))

    def default_profile(self) -> ProfileHandle:
        """Return a handle on the profile named by AWS_PROFILE (or "default")."""
        return self.with_profile(get_default_profile_name())

    def get_profile(self, name: str) -> Optional[Credentials]:
        """
        Get the credentials stored in a profile.

        Returns:
            Optional[Credentials]: None if the profile is absent or lacks an
                access key id or secret access key
        """
        profile = self.store.get(name)
        if profile is None:
            return None
        return ProfileHandle(profile).get_credentials()

    def set_profile(self, name: str, credentials: Credentials) -> ProfileHandle:
        """Create or update a profile from a Credentials object."""
        return self.with_profile(name).set_credentials(credentials)

    def exists(self, name: str) -> bool:
        return name in self.store

    def remove_profile(self, name: str) -> Optional[Credentials]:
        """
        Remove a profile.

        Returns:
            Optional[Credentials]: The credentials the profile held, if any
        """
        credentials = self.get_profile(name)
        self.store.remove(name)
        return credentials

    def profiles(self) -> List[str]:
        """Names of all profiles, in file order."""
        return self.store.names()

    def write(self, atomic: bool = False) -> None:
        """
        Write the credentials back to the file they were loaded from.

        Args:
            atomic: Write a temporary file and rename it over the target

        Raises:
            CredentialsFileError: If no path is known or writing fails
        """
        if self._path is None:
            raise CredentialsFileError("No credentials file path to write to; use write_to()")
        self.write_to(self._path, atomic=atomic)

    def write_to(self, path: PathLike, atomic: bool = False) -> None:
        """
        Write the credentials to the given file.

        The path this instance is bound to is left unchanged. Parent
        directories are created if needed, and a newly created file is
        readable by its owner only.

        Args:
            path: Destination file
            atomic: Write a temporary file and rename it over the target

        Raises:
            CredentialsFileError: If writing fails
        """
        path = Path(path)
        text = serialize(self.store)
        try:
            path.parent.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
            if atomic:
                _write_atomic(path, text)
            else:
                _write_plain(path, text)
        except OSError as e:
            raise CredentialsFileError(f"Could not write credentials file {path}: {e}", path) from e
        logger.debug("Wrote %d profile(s) to %s", len(self.store), path)

    def __contains__(self, name: object) -> bool:
        return name in self.store

    def __repr__(self) -> str:
        return f"AWSCredentials(path={self._path!r}, profiles={self.profiles()!r})"
