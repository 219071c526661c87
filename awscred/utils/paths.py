"""
Default locations and names taken from the host environment.
"""

import os
from pathlib import Path

from ..errors import PathResolutionError

__all__ = [
    'CREDENTIALS_FILE_ENV',
    'get_default_credentials_path',
    'get_default_profile_name',
]

CREDENTIALS_FILE_ENV = "AWS_SHARED_CREDENTIALS_FILE"
DEFAULT_PROFILE = "default"

def _get_aws_dir() -> Path:
    """Get the path to the ~/.aws directory."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise PathResolutionError(f"Could not resolve home directory: {e}") from e
    return home / ".aws"

def get_default_credentials_path() -> Path:
    """
    Get the path to the AWS credentials file.

    Honours AWS_SHARED_CREDENTIALS_FILE like the AWS CLI does, and falls
    back to ~/.aws/credentials.

    Returns:
        Path: The credentials file path (it may not exist)

    Raises:
        PathResolutionError: If the home directory cannot be determined
    """
    override = os.environ.get(CREDENTIALS_FILE_ENV)
    if override:
        return Path(override).expanduser()
    return _get_aws_dir() / "credentials"

def get_default_profile_name() -> str:
    """
    Get the name of the active AWS profile.

    Returns:
        str: AWS_PROFILE, then AWS_DEFAULT_PROFILE, then "default"
    """
    profile = os.environ.get("AWS_PROFILE")
    if profile:
        return profile

    profile = os.environ.get("AWS_DEFAULT_PROFILE")
    if profile:
        return profile

    return DEFAULT_PROFILE
