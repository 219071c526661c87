"""
awscred - load, edit and write the AWS shared credentials file.

Example:
    from awscred import AWSCredentials

    creds = AWSCredentials.load()
    creds.with_profile("default") \\
        .set_access_key_id("ACCESS_KEY") \\
        .set_secret_access_key("SECRET_KEY")
    creds.write()
"""

import logging

from .aws_credentials import AWSCredentials
from .codec import parse, serialize
from .errors import (
    AWSCredentialsError,
    CredentialsFileError,
    PathResolutionError,
    ParseError,
    InvalidSectionHeader,
    KeyOutsideSection,
    MalformedLine,
    InvalidValue,
)
from .profiles import Credentials, CredentialsStore, Profile, ProfileHandle

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'AWSCredentials',
    'Credentials',
    'CredentialsStore',
    'Profile',
    'ProfileHandle',
    'parse',
    'serialize',
    'AWSCredentialsError',
    'CredentialsFileError',
    'PathResolutionError',
    'ParseError',
    'InvalidSectionHeader',
    'KeyOutsideSection',
    'MalformedLine',
    'InvalidValue',
]
