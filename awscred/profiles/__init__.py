"""
Profile model and fluent profile mutation.
"""

from .store import Profile, CredentialsStore
from .credentials import Credentials
from .handle import ProfileHandle

__all__ = [
    'Profile',
    'CredentialsStore',
    'Credentials',
    'ProfileHandle',
]
