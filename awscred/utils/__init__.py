"""
Utility functions for locating credentials.
"""

from .paths import get_default_credentials_path, get_default_profile_name

__all__ = [
    'get_default_credentials_path',
    'get_default_profile_name',
]
