"""
Reading and writing the AWS credentials text format.
"""

from .parser import parse
from .serializer import serialize

__all__ = [
    'parse',
    'serialize',
]
