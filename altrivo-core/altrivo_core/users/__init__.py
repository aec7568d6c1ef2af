"""
User Directory
==============
"""

from .base import User, UserDirectory
from .sql import SQLUserDirectory, UserRecord

__all__ = [
    "User",
    "UserDirectory",
    "SQLUserDirectory",
    "UserRecord",
]
