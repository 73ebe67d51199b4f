"""
Shared data models for userform.

File: models/__init__.py
Author: userform contributors
Created: 2026-10-14
Last Modified: 2026-10-17
"""

from .user import User

__all__ = [
    "User",
]
