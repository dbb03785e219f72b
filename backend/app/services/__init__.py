"""
Services Module

Provides access to the user store:
- user_store: lookups, insert and partial update of the users table
"""
from . import user_store

__all__ = [
    "user_store",
]
