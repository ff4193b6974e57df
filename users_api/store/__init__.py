"""
Store Module
============

Process-local storage for users.
"""

from users_api.store.user_store import UserStore, get_user_store

__all__ = ["UserStore", "get_user_store"]
