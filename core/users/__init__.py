"""
core.users — account administration services.

Public API:
    deletion — delete a user account by username
"""

from core.users.deletion import delete_user_by_username

__all__ = [
    'delete_user_by_username',
]
