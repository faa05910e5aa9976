"""
Delete a user account by username.

Outcomes:
    - username missing or empty      -> ValidationError, no database call
    - one or more rows removed       -> returns the row count
    - nothing matched                -> NotFoundError, database unchanged
    - database failure               -> rollback, PersistenceError

Deletion is permanent. There is no soft delete and nothing cascades beyond
what the database schema itself enforces.
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from errors import NotFoundError, PersistenceError, ValidationError
from models import db, User

logger = logging.getLogger(__name__)

USERNAME_REQUIRED = 'Username is required'
USER_DELETED = 'User deleted successfully'
USER_NOT_FOUND = 'User not found'
DELETE_FAILED = 'An error occurred while deleting the user'


def delete_user_by_username(username) -> int:
    """Delete all users whose username equals ``username``.

    Args:
        username: The exact username to delete. Anything other than a
            non-empty string counts as missing.

    Returns:
        The number of rows deleted (always >= 1).

    Raises:
        ValidationError: If username is missing or empty.
        NotFoundError: If no user matched.
        PersistenceError: If the delete or the commit failed.
    """
    if not isinstance(username, str) or not username:
        raise ValidationError(USERNAME_REQUIRED)

    try:
        deleted = User.delete_by_username(username)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Error deleting user %r', username)
        raise PersistenceError(DELETE_FAILED) from e
    except Exception as e:
        db.session.rollback()
        logger.exception('Unexpected error deleting user %r', username)
        raise PersistenceError(DELETE_FAILED) from e

    if not deleted:
        raise NotFoundError(USER_NOT_FOUND)

    logger.info('Deleted %d user row(s) for username %r', deleted, username)
    return deleted
