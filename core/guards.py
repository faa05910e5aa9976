"""
Request guards — ordered capability checks applied before a route runs.

A guard inspects the current request and either returns normally or raises
GuardRejection. Routes declare their chain explicitly:

    @app.route('/auth/delete/user', methods=['POST'])
    @guarded(Authenticated(), Authorised(require_admin=False))
    def delete_user(): ...

Guards run in the order given and the first rejection ends the chain. Later
guards can rely on state set by earlier ones (Authorised reads the user
that Authenticated stored on ``flask.g``).
"""
from __future__ import annotations

import logging
from functools import wraps
from typing import Callable

from flask import current_app, g, request, session

from errors import ApiError
from models import db, User

logger = logging.getLogger(__name__)


class GuardRejection(ApiError):
    """Raised by a guard to halt the chain with a 401/403 response."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class RequestGuard:
    """Base class for a single check in a guard chain."""

    def check(self) -> None:
        raise NotImplementedError

    def __repr__(self):
        return f'{type(self).__name__}()'


class Authenticated(RequestGuard):
    """Establish caller identity from the session.

    Stores the loaded User on ``g.current_user``. A missing session or a
    session pointing at a user that no longer exists is rejected with 401.
    """

    def check(self) -> None:
        user_id = session.get('user_id')
        if not user_id:
            raise GuardRejection('Authentication required', 401)

        user = db.session.get(User, user_id)
        if user is None:
            session.pop('user_id', None)
            raise GuardRejection('Authentication required', 401)

        g.current_user = user


class Authorised(RequestGuard):
    """Permit or reject the authenticated caller.

    ``require_admin=False`` lets any authenticated user through. Passing
    ``None`` defers to the ``DELETE_USER_REQUIRES_ADMIN`` app setting at
    request time.
    """

    def __init__(self, require_admin: bool | None = False):
        self.require_admin = require_admin

    def _admin_required(self) -> bool:
        if self.require_admin is None:
            return bool(current_app.config.get('DELETE_USER_REQUIRES_ADMIN', False))
        return self.require_admin

    def check(self) -> None:
        user = g.get('current_user')
        if user is None:
            raise GuardRejection('Authentication required', 401)
        if self._admin_required() and not user.is_admin:
            raise GuardRejection('Admin privileges required', 403)

    def __repr__(self):
        return f'Authorised(require_admin={self.require_admin!r})'


def run_guards(guards) -> None:
    """Run each guard in order; the first GuardRejection propagates."""
    for guard in guards:
        guard.check()


def guarded(*guards: RequestGuard) -> Callable:
    """Decorator composing ``guards`` in front of a view function."""

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                run_guards(guards)
            except GuardRejection as e:
                logger.info(
                    'Guard rejected %s %s: %s (%s)',
                    request.method, request.path, e.message, e.status_code,
                )
                return e.to_response()
            return f(*args, **kwargs)
        decorated_function.guards = guards
        return decorated_function
    return decorator
