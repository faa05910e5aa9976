"""
HTTP client for the delete-user endpoint.

Mirrors the browser form: one request, no retry, and a single outcome that
is either acknowledged or failed with the best message available.
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass

import requests

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = os.environ.get('ACCOUNT_ADMIN_URL', 'http://localhost:4001')

SUCCESS_MESSAGE = 'User deleted successfully!'
GENERIC_FAILURE = 'An error occurred.'
TRANSPORT_FAILURE = 'Error deleting user'


@dataclass
class DeleteOutcome:
    ok: bool
    message: str
    status_code: int | None = None


def delete_user(
    username: str,
    base_url: str = DEFAULT_BASE_URL,
    session: requests.Session | None = None,
    timeout: float = 30,
) -> DeleteOutcome:
    """POST the username to /auth/delete/user and summarise the response.

    ``session`` carries the caller's authenticated cookies; without one the
    server answers 401 and the outcome reports its message.
    """
    http = session or requests
    try:
        response = http.post(
            f"{base_url.rstrip('/')}/auth/delete/user",
            json={'username': username},
            timeout=timeout,
        )
    except requests.RequestException as e:
        logger.error('Error deleting user: %s', e)
        return DeleteOutcome(ok=False, message=TRANSPORT_FAILURE)

    if response.ok:
        return DeleteOutcome(ok=True, message=SUCCESS_MESSAGE, status_code=response.status_code)

    try:
        data = response.json()
    except ValueError:
        data = None
    message = data.get('message') if isinstance(data, dict) else None
    return DeleteOutcome(
        ok=False,
        message=message or GENERIC_FAILURE,
        status_code=response.status_code,
    )


if __name__ == '__main__':
    if len(sys.argv) < 2:
        print("Usage: python user_client.py <username> [base_url]")
        sys.exit(1)

    outcome = delete_user(sys.argv[1], *sys.argv[2:3])
    print(outcome.message)
    sys.exit(0 if outcome.ok else 1)
