"""
API error taxonomy and the Flask handlers that render it.

Every error carries the HTTP status and the caller-facing message. The
message is the only thing sent over the wire; anything chained onto the
exception stays server-side.
"""
from flask import jsonify


class ApiError(Exception):
    status_code = 500
    message = 'An internal error occurred'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_response(self):
        return jsonify({'message': self.message}), self.status_code


class ValidationError(ApiError):
    """Required input missing or empty"""
    status_code = 400
    message = 'Invalid request'


class NotFoundError(ApiError):
    """No record matched the request"""
    status_code = 404
    message = 'Not found'


class PersistenceError(ApiError):
    """The storage layer failed; details are logged, never returned"""
    status_code = 500
    message = 'An internal error occurred'


def register_error_handlers(app):
    """Register JSON renderers for the API error taxonomy"""

    @app.errorhandler(ApiError)
    def handle_api_error(error):
        # PersistenceError is logged with its cause where it is raised
        return error.to_response()
