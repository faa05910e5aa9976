"""
User administration API.

Endpoints:
    POST   /auth/delete/user    — delete a user account by username
    GET    /delete-user         — browser form driving the endpoint
"""
import logging

from flask import g, jsonify, request, send_from_directory

from core.guards import Authenticated, Authorised, guarded
from core.users.deletion import USER_DELETED, delete_user_by_username

logger = logging.getLogger(__name__)


def register_user_routes(app):
    """Register user administration routes with the Flask app"""

    # Authorised(None) reads DELETE_USER_REQUIRES_ADMIN per request. It
    # defaults to False, which lets any signed-in user delete any account,
    # their own or someone else's.
    @app.route('/auth/delete/user', methods=['POST'])
    @guarded(Authenticated(), Authorised(require_admin=None))
    def delete_user():
        """Delete the user named in the JSON body"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        # Read before the delete: the caller may be deleting their own row
        actor = g.current_user.username

        # ApiError subclasses are rendered by the registered error handlers
        delete_user_by_username(data.get('username'))

        logger.info('User %r deleted by %r', data['username'], actor)
        return jsonify({'message': USER_DELETED}), 200

    @app.route('/delete-user', methods=['GET'])
    def delete_user_page():
        """Serve the delete-user form"""
        return send_from_directory(app.static_folder, 'delete_user.html')
