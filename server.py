#!/usr/bin/env python3
"""
Account Admin Server
A small Flask server for deleting user accounts by username
"""

from flask import Flask, jsonify, send_from_directory
from flask_cors import CORS
import logging
import os
from pathlib import Path
from datetime import datetime
import secrets

BASE_DIR = Path(__file__).parent

app = Flask(__name__, static_folder=str(BASE_DIR / 'static'))
CORS(
    app,
    supports_credentials=True,
    origins=os.environ.get('CORS_ORIGINS', '*').split(','),
)

# Secret key for sessions (generate a secure one for production)
app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', secrets.token_hex(32))

# When false, any authenticated user may delete any account
app.config['DELETE_USER_REQUIRES_ADMIN'] = (
    os.environ.get('DELETE_USER_REQUIRES_ADMIN', '').strip().lower() in ('1', 'true', 'yes')
)

# Database configuration
database_url = os.environ.get('DATABASE_URL', f'sqlite:///{BASE_DIR}/account_admin.db')

# Fix Heroku's postgres:// scheme (should be postgresql://)
if database_url and database_url.startswith('postgres://'):
    database_url = database_url.replace('postgres://', 'postgresql://', 1)

app.config['SQLALCHEMY_DATABASE_URI'] = database_url
app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

# PostgreSQL-specific connection pool settings
if database_url.startswith('postgresql://'):
    app.config['SQLALCHEMY_ENGINE_OPTIONS'] = {
        'pool_size': 5,
        'max_overflow': 10,
        'pool_recycle': 300,
        'pool_pre_ping': True,
        'pool_timeout': 30,
    }
else:
    # SQLite settings (for local dev)
    app.config['SQLALCHEMY_ENGINE_OPTIONS'] = {
        'pool_pre_ping': True
    }

# Import and initialize database
from models import db
db.init_app(app)

# Render ValidationError / NotFoundError / PersistenceError as JSON
from errors import register_error_handlers
register_error_handlers(app)

# Register user administration routes
from routes.user_routes import register_user_routes
register_user_routes(app)


@app.route('/')
def index():
    """Serve the delete-user page"""
    return send_from_directory(app.static_folder, 'delete_user.html')


@app.route('/api/health', methods=['GET'])
def health_check():
    """Health check endpoint to verify database connection"""
    try:
        db.session.execute(db.text('SELECT 1'))
        db.session.commit()
        return jsonify({
            'status': 'healthy',
            'database': 'connected',
            'timestamp': datetime.utcnow().isoformat()
        })
    except Exception:
        logging.getLogger(__name__).exception('Health check failed')
        db.session.rollback()
        return jsonify({
            'status': 'unhealthy',
            'database': 'disconnected',
            'timestamp': datetime.utcnow().isoformat()
        }), 503


if __name__ == '__main__':
    logging.basicConfig(
        level=os.environ.get('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    port = int(os.environ.get('PORT', 4001))

    with app.app_context():
        db.create_all()

    print("=" * 60)
    print("Account Admin Server")
    print("=" * 60)
    print(f"Base directory: {BASE_DIR}")
    print(f"Server starting on http://localhost:{port}")
    print(f"Delete-user form: http://localhost:{port}/delete-user")
    print("=" * 60)

    app.run(host='0.0.0.0', port=port, debug=os.environ.get('FLASK_DEBUG') == '1')
