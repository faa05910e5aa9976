"""
Pytest configuration and shared fixtures for Account Admin tests
"""
import pytest
import os
import sys
import tempfile
from datetime import datetime
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# The engine is bound when server.py is imported, so point it at a
# throwaway database before anything imports the app
_db_fd, _db_path = tempfile.mkstemp(suffix='.db')
os.environ['DATABASE_URL'] = f'sqlite:///{_db_path}'
os.environ['SECRET_KEY'] = 'test-secret-key'
os.environ.pop('DELETE_USER_REQUIRES_ADMIN', None)


@pytest.fixture(scope='session')
def app():
    """Create and configure a test Flask application instance"""
    from server import app as flask_app
    from models import db

    flask_app.config.update({
        'TESTING': True,
        'DELETE_USER_REQUIRES_ADMIN': False,
    })

    # Create tables inside a persistent app context
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()
        db.engine.dispose()

    os.close(_db_fd)
    os.unlink(_db_path)


@pytest.fixture(autouse=True)
def _clean_db(app):
    """Clean up data between tests to avoid UNIQUE constraint violations."""
    from models import db
    yield
    db.session.rollback()
    db.session.expunge_all()
    for table in reversed(db.metadata.sorted_tables):
        db.session.execute(table.delete())
    db.session.commit()
    app.config['DELETE_USER_REQUIRES_ADMIN'] = False


@pytest.fixture(scope='function')
def client(app):
    """Create a test client for the Flask application"""
    return app.test_client()


def _make_user(username, is_admin=False):
    from models import User, db

    user = User(
        username=username,
        email=f'{username}@example.com',
        created_at=datetime.utcnow(),
        is_admin=is_admin,
    )
    db.session.add(user)
    db.session.commit()
    return user


@pytest.fixture
def user(app):
    """The signed-in, non-admin caller"""
    return _make_user('alice')


@pytest.fixture
def other_user(app):
    """An account the caller may try to delete"""
    return _make_user('bob')


@pytest.fixture
def admin_user(app):
    """Create an admin test user"""
    return _make_user('root', is_admin=True)


def _login(client, user):
    with client.session_transaction() as sess:
        sess['user_id'] = user.id
        sess['username'] = user.username
    return client


@pytest.fixture
def auth_client(client, user):
    """Test client with a session for the non-admin user"""
    return _login(client, user)


@pytest.fixture
def admin_client(app, admin_user):
    """Separate test client with a session for the admin user"""
    return _login(app.test_client(), admin_user)


@pytest.fixture
def user_exists(app):
    """Check for a username with a fresh query"""
    from models import User, db

    def _exists(username):
        db.session.expire_all()
        return User.query.filter_by(username=username).count() > 0
    return _exists


@pytest.fixture
def make_user(app):
    """Factory for extra users"""
    return _make_user
