"""
User management utility
List, create, delete, promote or demote user accounts by username
"""
from server import app
from models import db, User
from errors import ApiError
from core.users.deletion import delete_user_by_username
import sys


def list_users():
    """List all users"""
    with app.app_context():
        users = User.query.order_by(User.username).all()
        if not users:
            print("No users found")
            return []

        print("Current users:")
        for user in users:
            role = ' (admin)' if user.is_admin else ''
            print(f"  - {user.username}{role} (ID: {user.id})")
        return [user.username for user in users]


def create_user(username, email=None, is_admin=False):
    """Create a user"""
    with app.app_context():
        if User.find_by_username(username):
            print(f"ℹ️  User {username} already exists")
            return False

        db.session.add(User(username=username, email=email, is_admin=is_admin))
        db.session.commit()
        print(f"✅ Created {username}{' as admin' if is_admin else ''}")
        return True


def delete_user(username):
    """Delete a user through the same service the API uses"""
    with app.app_context():
        try:
            delete_user_by_username(username)
        except ApiError as e:
            print(f"❌ {e.message}: {username}")
            return False

        print(f"✅ Deleted {username}")
        return True


def set_admin(username, is_admin):
    """Grant or remove admin privileges"""
    with app.app_context():
        user = User.find_by_username(username)

        if not user:
            print(f"❌ User not found: {username}")
            return False

        if user.is_admin == is_admin:
            print(f"ℹ️  User {username} is {'already' if is_admin else 'not'} an admin")
            return True

        user.is_admin = is_admin
        db.session.commit()
        if is_admin:
            print(f"✅ Promoted {username} to admin")
        else:
            print(f"✅ Removed admin privileges from {username}")
        return True


def show_usage():
    """Show usage information"""
    print("""
Account Admin User Management Utility

Usage:
    python manage_users.py list                         - List all users
    python manage_users.py create <username> [--admin]  - Create a user
    python manage_users.py delete <username>            - Delete a user
    python manage_users.py promote <username>           - Promote user to admin
    python manage_users.py demote <username>            - Remove admin privileges
    """)


def main(argv):
    if len(argv) < 1:
        show_usage()
        return 1

    command = argv[0].lower()

    if command == 'list':
        list_users()
        return 0

    if command not in ('create', 'delete', 'promote', 'demote'):
        print(f"❌ Unknown command: {command}")
        show_usage()
        return 1

    if len(argv) < 2:
        print("❌ Username required")
        show_usage()
        return 1

    username = argv[1]
    if command == 'create':
        ok = create_user(username, is_admin='--admin' in argv[2:])
    elif command == 'delete':
        ok = delete_user(username)
    else:
        ok = set_admin(username, command == 'promote')
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
