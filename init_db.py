"""
Initialize the database tables, optionally seeding a first admin
"""
from server import app
from models import db, User
import os


def init_database():
    """Create all database tables"""
    with app.app_context():
        db.create_all()
        print("✅ Database tables created successfully!")

        # Seed the owner account as admin so someone can manage users
        owner = os.environ.get('OWNER_USERNAME', '').strip()
        if owner and User.find_by_username(owner) is None:
            db.session.add(User(username=owner, is_admin=True))
            db.session.commit()
            print(f"✅ Created admin user: {owner}")


if __name__ == '__main__':
    init_database()
