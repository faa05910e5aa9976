"""
Database models for account administration
"""
from datetime import datetime
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()


class User(db.Model):
    """User account identified by a unique username"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(150), unique=True, nullable=False, index=True)
    email = db.Column(db.String(255), unique=True, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    last_login = db.Column(db.DateTime)

    # Admin access control
    is_admin = db.Column(db.Boolean, default=False, nullable=False, index=True)

    def __repr__(self):
        return f'<User {self.username}>'

    @classmethod
    def find_by_username(cls, username):
        """Exact-match lookup; case sensitivity follows the database collation"""
        return cls.query.filter_by(username=username).first()

    @classmethod
    def delete_by_username(cls, username):
        """
        Delete every row whose username equals ``username``.

        Returns the number of rows removed. Does not commit; the caller
        owns the transaction. SQLAlchemy errors propagate unchanged.
        """
        return cls.query.filter_by(username=username).delete(synchronize_session='fetch')

    def to_dict(self):
        """Convert user to dictionary for API responses"""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'is_admin': self.is_admin,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'last_login': self.last_login.isoformat() if self.last_login else None,
        }
