"""
User account model
"""

from sqlalchemy import Column, Integer, String

from .base import Base, TimestampMixin


class UserDB(Base, TimestampMixin):
    """
    Registered user.

    Attributes:
        id: Identity key
        name: Display name (shown as purchaser on orders)
        email: Unique login email
        password_hash: bcrypt hash of the password
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(128), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<UserDB(id={self.id}, email='{self.email}')>"
