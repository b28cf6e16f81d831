"""
Store and store membership models
"""

from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, relationship

from .base import Base, SoftDeleteMixin, TimestampMixin

if TYPE_CHECKING:
    from .user import UserDB


class Store(Base, TimestampMixin, SoftDeleteMixin):
    """A tenant: every catalog, cart and order row hangs off one store."""

    __tablename__ = "stores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(32), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    __table_args__ = (Index("idx_stores_user", user_id),)

    def __repr__(self):
        return f"<Store(id={self.id}, name='{self.name}')>"


class UserStore(Base, TimestampMixin):
    """
    Membership of a user in a store.

    Attributes:
        role: "OWNER", "ADMIN" or "CASHIER"
    """

    __tablename__ = "user_stores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    store_id = Column(Integer, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False)
    role = Column(String(20), nullable=False)

    user: Mapped["UserDB"] = relationship("UserDB")

    __table_args__ = (
        UniqueConstraint("user_id", "store_id", name="uq_user_store"),
        Index("idx_user_stores_store", store_id),
    )

    def __repr__(self):
        return f"<UserStore(user_id={self.user_id}, store_id={self.store_id}, role='{self.role}')>"
