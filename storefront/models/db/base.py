"""
Base models and mixins for the database
"""

from datetime import UTC, datetime

from sqlalchemy import Boolean, Column, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TimestampMixin:
    """Mixin for automatic created/updated timestamps."""

    created_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )


class SoftDeleteMixin:
    """
    Mixin for rows that are flagged instead of deleted.

    Rows carrying `is_deleted = true` are hidden from every ORM SELECT by
    `storefront.database.soft_delete`.
    """

    is_deleted = Column(Boolean, default=False, nullable=False)
