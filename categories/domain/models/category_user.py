from __future__ import annotations
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Index
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from uuid import UUID, uuid4

from app.core.database.base import Base


class CategoryUser(Base):
    """Join row between a user and a category.

    Both sides are plain identifier values: there is no foreign key and no
    ORM relationship, lookups go across tables by id.
    """

    __tablename__ = "categories_users"
    __table_args__ = (Index("ix_categories_users_pair", "user_id", "category_id"),)

    id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), default=uuid4, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), nullable=False, index=True)
    category_id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), nullable=False)
