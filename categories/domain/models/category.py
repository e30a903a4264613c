from __future__ import annotations
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from uuid import UUID, uuid4

from app.core.database.base import Base


class Category(Base):
    __tablename__ = "categories"

    # name uniqueness is enforced by the get-or-create check, not by the table
    id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), default=uuid4, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    uri: Mapped[str] = mapped_column(String(1024), nullable=False)
