"""Catalog entry - static exercise definition seeded from the bundled JSON."""

from __future__ import annotations

from sqlalchemy import LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fitplan.db.base import Base


class CatalogEntry(Base):
    """Exercise definition (name, muscle group, demonstration image). Shared, never owned."""

    __tablename__ = "exercise_catalog"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    muscle_group: Mapped[str] = mapped_column(String(100), nullable=False, default="", index=True)
    image: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)

    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise", back_populates="catalog_entry", passive_deletes="all"
    )
