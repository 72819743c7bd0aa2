"""SQLAlchemy ORM models.

The catalog holds a single "movies" table. Data columns are nullable so that
whatever the insert call hands over is stored as-is, the way a schemaless
collection would keep it.
"""

from __future__ import annotations

import uuid

from sqlalchemy import JSON, Integer, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Movie(Base):
    """One movie record: title, ordered actor names and release year."""

    __tablename__ = "movies"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    actors: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    release_year: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"Movie(id={self.id}, title={self.title}, release_year={self.release_year})"
