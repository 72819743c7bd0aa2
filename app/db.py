"""Database session management and repositories."""

from __future__ import annotations

import uuid
from typing import Any, Iterator

from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import get_settings
from app.models import Base, Movie


def build_engine(url: str, *, echo: bool = False) -> Engine:
    """Create the pooled engine shared by every request."""

    connect_args: dict[str, Any] = {}
    if url.startswith("sqlite"):
        # handlers run in the threadpool, not the thread that opened the pool
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args, future=True)


_settings = get_settings()
engine = build_engine(_settings.database_url, echo=_settings.database_echo)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def init_models() -> None:
    """Create tables if they do not exist."""
    Base.metadata.create_all(bind=engine)


def get_session() -> Iterator[Session]:
    """FastAPI-friendly dependency that manages commits/rollbacks."""

    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


class MovieRepository:
    """Direct CRUD helpers for the movies table."""

    def create(
        self,
        session: Session,
        *,
        title: str | None,
        actors: list[str] | None,
        release_year: int | None,
    ) -> Movie:
        movie = Movie(title=title, actors=actors, release_year=release_year)
        session.add(movie)
        session.flush()  # assign IDs before leaving scope
        session.refresh(movie)
        return movie

    def list_all(self, session: Session) -> list[Movie]:
        return list(session.execute(select(Movie)).scalars())

    def get(self, session: Session, movie_id: uuid.UUID) -> Movie | None:
        return session.get(Movie, movie_id)

    def replace(
        self,
        session: Session,
        movie_id: uuid.UUID,
        *,
        title: str | None,
        actors: list[str] | None,
        release_year: int | None,
    ) -> int:
        """Overwrite all three fields; return how many records actually changed.

        Returns 0 both when nothing matches and when the stored values are
        already identical, like a document store's modified count.
        """

        movie = self.get(session, movie_id)
        if movie is None:
            return 0
        if (movie.title, movie.actors, movie.release_year) == (title, actors, release_year):
            return 0
        movie.title = title
        movie.actors = actors
        movie.release_year = release_year
        session.flush()
        return 1

    def delete(self, session: Session, movie_id: uuid.UUID) -> int:
        movie = self.get(session, movie_id)
        if movie is None:
            return 0
        session.delete(movie)
        session.flush()
        return 1
