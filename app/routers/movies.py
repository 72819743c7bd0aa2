"""Movie Record API: four verb handlers on a single ``/api`` route.

Bodies are parsed inside each handler, so a malformed body or identifier
falls into the same error path as a database failure and answers 500.
"""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.orm import Session

from app.db import MovieRepository, get_session
from app.models import Movie
from app.schemas import MovieDelete, MovieIn, MovieOut, MovieUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["movies"])
repo = MovieRepository()


async def raw_body(request: Request) -> bytes:
    return await request.body()


@router.post("")
def create_movie(
    body: bytes = Depends(raw_body),
    session: Session = Depends(get_session),
):
    try:
        payload = MovieIn.model_validate_json(body)
        movie = repo.create(
            session,
            title=payload.title,
            actors=payload.actors,
            release_year=payload.release_year,
        )
        session.commit()
        logger.info("Added movie %s (%s)", movie.id, movie.title)
        return JSONResponse(_movie_to_json(movie), status_code=status.HTTP_201_CREATED)
    except Exception as exc:
        session.rollback()
        logger.error("Error adding movie: %s", exc)
        return PlainTextResponse("Error adding movie", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("")
def list_movies(session: Session = Depends(get_session)):
    try:
        movies = repo.list_all(session)
        return JSONResponse([_movie_to_json(movie) for movie in movies])
    except Exception as exc:
        logger.error("Error fetching movies: %s", exc)
        return PlainTextResponse("Error fetching movies", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.put("")
def update_movie(
    body: bytes = Depends(raw_body),
    session: Session = Depends(get_session),
):
    try:
        payload = MovieUpdate.model_validate_json(body)
        modified = repo.replace(
            session,
            uuid.UUID(payload.id),
            title=payload.title,
            actors=payload.actors,
            release_year=payload.release_year,
        )
        if modified == 0:
            return PlainTextResponse("Movie not found or no changes made", status_code=status.HTTP_404_NOT_FOUND)
        session.commit()
        logger.info("Updated movie %s", payload.id)
        return PlainTextResponse("Movie updated")
    except Exception as exc:
        session.rollback()
        logger.error("Error updating movie: %s", exc)
        return PlainTextResponse("Error updating movie", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.delete("")
def delete_movie(
    body: bytes = Depends(raw_body),
    session: Session = Depends(get_session),
):
    try:
        payload = MovieDelete.model_validate_json(body)
        deleted = repo.delete(session, uuid.UUID(payload.id))
        if deleted == 0:
            return PlainTextResponse("Movie not found", status_code=status.HTTP_404_NOT_FOUND)
        session.commit()
        logger.info("Deleted movie %s", payload.id)
        return PlainTextResponse("Movie deleted")
    except Exception as exc:
        session.rollback()
        logger.error("Error deleting movie: %s", exc)
        return PlainTextResponse("Error deleting movie", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def _movie_to_json(movie: Movie) -> dict:
    return MovieOut(
        id=movie.id,
        title=movie.title,
        actors=movie.actors,
        release_year=movie.release_year,
    ).to_json()
