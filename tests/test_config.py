from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.db import MovieRepository, build_engine
from app.models import Base


def test_settings_read_database_url_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.database_url == "sqlite:///./other.db"
    assert settings.log_level == "debug"


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("APP_TITLE", raising=False)
    monkeypatch.delenv("DATABASE_ECHO", raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite:///./movies.db"
    assert settings.app_title == "IMR Movie Database"
    assert settings.database_echo is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_repository_against_file_database(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'movies.db'}")
    Base.metadata.create_all(bind=engine)
    repo = MovieRepository()

    with Session(engine) as session:
        movie = repo.create(session, title="Alien", actors=["Sigourney Weaver"], release_year=1979)
        session.commit()
        movie_id = movie.id

    with Session(engine) as session:
        assert repo.get(session, movie_id).actors == ["Sigourney Weaver"]
        assert repo.replace(session, movie_id, title="Alien", actors=["Sigourney Weaver"], release_year=1979) == 0
        assert repo.replace(session, movie_id, title="Aliens", actors=["Sigourney Weaver"], release_year=1986) == 1
        assert repo.delete(session, movie_id) == 1
        assert repo.delete(session, movie_id) == 0
    engine.dispose()
