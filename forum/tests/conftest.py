# forum/tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import forum.models  # noqa: F401
from forum.core.config import Settings, get_settings
from forum.database import Base, create_db_engine, get_db
from forum.main import create_app
from forum.models import GenreModel, MovieGenreModel, MovieModel
from forum.schemas.user import UserRegister
from forum.services.user_service import UserService


@pytest.fixture
def settings():
    return Settings(secret_key="test-secret", seed_on_startup=False, cookie_secure=False)


@pytest.fixture
def engine():
    # one shared in-memory database per test
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def app(session_factory, settings):
    app = create_app(settings, init_db=False)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(db):
    def _make(username="joon", email="joon@x.com", password="P@$$wOrd1"):
        return UserService(db).register(
            UserRegister(username=username, email=email, password=password)
        )
    return _make


@pytest.fixture
def catalog(db):
    """Inception and The Matrix, both Sci-Fi; The Matrix also Action; Drama unused."""
    sci_fi = GenreModel(name="Sci-Fi")
    action = GenreModel(name="Action")
    drama = GenreModel(name="Drama")
    inception = MovieModel(title="Inception", description="Dreams", release_date="2010-07-16", image_url="inception.jpg")
    matrix = MovieModel(title="The Matrix", description="Red pill", release_date="1999-03-31", image_url="matrix.jpg")
    db.add_all([sci_fi, action, drama, inception, matrix])
    db.commit()
    db.add_all([
        MovieGenreModel(movie_id=inception.movie_id, genre_id=sci_fi.genre_id),
        MovieGenreModel(movie_id=matrix.movie_id, genre_id=sci_fi.genre_id),
        MovieGenreModel(movie_id=matrix.movie_id, genre_id=action.genre_id),
    ])
    db.commit()
    return {
        "sci_fi": sci_fi.genre_id,
        "action": action.genre_id,
        "drama": drama.genre_id,
        "inception": inception.movie_id,
        "matrix": matrix.movie_id,
    }
