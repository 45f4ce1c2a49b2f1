import os

os.environ["ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from filmes_api.app import create_app
from filmes_api.db.base import Base
from filmes_api.db.session import get_db_session
from filmes_api.models import Movie


@pytest.fixture
async def db_engine():
    """In-memory database shared by every session of a single test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine):
    return async_sessionmaker(
        bind=db_engine,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False
    )


@pytest.fixture
async def db_session(db_session_factory):
    async with db_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def client(db_session_factory):
    app = create_app()

    async def override_db_session():
        async with db_session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
async def seeded_movies(db_session_factory):
    """Three movies inserted in id order."""
    async with db_session_factory() as session:
        movies = [
            Movie(title="Matrix", genre="Sci-Fi", duration=136),
            Movie(title="Central do Brasil", genre="Drama", duration=113),
            Movie(title="Cidade de Deus", genre="Crime", duration=130),
        ]
        session.add_all(movies)
        await session.commit()
        return [movie.id for movie in movies]
