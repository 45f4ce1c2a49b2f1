import logging
from typing import Optional, Sequence
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import select

from filmes_api.models.movie import Movie

logger = logging.getLogger(__name__)

# Movie.id is a 32-bit INTEGER column, so no id or row position can exceed it
MAX_ROW_ID = 2**31 - 1


class CRUDMovie:
    async def insert(self, db: AsyncSession, movie: Movie) -> Movie:
        db.add(movie)
        # flush so the database assigns the id
        await db.flush()
        return movie

    async def find_by_id(self, db: AsyncSession, movie_id: int) -> Optional[Movie]:
        if not 1 <= movie_id <= MAX_ROW_ID:
            return None
        result = await db.execute(select(Movie).where(Movie.id == movie_id))
        return result.scalar_one_or_none()

    async def list_range(self, db: AsyncSession, skip: int = 0, take: int = 50) -> Sequence[Movie]:
        if take <= 0 or skip >= MAX_ROW_ID:
            return []
        result = await db.execute(
            select(Movie)
            .order_by(Movie.id)
            .offset(max(skip, 0))
            .limit(min(take, MAX_ROW_ID))
        )
        return result.scalars().all()

    async def update(self, db: AsyncSession, movie: Movie) -> None:
        await db.execute(
            update(Movie)
            .where(Movie.id == movie.id)
            .values(title=movie.title, genre=movie.genre, duration=movie.duration)
        )

    async def delete(self, db: AsyncSession, movie: Movie) -> None:
        await db.delete(movie)

    async def commit(self, db: AsyncSession) -> None:
        try:
            await db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to commit movie changes: {e}", exc_info=True)
            await db.rollback()
            raise


crud_movie = CRUDMovie()
