from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from filmes_api.db.base import Base

GENRE_MAX_LENGTH = 50
MIN_DURATION = 70
MAX_DURATION = 600


class Movie(Base):
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, index=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    genre: Mapped[str] = mapped_column(String(GENRE_MAX_LENGTH), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"Movie(id={self.id!r}, title={self.title!r})"
