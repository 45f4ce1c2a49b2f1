from filmes_api.models.movie import Movie
from filmes_api.schemas.filme import MovieCreate, MovieRead, MovieResponse, MovieUpdate


class MovieMapper:
    """Stateless projections between transfer shapes and the Movie entity."""

    def to_entity(self, data: MovieCreate) -> Movie:
        return Movie(**data.model_dump())

    def to_read(self, movie: Movie) -> MovieRead:
        return MovieRead.model_validate(movie)

    def to_response(self, movie: Movie) -> MovieResponse:
        return MovieResponse.model_validate(movie)

    def to_update(self, movie: Movie) -> MovieUpdate:
        return MovieUpdate(title=movie.title, genre=movie.genre, duration=movie.duration)

    def merge(self, data: MovieUpdate, movie: Movie) -> Movie:
        """Build the replacement value for `movie`; the id is carried over unchanged."""
        return Movie(id=movie.id, **data.model_dump())
