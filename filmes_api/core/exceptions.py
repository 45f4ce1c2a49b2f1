from typing import Optional

from filmes_api.schemas.filme import FieldError


class FilmeApiError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class MovieNotFoundError(FilmeApiError):
    def __init__(self, movie_id: Optional[int] = None):
        self.movie_id = movie_id
        super().__init__(f"Movie {movie_id} not found", status_code=404)


class MovieValidationError(FilmeApiError):
    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        super().__init__("One or more validation errors occurred", status_code=400)


class MalformedPatchError(FilmeApiError):
    def __init__(self, message: str):
        super().__init__(message, status_code=400)
