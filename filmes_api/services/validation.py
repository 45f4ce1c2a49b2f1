"""Field rules shared by every movie transfer shape.

Rules are checked explicitly after pydantic has parsed the payload types, so
a request either reaches the store with all fields valid or is rejected with
the full list of field messages.
"""
from typing import Any, Iterable, Sequence

from pydantic import ValidationError

from filmes_api.core.exceptions import MovieValidationError
from filmes_api.models.movie import GENRE_MAX_LENGTH, MAX_DURATION, MIN_DURATION
from filmes_api.schemas.filme import FieldError, MovieBase, MovieUpdate

TITLE_REQUIRED = "Movie title is required"
GENRE_REQUIRED = "Movie genre is required"
GENRE_TOO_LONG = f"Movie genre must not exceed {GENRE_MAX_LENGTH} characters"
DURATION_OUT_OF_RANGE = f"Movie duration must be between {MIN_DURATION} and {MAX_DURATION} minutes"


def validate_movie(data: MovieBase) -> list[FieldError]:
    errors: list[FieldError] = []
    if not data.title or not data.title.strip():
        errors.append(FieldError(field="title", message=TITLE_REQUIRED))
    if not data.genre or not data.genre.strip():
        errors.append(FieldError(field="genre", message=GENRE_REQUIRED))
    elif len(data.genre) > GENRE_MAX_LENGTH:
        errors.append(FieldError(field="genre", message=GENRE_TOO_LONG))
    if not MIN_DURATION <= data.duration <= MAX_DURATION:
        errors.append(FieldError(field="duration", message=DURATION_OUT_OF_RANGE))
    return errors


def ensure_valid(data: MovieBase) -> MovieBase:
    errors = validate_movie(data)
    if errors:
        raise MovieValidationError(errors)
    return data


def field_errors_from_pydantic(errors: Iterable[dict[str, Any]], skip: Sequence[str] = ("body",)) -> list[FieldError]:
    """Flatten pydantic error dicts into field/message pairs."""
    field_errors = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in skip]
        field_errors.append(FieldError(field=".".join(loc), message=error.get("msg", "Invalid value")))
    return field_errors


def validate_update_payload(payload: dict[str, Any]) -> MovieUpdate:
    try:
        data = MovieUpdate.model_validate(payload)
    except ValidationError as e:
        raise MovieValidationError(field_errors_from_pydantic(e.errors()))
    return ensure_valid(data)
