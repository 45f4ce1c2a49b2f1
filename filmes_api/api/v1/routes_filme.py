import logging
from typing import Any
from fastapi import APIRouter, Body, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from filmes_api.api.deps import get_movie_mapper
from filmes_api.core.config import settings
from filmes_api.core.exceptions import MovieNotFoundError
from filmes_api.crud.movie import crud_movie
from filmes_api.db.session import get_db_session
from filmes_api.schemas.filme import (
    MovieCreate,
    MovieRead,
    MovieResponse,
    MovieUpdate,
    ValidationErrorResponse,
)
from filmes_api.services.mapper import MovieMapper
from filmes_api.services.patch import apply_patch
from filmes_api.services.validation import ensure_valid, validate_update_payload

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/filme",
    tags=["filme"]
)

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"description": "Movie not found"}}
INVALID = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse, "description": "Validation failed"}}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MovieResponse,
    responses=INVALID,
    summary="Add a movie to the database")
async def create_movie(
        movie_in: MovieCreate,
        request: Request,
        response: Response,
        db: AsyncSession = Depends(get_db_session),
        mapper: MovieMapper = Depends(get_movie_mapper)):
    ensure_valid(movie_in)
    movie = await crud_movie.insert(db, mapper.to_entity(movie_in))
    await crud_movie.commit(db)
    logger.info(f"Created movie {movie.id}")
    response.headers["Location"] = str(request.url_for("get_movie", movie_id=movie.id))
    return mapper.to_response(movie)


@router.get("", response_model=list[MovieRead], summary="List a page of movies")
async def list_movies(
        skip: int = 0,
        take: int = settings.DEFAULT_PAGE_SIZE,
        db: AsyncSession = Depends(get_db_session),
        mapper: MovieMapper = Depends(get_movie_mapper)):
    """
    Skip `skip` rows and return at most `take` of the remainder.
    Out of range values yield an empty list instead of an error.
    """
    movies = await crud_movie.list_range(db, skip=skip, take=take)
    return [mapper.to_read(movie) for movie in movies]


@router.get("/{movie_id}", response_model=MovieRead, responses=NOT_FOUND, summary="Get a movie by id")
async def get_movie(
        movie_id: int,
        db: AsyncSession = Depends(get_db_session),
        mapper: MovieMapper = Depends(get_movie_mapper)):
    movie = await crud_movie.find_by_id(db, movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    return mapper.to_read(movie)


@router.put(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**NOT_FOUND, **INVALID},
    summary="Replace every field of a movie")
async def replace_movie(
        movie_id: int,
        movie_in: MovieUpdate,
        db: AsyncSession = Depends(get_db_session),
        mapper: MovieMapper = Depends(get_movie_mapper)):
    ensure_valid(movie_in)
    movie = await crud_movie.find_by_id(db, movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    await crud_movie.update(db, mapper.merge(movie_in, movie))
    await crud_movie.commit(db)
    logger.info(f"Replaced movie {movie_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**NOT_FOUND, **INVALID},
    summary="Partially update a movie with a JSON Patch document")
async def patch_movie(
        movie_id: int,
        operations: Any = Body(
            default=None,
            examples=[[{"op": "replace", "path": "/duration", "value": 136}]]),
        db: AsyncSession = Depends(get_db_session),
        mapper: MovieMapper = Depends(get_movie_mapper)):
    """
    The current movie is projected to the update shape, the operations are
    applied in order and the result is validated before anything is stored.
    """
    movie = await crud_movie.find_by_id(db, movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    patched = apply_patch(mapper.to_update(movie).model_dump(), operations)
    movie_in = validate_update_payload(patched)
    await crud_movie.update(db, mapper.merge(movie_in, movie))
    await crud_movie.commit(db)
    logger.info(f"Patched movie {movie_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND,
    summary="Remove a movie")
async def delete_movie(
        movie_id: int,
        db: AsyncSession = Depends(get_db_session)):
    movie = await crud_movie.find_by_id(db, movie_id)
    if movie is None:
        raise MovieNotFoundError(movie_id)
    await crud_movie.delete(db, movie)
    await crud_movie.commit(db)
    logger.info(f"Deleted movie {movie_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
