from fastapi import Request

from filmes_api.services.mapper import MovieMapper


def get_movie_mapper(request: Request) -> MovieMapper:
    return request.app.state.movie_mapper
