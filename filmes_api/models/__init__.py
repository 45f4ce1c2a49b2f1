from .movie import Movie as Movie

__all__ = ["Movie"]
