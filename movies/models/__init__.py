from .movies import Genre, Movie, MovieCreate, MovieUpdate

__all__ = ["Genre", "Movie", "MovieCreate", "MovieUpdate"]
