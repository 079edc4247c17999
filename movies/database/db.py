import json
import logging
from pathlib import Path
from typing import List

from fastapi import Request

from movies.database.store import MovieStore
from movies.models.movies import Movie
from movies.validation import Invalid, validate_movie

logger = logging.getLogger(__name__)


def load_movies(path: Path) -> List[Movie]:
    logger.info(f"Loading seed movies from {path}")
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)

    if not isinstance(raw, list):
        raise ValueError(f"Seed file {path} must contain a JSON array")

    movies = []
    for position, item in enumerate(raw):
        if not isinstance(item, dict) or not item.get("id"):
            raise ValueError(f"Seed movie #{position} has no id")
        result = validate_movie(item)
        if isinstance(result, Invalid):
            raise ValueError(f"Seed movie {item['id']} is invalid: {result.errors}")
        movies.append(Movie.model_validate({**result.data, "id": str(item["id"])}))

    ids = [movie.id for movie in movies]
    if len(ids) != len(set(ids)):
        raise ValueError(f"Seed file {path} contains duplicate ids")

    logger.info(f"Loaded {len(movies)} seed movies")
    return movies


def create_store(path: Path) -> MovieStore:
    return MovieStore(load_movies(path))


def get_store(request: Request) -> MovieStore:
    return request.app.state.store
