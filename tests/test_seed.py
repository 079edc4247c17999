import json

import pytest

from movies.config import SEED_PATH
from movies.database.db import create_store, load_movies


def write_seed(tmp_path, movies):
    path = tmp_path / "movies.json"
    path.write_text(json.dumps(movies), encoding="utf-8")
    return path


def seed_movie(**overrides):
    data = {
        "id": "s-1",
        "title": "Ran",
        "year": 1985,
        "director": "Akira Kurosawa",
        "duration": 162,
        "poster": "https://img.example.com/ran.jpg",
        "genre": ["Drama", "War"],
    }
    data.update(overrides)
    return data


def test_bundled_seed_loads():
    movies = load_movies(SEED_PATH)

    assert len(movies) == 10
    assert len({movie.id for movie in movies}) == 10


def test_seed_keeps_ids_and_defaults_rate(tmp_path):
    movies = load_movies(write_seed(tmp_path, [seed_movie()]))

    assert movies[0].id == "s-1"
    assert movies[0].rate == 5


def test_create_store(tmp_path):
    store = create_store(write_seed(tmp_path, [seed_movie(), seed_movie(id="s-2")]))

    assert len(store) == 2


def test_invalid_seed_movie_is_rejected(tmp_path):
    with pytest.raises(ValueError, match="s-1"):
        load_movies(write_seed(tmp_path, [seed_movie(year=1800)]))


def test_seed_movie_without_id_is_rejected(tmp_path):
    movie = seed_movie()
    del movie["id"]

    with pytest.raises(ValueError):
        load_movies(write_seed(tmp_path, [movie]))


def test_duplicate_seed_ids_are_rejected(tmp_path):
    with pytest.raises(ValueError, match="duplicate"):
        load_movies(write_seed(tmp_path, [seed_movie(), seed_movie()]))
