import pytest
from fastapi.testclient import TestClient

from movies.database.db import get_store
from movies.database.store import MovieStore
from movies.main import app
from movies.models.movies import Movie


def make_movie(**overrides):
    data = {
        "id": "m-1",
        "title": "Heat",
        "year": 1995,
        "director": "Michael Mann",
        "duration": 170,
        "rate": 8.3,
        "poster": "https://img.example.com/heat.jpg",
        "genre": ["Action", "Crime"],
    }
    data.update(overrides)
    return Movie.model_validate(data)


@pytest.fixture
def movie_factory():
    return make_movie


@pytest.fixture
def movie_payload():
    return {
        "title": "X",
        "year": 2020,
        "director": "D",
        "duration": 90,
        "poster": "http://a.com/p.jpg",
        "genre": ["Action"],
    }


@pytest.fixture
def store():
    return MovieStore([
        make_movie(),
        make_movie(id="m-2", title="Alien", year=1979, director="Ridley Scott",
                   duration=117, genre=["Horror", "Sci-Fi"]),
        make_movie(id="m-3", title="Gladiator", year=2000, director="Ridley Scott",
                   duration=155, genre=["Action", "Drama"]),
    ])


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
