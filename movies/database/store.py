import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

from movies.models.movies import Movie


@dataclass(frozen=True)
class Found:
    record: Movie


class NotFound:
    def __repr__(self):
        return "NOT_FOUND"


NOT_FOUND = NotFound()

Lookup = Union[Found, NotFound]


class MovieStore:
    """Ordered in-memory movie collection.

    Every operation holds the same lock, so concurrent create/update/delete
    calls cannot lose each other's writes.
    """

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = list(movies or [])
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def list(self) -> List[Movie]:
        with self._lock:
            return list(self._movies)

    def find_by_id(self, movie_id: str) -> Lookup:
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return NOT_FOUND
            return Found(self._movies[index])

    def filter_by_genre(self, genre: str) -> List[Movie]:
        wanted = genre.lower()
        with self._lock:
            return [
                movie for movie in self._movies
                if any(g.value.lower() == wanted for g in movie.genre)
            ]

    def filter_by_director(self, director: str) -> List[Movie]:
        wanted = director.lower()
        with self._lock:
            return [movie for movie in self._movies if wanted in movie.director.lower()]

    def append(self, movie: Movie) -> Movie:
        with self._lock:
            self._movies.append(movie)
        return movie

    def replace_at(self, movie_id: str, fields: Dict[str, Any]) -> Lookup:
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return NOT_FOUND
            current = self._movies[index]
            merged = Movie.model_validate({**current.model_dump(), **fields, "id": current.id})
            self._movies[index] = merged
            return Found(merged)

    def remove_by_id(self, movie_id: str) -> Lookup:
        with self._lock:
            index = self._index_of(movie_id)
            if index is None:
                return NOT_FOUND
            return Found(self._movies.pop(index))

    def _index_of(self, movie_id: str) -> Optional[int]:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return None
