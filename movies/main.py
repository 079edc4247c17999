import logging
import uuid
from typing import List, Optional

from fastapi import FastAPI, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from movies.config import ALLOWED_ORIGINS, CORS_STRICT, HOST, PORT, SEED_PATH
from movies.cors import ALLOWED_METHODS, CorsPolicy, install_cors
from movies.database.db import create_store, get_store
from movies.database.store import MovieStore, NotFound
from movies.models.movies import Movie
from movies.validation import Invalid, validate_movie, validate_partial_movie

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Movies service",
    description="API for managing an in-memory movie list",
    version="1.0.0"
)

cors_policy = CorsPolicy(ALLOWED_ORIGINS)
install_cors(app, cors_policy, strict=CORS_STRICT)

MOVIE_NOT_FOUND = {"message": "Movie not found"}


@app.on_event("startup")
async def startup_event():
    logger.info("Launching the movie service...")
    app.state.store = create_store(SEED_PATH)
    logger.info("The service is ready to work")


async def read_body(request: Request):
    try:
        return await request.json()
    except ValueError:
        return None


def invalid_response(result: Invalid) -> JSONResponse:
    logger.info(f"Rejected movie payload with {len(result.errors)} error(s)")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": result.errors})


def body_error() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": [{"field": "body", "message": "Request body must be valid JSON"}]}
    )


@app.get("/")
async def read_root():
    return {"message": "Hello World"}


@app.get("/movies",
         response_model=List[Movie],
         summary="Get all movies, optionally filtered by genre")
async def read_movies(genre: Optional[str] = None, store: MovieStore = Depends(get_store)):
    if genre:
        movies = store.filter_by_genre(genre)
        logger.info(f"Movies with genre {genre} were requested, {len(movies)} entries were found")
        return movies
    movies = store.list()
    logger.info(f"A list of movies was requested, {len(movies)} entries were found")
    return movies


@app.get("/movies/genre/{genre}",
         response_model=List[Movie],
         summary="Get movies by genre")
async def read_movies_by_genre(genre: str, store: MovieStore = Depends(get_store)):
    movies = store.filter_by_genre(genre)
    logger.info(f"Movies with genre {genre} were requested, {len(movies)} entries were found")
    return movies


@app.get("/movies/director/{director}",
         response_model=List[Movie],
         summary="Get movies whose director matches a substring")
async def read_movies_by_director(director: str, store: MovieStore = Depends(get_store)):
    movies = store.filter_by_director(director)
    logger.info(f"Movies by director {director} were requested, {len(movies)} entries were found")
    return movies


@app.get("/movies/{movie_id}",
         response_model=Movie,
         summary="Get a movie by ID",
         responses={
             404: {"description": "The movie was not found"}
         })
async def read_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    result = store.find_by_id(movie_id)
    if isinstance(result, NotFound):
        logger.warning(f"A non-existent movie ID was requested {movie_id}")
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=MOVIE_NOT_FOUND)
    logger.info(f"Movie ID requested {movie_id}: {result.record.title}")
    return result.record


@app.post("/movies",
          response_model=Movie,
          status_code=status.HTTP_201_CREATED,
          summary="Add a new movie",
          response_description="The data of the created movie",
          responses={
              400: {"description": "The movie data is invalid"}
          })
async def create_movie(request: Request, store: MovieStore = Depends(get_store)):
    payload = await read_body(request)
    if payload is None:
        return body_error()

    result = validate_movie(payload)
    if isinstance(result, Invalid):
        return invalid_response(result)

    movie = store.append(Movie.model_validate({**result.data, "id": str(uuid.uuid4())}))
    logger.info(f"A new movie has been added: ID {movie.id}, {movie.title}")
    return movie


@app.patch("/movies/{movie_id}",
           response_model=Movie,
           summary="Update movie data partially",
           responses={
               400: {"description": "The movie data is invalid"},
               404: {"description": "The movie was not found"}
           })
async def update_movie(movie_id: str, request: Request, store: MovieStore = Depends(get_store)):
    payload = await read_body(request)
    if payload is None:
        return body_error()

    result = validate_partial_movie(payload)
    if isinstance(result, Invalid):
        return invalid_response(result)

    updated = store.replace_at(movie_id, result.data)
    if isinstance(updated, NotFound):
        logger.warning(f"Attempt to update a non-existent movie ID {movie_id}")
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=MOVIE_NOT_FOUND)

    logger.info(f"Updated movie ID {movie_id}: {', '.join(result.data) or 'no fields'}")
    return updated.record


@app.delete("/movies/{movie_id}",
            status_code=status.HTTP_204_NO_CONTENT,
            summary="Delete a movie",
            responses={
                404: {"description": "The movie was not found"}
            })
async def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    removed = store.remove_by_id(movie_id)
    if isinstance(removed, NotFound):
        logger.warning(f"Attempt to delete a non-existent movie ID {movie_id}")
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=MOVIE_NOT_FOUND)

    logger.info(f"Deleted movie ID {movie_id}: {removed.record.title}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.options("/movies/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def preflight_movie(movie_id: str, request: Request):
    # full preflights are answered by CORSMiddleware, this covers a bare OPTIONS
    headers = {}
    origin = request.headers.get("origin")
    if origin and cors_policy.is_allowed(origin):
        headers["Access-Control-Allow-Methods"] = ", ".join(ALLOWED_METHODS)
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=headers)


def run():
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT, server_header=False)


if __name__ == "__main__":
    run()
