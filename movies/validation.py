from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from movies.models.movies import MovieCreate, MovieUpdate


@dataclass(frozen=True)
class Valid:
    data: Dict[str, Any]


@dataclass(frozen=True)
class Invalid:
    errors: List[Dict[str, str]] = field(default_factory=list)


ValidationResult = Union[Valid, Invalid]


def format_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors into field/message pairs."""
    errors = []
    for error in exc.errors():
        name = ".".join(str(part) for part in error["loc"]) or "body"
        if error["type"] == "missing":
            message = f"Movie {name} is required"
        elif error["type"] == "value_error":
            message = str(error["ctx"]["error"])
        else:
            message = error["msg"]
        errors.append({"field": name, "message": message})
    return errors


def validate_movie(candidate: Any) -> ValidationResult:
    try:
        movie = MovieCreate.model_validate(candidate)
    except ValidationError as e:
        return Invalid(errors=format_errors(e))
    return Valid(data=movie.model_dump(mode="json"))


def validate_partial_movie(candidate: Any) -> ValidationResult:
    try:
        movie = MovieUpdate.model_validate(candidate)
    except ValidationError as e:
        return Invalid(errors=format_errors(e))
    return Valid(data=movie.model_dump(mode="json", exclude_unset=True))
