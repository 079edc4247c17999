from enum import Enum
from typing import List, Optional, Union

from pydantic import AnyUrl, StrictFloat, StrictInt, StrictStr, TypeAdapter, ValidationError, field_validator
from sqlmodel import SQLModel, Field

MIN_YEAR = 1900
MAX_YEAR = 2024
MIN_RATE = 0
MAX_RATE = 10
DEFAULT_RATE = 5
POSTER_SUFFIX = ".jpg"

_url_adapter = TypeAdapter(AnyUrl)


class Genre(str, Enum):
    ACTION = "Action"
    ADVENTURE = "Adventure"
    ANIMATION = "Animation"
    BIOGRAPHY = "Biography"
    COMEDY = "Comedy"
    CRIME = "Crime"
    DRAMA = "Drama"
    FAMILY = "Family"
    FANTASY = "Fantasy"
    HISTORY = "History"
    HORROR = "Horror"
    MUSICAL = "Musical"
    MYSTERY = "Mystery"
    ROMANCE = "Romance"
    SCI_FI = "Sci-Fi"
    SPORT = "Sport"
    THRILLER = "Thriller"
    WAR = "War"
    WESTERN = "Western"


def check_poster(value: str) -> str:
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("poster must be a valid url")
    if not value.endswith(POSTER_SUFFIX):
        raise ValueError(f"poster must end with {POSTER_SUFFIX}")
    return value


def check_rate(value):
    # bool is an int subclass, but true/false is not a rate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("rate must be a number")
    if not MIN_RATE <= value <= MAX_RATE:
        raise ValueError(f"rate must be between {MIN_RATE} and {MAX_RATE}")
    return value


class MovieBase(SQLModel):
    title: StrictStr = Field(min_length=1)
    year: StrictInt = Field(ge=MIN_YEAR, le=MAX_YEAR)
    director: StrictStr
    duration: StrictInt = Field(gt=0)
    rate: Union[StrictInt, StrictFloat] = DEFAULT_RATE
    poster: StrictStr
    genre: List[Genre] = Field(min_length=1)

    @field_validator("poster")
    @classmethod
    def poster_is_image_url(cls, value: str) -> str:
        return check_poster(value)

    @field_validator("rate", mode="before")
    @classmethod
    def rate_in_range(cls, value):
        return check_rate(value)


class MovieCreate(MovieBase):
    pass


class Movie(MovieBase):
    id: str


class MovieUpdate(SQLModel):
    """Partial payload: every field optional, none defaulted."""

    title: Optional[StrictStr] = Field(default=None, min_length=1)
    year: Optional[StrictInt] = Field(default=None, ge=MIN_YEAR, le=MAX_YEAR)
    director: Optional[StrictStr] = None
    duration: Optional[StrictInt] = Field(default=None, gt=0)
    rate: Optional[Union[StrictInt, StrictFloat]] = None
    poster: Optional[StrictStr] = None
    genre: Optional[List[Genre]] = Field(default=None, min_length=1)

    @field_validator("*", mode="before")
    @classmethod
    def not_null(cls, value):
        # defaults are never validated, so this only fires on an explicit null
        if value is None:
            raise ValueError("field may not be null")
        return value

    @field_validator("poster")
    @classmethod
    def poster_is_image_url(cls, value: str) -> str:
        return check_poster(value)

    @field_validator("rate", mode="before")
    @classmethod
    def rate_in_range(cls, value):
        return check_rate(value)
