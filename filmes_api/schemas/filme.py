from pydantic import BaseModel, ConfigDict


class FieldError(BaseModel):
    field: str
    message: str


class MovieBase(BaseModel):
    title: str
    genre: str
    duration: int


class MovieCreate(MovieBase):
    model_config = ConfigDict(
        strict=True,
        json_schema_extra={"example": {"title": "Matrix", "genre": "Sci-Fi", "duration": 136}}
    )


class MovieUpdate(MovieBase):
    model_config = ConfigDict(strict=True)


class MovieRead(MovieBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class MovieResponse(MovieBase):
    """Full entity representation returned by create."""
    id: int

    model_config = ConfigDict(from_attributes=True)


class ValidationErrorResponse(BaseModel):
    error: str
    errors: list[FieldError]


class ErrorResponse(BaseModel):
    error: str
