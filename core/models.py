"""Wire models for the posts resource and error envelopes."""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationInfo, field_validator

NOT_FOUND = "not_found"
BAD_EXTERNAL_REQUEST = "bad_external_request"
SERVER_ERROR = "server_error"

SERVER_ERROR_MESSAGE = "Server error occured"


class Post(BaseModel):
    """A post as served by the upstream API.

    Unknown fields are dropped and missing ones default to zero values, so a
    partial object (the upstream answers deletes with ``{}``) still decodes.
    Explicit nulls decode to the same zero values.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    user_id: int = Field(default=0, alias="userId")
    id: int = 0
    title: str = ""
    body: str = ""

    @field_validator("user_id", "id", "title", "body", mode="before")
    @classmethod
    def _null_is_zero(cls, value, info: ValidationInfo):
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class ErrorEnvelope(BaseModel):
    type: str
    errors: list[str] = Field(min_length=1)

    @classmethod
    def single(cls, error_type: str, message: str) -> "ErrorEnvelope":
        return cls(type=error_type, errors=[message])


POST_SHAPE: TypeAdapter[Post] = TypeAdapter(Post)
POSTS_SHAPE: TypeAdapter[list[Post]] = TypeAdapter(list[Post])
