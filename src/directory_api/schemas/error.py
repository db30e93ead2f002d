"""Error payload schema."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Uniform error body returned by every error handler."""

    message: str
    details: list[str]
