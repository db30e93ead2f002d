"""Reusable validated field types for request bodies."""

from typing import Annotated

from pydantic import AfterValidator, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

MAX_TEXT_LENGTH = 255

# Shared model config: camelCase on the wire, snake_case in Python
CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def bounded_text(label: str) -> AfterValidator:
    """
    Build a validator for a non-blank string of at most 255 characters.

    Args:
        label: Human-readable field label used in error messages

    Returns:
        AfterValidator to attach with ``Annotated``

    Examples:
        >>> FirstName = Annotated[str, bounded_text("First name")]
    """

    def validate(value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("blank", "{label} must not be blank", {"label": label})
        if len(value) > MAX_TEXT_LENGTH:
            raise PydanticCustomError(
                "too_long",
                "{label} must not exceed {max_length} characters",
                {"label": label, "max_length": MAX_TEXT_LENGTH},
            )
        return value

    return AfterValidator(validate)


CompanyName = Annotated[str, bounded_text("Name")]
FirstName = Annotated[str, bounded_text("First name")]
LastName = Annotated[str, bounded_text("Last name")]
