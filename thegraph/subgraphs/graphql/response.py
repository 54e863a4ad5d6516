"""GraphQL response body model and classification.

A decoded GraphQL response is classified into exactly one outcome:

- ``data`` present and no ``errors``: success, the payload is returned;
- neither ``data`` nor ``errors``: ``GraphQLEmptyResponse`` is raised;
- one or more ``errors``: ``GraphQLFailure`` is raised, even if ``data`` is
  present (partial responses are not considered).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.exceptions import GraphQLEmptyResponse, GraphQLFailure


class ErrorLocation(BaseModel):
    """Location of a GraphQL error in the request document."""

    line: int
    column: int

    model_config = ConfigDict(frozen=True)


class Error(BaseModel):
    """A single server-reported GraphQL error."""

    message: str
    locations: list[ErrorLocation] = Field(default_factory=list)
    path: list[str | int] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_message(cls, message: str) -> Error:
        return cls(message=message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> Error:
        return cls(message=str(exc))


class ResponseBody(BaseModel):
    """Decoded GraphQL response body.

    ``data`` is kept untyped; callers validate it against their own model once
    the response has been classified.
    """

    data: Any = None
    errors: list[Error] = Field(default_factory=list)

    @field_validator("errors", mode="before")
    @classmethod
    def validate_errors(cls, v: Any) -> Any:
        """Some servers send ``"errors": null`` on success."""
        return [] if v is None else v

    @classmethod
    def from_data(cls, data: Any) -> ResponseBody:
        return cls(data=data)

    @classmethod
    def from_error(cls, error: Error | BaseException | str) -> ResponseBody:
        if isinstance(error, Error):
            return cls(errors=[error])
        if isinstance(error, BaseException):
            return cls(errors=[Error.from_exception(error)])
        return cls(errors=[Error.from_message(error)])

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.data is not None:
            payload["data"] = self.data
        if self.errors:
            payload["errors"] = [
                error.model_dump(exclude_defaults=True) for error in self.errors
            ]
        return payload


def process_response_body(body: ResponseBody) -> Any:
    """Classify a decoded GraphQL response.

    Args:
        body: Decoded response body

    Returns:
        The ``data`` payload of a successful response

    Raises:
        GraphQLEmptyResponse: If the response has neither data nor errors
        GraphQLFailure: If the response carries one or more errors
    """
    if body.errors:
        raise GraphQLFailure(list(body.errors))
    if body.data is None:
        raise GraphQLEmptyResponse()
    return body.data
