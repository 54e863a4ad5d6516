"""GraphQL-over-HTTP request parameters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .document import Document, IntoDocumentWithVariables, into_document


class RequestParameters(BaseModel):
    """Parameters of a GraphQL-over-HTTP request.

    ``operationName`` is omitted from the payload when unset, ``variables`` and
    ``extensions`` when empty.
    """

    query: str
    operation_name: str | None = Field(None, alias="operationName")
    variables: dict[str, Any] = Field(default_factory=dict)
    extensions: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("query", mode="before")
    @classmethod
    def validate_query(cls, v: Any) -> str:
        """Accept ``Document`` instances as well as plain text."""
        if isinstance(v, Document):
            return v.as_str()
        return v

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON request body."""
        payload: dict[str, Any] = {"query": self.query}
        if self.operation_name is not None:
            payload["operationName"] = self.operation_name
        if self.variables:
            payload["variables"] = self.variables
        if self.extensions:
            payload["extensions"] = self.extensions
        return payload


_VARIABLES_ADAPTER: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])


def _serialize_variables(variables: Any) -> dict[str, Any]:
    if variables is None:
        return {}
    if isinstance(variables, BaseModel):
        dumped = variables.model_dump(mode="json", by_alias=True)
    elif isinstance(variables, Mapping):
        dumped = _VARIABLES_ADAPTER.dump_python(dict(variables), mode="json", by_alias=True)
    else:
        dumped = TypeAdapter(type(variables)).dump_python(variables, mode="json")
    # Only JSON objects are valid GraphQL variables
    return dumped if isinstance(dumped, dict) else {}


def into_request_parameters(value: Any) -> RequestParameters:
    """Convert a caller-supplied query into ``RequestParameters``.

    Args:
        value: ``RequestParameters``, an ``IntoDocumentWithVariables``
            implementation, or anything ``into_document`` accepts

    Returns:
        The request parameters, without operation name nor extensions unless
        the value already was ``RequestParameters``
    """
    if isinstance(value, RequestParameters):
        return value
    if isinstance(value, IntoDocumentWithVariables):
        document, variables = value.into_document_with_variables()
        return RequestParameters(query=document, variables=_serialize_variables(variables))
    return RequestParameters(query=into_document(value))
