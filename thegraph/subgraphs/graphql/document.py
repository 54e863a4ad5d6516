"""GraphQL document wrapper and conversion protocols."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


class Document:
    """Raw text of a GraphQL operation.

    The text is never parsed nor validated; it is handed to the server as is.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"Document text must be a str, got {type(text).__name__}")
        self._text = text

    def as_str(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Document({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Document):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)


@runtime_checkable
class IntoDocument(Protocol):
    """Anything that can be turned into a ``Document``."""

    def into_document(self) -> Document: ...


@runtime_checkable
class IntoDocumentWithVariables(Protocol):
    """Anything that can be turned into a ``Document`` and its variables.

    Variables may be a mapping, a pydantic model or ``None``.
    """

    def into_document_with_variables(self) -> tuple[Document, Mapping[str, Any] | Any]: ...


def into_document(value: Any) -> Document:
    """Convert a caller-supplied query representation into a ``Document``.

    Args:
        value: A ``Document``, a ``str`` or an ``IntoDocument`` implementation

    Returns:
        The canonical ``Document``

    Raises:
        TypeError: If the value cannot be converted
    """
    if isinstance(value, Document):
        return value
    if isinstance(value, str):
        return Document(value)
    if isinstance(value, IntoDocument):
        return value.into_document()
    raise TypeError(f"Cannot convert {type(value).__name__} into a GraphQL document")
