"""GraphQL-over-HTTP protocol types.

Architecture:
    - document.py: opaque ``Document`` and the conversion protocols
    - request.py: ``RequestParameters`` and ``into_request_parameters``
    - response.py: ``ResponseBody`` and the response classifier
"""

from .document import Document, IntoDocument, IntoDocumentWithVariables, into_document
from .request import RequestParameters, into_request_parameters
from .response import Error, ErrorLocation, ResponseBody, process_response_body

__all__ = [
    "Document",
    "IntoDocument",
    "IntoDocumentWithVariables",
    "into_document",
    "RequestParameters",
    "into_request_parameters",
    "Error",
    "ErrorLocation",
    "ResponseBody",
    "process_response_body",
]
