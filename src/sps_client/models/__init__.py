"""Domain models for the SBPS client."""

from sps_client.models.document import Document, Element, Node, Text, to_node
from sps_client.models.envelope import (
    REQUEST_ROOT,
    RESPONSE_ROOT,
    SENTINEL_ERROR_CODE,
    ResponseEnvelope,
    ResultCode,
)
from sps_client.models.exceptions import (
    DocumentDecodeError,
    DocumentEncodeError,
    HttpTransportError,
    MalformedResponse,
    MissingResponseRoot,
    SpsClientError,
    TransportFailure,
    UnknownLocale,
)
from sps_client.models.identity import Identity, Locale

__all__ = [
    "Document",
    "Element",
    "Node",
    "Text",
    "to_node",
    "REQUEST_ROOT",
    "RESPONSE_ROOT",
    "SENTINEL_ERROR_CODE",
    "ResponseEnvelope",
    "ResultCode",
    "DocumentDecodeError",
    "DocumentEncodeError",
    "HttpTransportError",
    "MalformedResponse",
    "MissingResponseRoot",
    "SpsClientError",
    "TransportFailure",
    "UnknownLocale",
    "Identity",
    "Locale",
]
