"""Client for the SoftBank Payment Service (SBPS) signed-XML API."""

from sps_client.client import ProtocolClient
from sps_client.models import (
    Document,
    Element,
    Identity,
    Locale,
    ResponseEnvelope,
    ResultCode,
    Text,
)
from sps_client.operations import CreditCardOperations
from sps_client.translator import ErrorTranslator

__all__ = [
    "ProtocolClient",
    "CreditCardOperations",
    "ErrorTranslator",
    "Document",
    "Element",
    "Identity",
    "Locale",
    "ResponseEnvelope",
    "ResultCode",
    "Text",
]
