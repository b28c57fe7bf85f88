"""Protocol client for the SBPS signed-XML API."""

import dataclasses
import uuid
from collections.abc import Mapping, Sequence

import httpx

from sps_client import codec
from sps_client.catalogs import ErrorCatalog, get_catalog
from sps_client.config import Settings
from sps_client.logging_config import get_logger, mask_element
from sps_client.models import (
    REQUEST_ROOT,
    RESPONSE_ROOT,
    SENTINEL_ERROR_CODE,
    Document,
    DocumentDecodeError,
    DocumentEncodeError,
    Element,
    HttpTransportError,
    Identity,
    Locale,
    MalformedResponse,
    MissingResponseRoot,
    ResponseEnvelope,
    ResultCode,
    Text,
    TransportFailure,
    to_node,
)
from sps_client.models.document import FieldValue
from sps_client.signing import sign
from sps_client.translator import ErrorTranslator

logger = get_logger(__name__)


class ProtocolClient:
    """
    Client for the SBPS XML API endpoint.

    Every operation goes through execute(): the request document is
    encoded, POSTed with HTTP Basic auth, decoded and interpreted. The
    result is always a ResponseEnvelope. Network errors, bad status codes
    and unreadable answers collapse into one synthetic NG envelope carrying
    error code "0000000"; gateway NG answers get a translated message.

    Calls are independent and may run concurrently. The only shared state
    is the read-only identity, the catalog and the httpx connection pool.
    """

    def __init__(
        self,
        endpoint: str,
        merchant_id: str,
        service_id: str,
        hash_key: str,
        locale: Locale | str = Locale.EN,
        debug: bool = False,
        catalog: ErrorCatalog | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the client.

        Args:
            endpoint: SBPS XML API URL
            merchant_id: Merchant ID issued by SBPS
            service_id: Service ID issued by SBPS
            hash_key: Shared secret (signature key and Basic auth password)
            locale: Locale for translated error messages ("en" or "ja")
            debug: If True, log raw request and response bodies
            catalog: Error catalog override (defaults to the locale's catalog)
            http_client: Pre-configured httpx client (defaults to a new one)

        Raises:
            UnknownLocale: If the locale has no catalog
        """
        locale_catalog = get_catalog(locale)
        self.endpoint = endpoint
        self.identity = Identity(
            merchant_id=merchant_id,
            service_id=service_id,
            hash_key=hash_key,
            locale=Locale(locale),
        )
        self.debug = debug
        self.translator = ErrorTranslator(catalog or locale_catalog)
        self.http_client = http_client or httpx.AsyncClient()

        logger.info(
            "sps_client_initialized",
            endpoint=endpoint,
            merchant_id=merchant_id,
            service_id=service_id,
            locale=self.identity.locale.value,
            debug=debug,
        )

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "ProtocolClient":
        """Create a client from application settings."""
        return cls(
            endpoint=settings.endpoint,
            merchant_id=settings.merchant_id,
            service_id=settings.service_id,
            hash_key=settings.hash_key,
            locale=settings.locale,
            debug=settings.debug,
            **kwargs,
        )

    @property
    def locale(self) -> Locale:
        return self.identity.locale

    async def close(self) -> None:
        """Close the HTTP client connection pool."""
        await self.http_client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def sign(self, fields: Sequence[str]) -> str:
        """Signature of ``fields`` under this client's identity."""
        return sign(
            self.identity.merchant_id,
            self.identity.service_id,
            self.identity.hash_key,
            fields,
        )

    def build_request(
        self,
        operation_id: str,
        fields: Mapping[str, FieldValue],
        signed_values: Sequence[str],
    ) -> Document:
        """
        Assemble a signed request document.

        The root carries ``operation_id`` as its ``id`` attribute, followed
        by merchant_id, service_id, the operation fields in the given order
        and finally ``sps_hashcode``.

        Args:
            operation_id: Request ID of the operation (e.g. "ST02-00201-101")
            fields: Operation fields; strings become leaves, mappings nest
            signed_values: Unsigned field values in the operation's hash order

        Returns:
            Request document ready for execute()
        """
        children = {
            "merchant_id": Text(self.identity.merchant_id),
            "service_id": Text(self.identity.service_id),
        }
        for tag, value in fields.items():
            children[tag] = to_node(value)
        children["sps_hashcode"] = Text(self.sign(signed_values))

        return Document(
            root_tag=REQUEST_ROOT,
            root=Element(children=children, attributes={"id": operation_id}),
        )

    async def send(
        self,
        operation_id: str,
        fields: Mapping[str, FieldValue],
        signed_values: Sequence[str],
    ) -> ResponseEnvelope:
        """Build, sign and execute an operation in one call."""
        return await self.execute(self.build_request(operation_id, fields, signed_values))

    async def execute(self, document: Document) -> ResponseEnvelope:
        """
        Send a request document and interpret the gateway answer.

        Args:
            document: Signed request document

        Returns:
            ResponseEnvelope. OK answers are returned as decoded; NG answers
            carry error_message; transport failures return the synthetic
            "0000000" envelope. This method does not raise on gateway,
            network or decoding failures.
        """
        log = logger.bind(
            request_id=str(uuid.uuid4()),
            operation_id=document.root.attributes.get("id"),
        )

        try:
            body = await self._exchange(document, log)
        except TransportFailure as e:
            log.error(
                "sps_transport_failure",
                error_type=type(e).__name__,
                reason=e.reason,
            )
            return ResponseEnvelope.transport_failure(
                self.translator.translate(SENTINEL_ERROR_CODE)
            )

        if body.text("res_result") == ResultCode.NG.value:
            err_code = body.text("res_err_code")
            error_message = self.translator.translate(err_code)
            log.warning(
                "sps_business_failure",
                err_code=err_code,
                error_message=error_message,
            )
            return ResponseEnvelope(body=body, error_message=error_message)

        log.info(
            "sps_request_succeeded",
            res_result=body.text("res_result"),
            res_date=body.text("res_date"),
        )
        return ResponseEnvelope(body=body)
    async def _exchange(self, document: Document, log) -> Element:
        """
        Perform the HTTP round trip and return the response root element.

        Raises:
            TransportFailure: On any encoding, network, status, decoding or
                envelope-shape failure
        """
        try:
            payload = codec.encode(document)
        except TransportFailure:
            raise
        except Exception as e:
            raise DocumentEncodeError(f"Cannot encode document: {e}") from e

        log.info("sps_request_sending", endpoint=self.endpoint, size=len(payload))
        if self.debug:
            log.debug("sps_request_body", body=self._masked_body(document))

        try:
            response = await self.http_client.post(
                self.endpoint,
                content=payload,
                auth=(self.identity.basic_auth_username, self.identity.hash_key),
                headers={"Content-Type": "application/xml"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise HttpTransportError(
                f"SBPS returned status {e.response.status_code}"
            ) from e
        except Exception as e:
            # Includes httpx errors and RuntimeError from a closed client
            raise HttpTransportError(f"SBPS request error: {e}") from e

        log.info(
            "sps_response_received",
            status_code=response.status_code,
            size=len(response.content),
        )

        try:
            decoded = codec.decode(response.content)
        except TransportFailure:
            raise
        except Exception as e:
            raise DocumentDecodeError(f"Cannot decode response: {e}") from e

        if self.debug:
            log.debug("sps_response_body", body=self._masked_body(decoded))

        if decoded.root_tag != RESPONSE_ROOT:
            raise MissingResponseRoot(
                f"Expected <{RESPONSE_ROOT}> root, got <{decoded.root_tag}>"
            )

        body = decoded.root
        result = body.text("res_result")
        if result is None:
            raise MalformedResponse("Response has no res_result")
        if result == ResultCode.NG.value and body.text("res_err_code") is None:
            raise MalformedResponse("NG response has no res_err_code")

        return body

    @staticmethod
    def _masked_body(document: Document) -> str:
        """Serialized document with card data and tokens masked."""
        masked = dataclasses.replace(document, root=mask_element(document.root))
        return codec.to_string(masked)
