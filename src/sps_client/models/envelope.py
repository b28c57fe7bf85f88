"""Response envelope returned by every gateway operation."""

from dataclasses import dataclass
from enum import Enum

from sps_client.models.document import Element, Text

REQUEST_ROOT = "sps-api-request"
RESPONSE_ROOT = "sps-api-response"

# Error code used when no real gateway code is available
SENTINEL_ERROR_CODE = "0000000"


class ResultCode(str, Enum):
    """Value of the ``res_result`` leaf."""

    OK = "OK"
    NG = "NG"


@dataclass
class ResponseEnvelope:
    """
    Decoded ``sps-api-response`` element plus the translated error message.

    This is the single result type of ProtocolClient.execute(). It holds
    either a gateway answer or a synthetic failure, never an exception.
    ``error_message`` is set if and only if ``res_result`` is NG.
    """

    body: Element
    error_message: str | None = None

    def __post_init__(self) -> None:
        """Validate the error_message / result pairing."""
        if self.result == ResultCode.NG.value:
            if self.error_message is None:
                raise ValueError("error_message required for NG result")
        elif self.error_message is not None:
            raise ValueError("error_message only allowed for NG result")

    @classmethod
    def transport_failure(cls, error_message: str) -> "ResponseEnvelope":
        """Build the synthetic NG envelope for transport-level failures."""
        body = Element(
            children={
                "res_result": Text(ResultCode.NG.value),
                "res_err_code": Text(SENTINEL_ERROR_CODE),
            }
        )
        return cls(body=body, error_message=error_message)

    @property
    def result(self) -> str | None:
        return self.body.text("res_result")

    @property
    def ok(self) -> bool:
        return self.result == ResultCode.OK.value

    @property
    def err_code(self) -> str | None:
        return self.body.text("res_err_code")

    @property
    def date(self) -> str | None:
        return self.body.text("res_date")

    def field(self, *path: str) -> str | None:
        """Text of a nested response leaf, e.g. ``field("res_pay_method_info", "cc_number")``."""
        return self.body.text(*path)

    # Transaction responses

    @property
    def transaction_id(self) -> str | None:
        return self.body.text("res_sps_transaction_id")

    @property
    def tracking_id(self) -> str | None:
        return self.body.text("res_tracking_id")

    @property
    def process_date(self) -> str | None:
        return self.body.text("res_process_date")

    # Customer responses

    @property
    def pay_method_info(self) -> dict[str, str]:
        """Leaves of ``res_pay_method_info`` (card number, expiry, brand...)."""
        block = self.body.get("res_pay_method_info")
        if not isinstance(block, Element):
            return {}
        return {
            tag: node.value
            for tag, node in block.children.items()
            if isinstance(node, Text)
        }
