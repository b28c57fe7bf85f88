"""
Operation builders for the SBPS XML API.

Each builder turns typed arguments into request fields plus an ordered list
of values to sign, and sends them through ProtocolClient.
"""

from sps_client.operations.credit_card import (
    CARD_BRANDS,
    CardBrandReturnFlag,
    CreditCardOperations,
    CustomerInfoReturnFlag,
    EncryptedFlag,
    RequestId,
    ResponseInfoType,
)

__all__ = [
    "CARD_BRANDS",
    "CardBrandReturnFlag",
    "CreditCardOperations",
    "CustomerInfoReturnFlag",
    "EncryptedFlag",
    "RequestId",
    "ResponseInfoType",
]
