"""
Credit card operations.

Each method assembles the fields of one SBPS request, lists the values in
the order the gateway hashes them and hands both to ProtocolClient.send().
Values are passed through as given: dates are ``YYYYMMDDHHmmss`` strings,
expirations ``YYYYMM`` and amounts decimal strings.
"""

import base64
from enum import Enum

from sps_client.client import ProtocolClient
from sps_client.models import Locale, ResponseEnvelope


class RequestId(str, Enum):
    """Operation identifiers placed in the request root ``id`` attribute."""

    CREATE_CUSTOMER = "MG02-00101-101"
    UPDATE_CUSTOMER = "MG02-00102-101"
    CREATE_CUSTOMER_TOKEN = "MG02-00131-101"
    UPDATE_CUSTOMER_TOKEN = "MG02-00132-101"
    DELETE_CUSTOMER = "MG02-00103-101"
    GET_CUSTOMER = "MG02-00104-101"
    CREATE_TRANSACTION = "ST01-00131-101"
    CONFIRM_TRANSACTION = "ST02-00101-101"
    PURCHASE = "ST02-00201-101"
    REFUND = "ST02-00303-101"


class EncryptedFlag(str, Enum):
    NONE = "0"
    ENCRYPTED = "1"


class ResponseInfoType(str, Enum):
    NONE = "0"
    RETURN_ALL_MARK = "1"
    RETURN_4_DIGITS = "2"


class CustomerInfoReturnFlag(str, Enum):
    NONE = "0"
    RETURNED = "1"


class CardBrandReturnFlag(str, Enum):
    NONE = "0"
    RETURNED = "1"


# cardbrand_code values returned in res_pay_method_info
CARD_BRANDS = {
    "J": "JCB",
    "V": "Visa",
    "M": "MasterCard",
    "A": "American Express",
    "D": "Diners Club",
    "X": "その他",
}


class CreditCardOperations:
    """
    Credit card customer and transaction requests.

    Customer requests register or look up a stored card under a merchant
    customer code; transaction requests create, confirm, purchase and
    refund against it.
    """

    def __init__(self, client: ProtocolClient):
        self.client = client

    async def create_update_customer(
        self,
        is_create: bool,
        customer_id: str,
        request_date: str,
        cc_number: str,
        cc_expiration: str,
        security_code: str,
        encrypted_flg: EncryptedFlag | str = EncryptedFlag.NONE,
    ) -> ResponseEnvelope:
        """
        Register (or replace) a customer's card from raw card data.

        Args:
            is_create: True to create, False to update
            customer_id: Merchant-unique customer code
            request_date: YYYYMMDDHHmmss
            cc_number: Card number
            cc_expiration: YYYYMM
            security_code: Card security code
            encrypted_flg: Whether card fields are encrypted
        """
        encrypted_flg = EncryptedFlag(encrypted_flg)
        operation = RequestId.CREATE_CUSTOMER if is_create else RequestId.UPDATE_CUSTOMER
        fields = {
            "cust_code": customer_id,
            "encrypted_flg": encrypted_flg.value,
            "request_date": request_date,
            "pay_method_info": {
                "cc_number": cc_number,
                "cc_expiration": cc_expiration,
                "security_code": security_code,
            },
        }
        signed = [
            customer_id,
            cc_number,
            cc_expiration,
            security_code,
            encrypted_flg.value,
            request_date,
        ]
        return await self.client.send(operation.value, fields, signed)

    async def create_update_customer_with_token(
        self,
        is_create: bool,
        customer_id: str,
        request_date: str,
        token: str,
        token_key: str,
        cust_info_return_flg: CustomerInfoReturnFlag | str = CustomerInfoReturnFlag.RETURNED,
        encrypted_flg: EncryptedFlag | str = EncryptedFlag.NONE,
        cardbrand_return_flg: CardBrandReturnFlag | str = CardBrandReturnFlag.RETURNED,
    ) -> ResponseEnvelope:
        """
        Register (or replace) a customer's card from a browser-issued token.

        Args:
            is_create: True to create, False to update
            customer_id: Merchant-unique customer code
            request_date: YYYYMMDDHHmmss
            token: One-time token issued to the web client
            token_key: Key paired with the token
            cust_info_return_flg: Whether to return stored card info
            encrypted_flg: Whether fields are encrypted
            cardbrand_return_flg: Whether to return the card brand
        """
        cust_info_return_flg = CustomerInfoReturnFlag(cust_info_return_flg)
        encrypted_flg = EncryptedFlag(encrypted_flg)
        cardbrand_return_flg = CardBrandReturnFlag(cardbrand_return_flg)
        operation = (
            RequestId.CREATE_CUSTOMER_TOKEN if is_create else RequestId.UPDATE_CUSTOMER_TOKEN
        )
        fields = {
            "cust_code": customer_id,
            "sps_cust_info_return_flg": cust_info_return_flg.value,
            "encrypted_flg": encrypted_flg.value,
            "request_date": request_date,
            "pay_option_manage": {
                "token": token,
                "token_key": token_key,
                "cardbrand_return_flg": cardbrand_return_flg.value,
            },
        }
        signed = [
            customer_id,
            cust_info_return_flg.value,
            token,
            token_key,
            cardbrand_return_flg.value,
            encrypted_flg.value,
            request_date,
        ]
        return await self.client.send(operation.value, fields, signed)

    async def get_customer(
        self,
        customer_id: str,
        request_date: str,
        cust_info_return_flg: CustomerInfoReturnFlag | str = CustomerInfoReturnFlag.NONE,
        response_info_type: ResponseInfoType | str = ResponseInfoType.NONE,
        cardbrand_return_flg: CardBrandReturnFlag | str = CardBrandReturnFlag.RETURNED,
        encrypted_flg: EncryptedFlag | str = EncryptedFlag.NONE,
    ) -> ResponseEnvelope:
        """Look up the card stored for a customer."""
        cust_info_return_flg = CustomerInfoReturnFlag(cust_info_return_flg)
        response_info_type = ResponseInfoType(response_info_type)
        cardbrand_return_flg = CardBrandReturnFlag(cardbrand_return_flg)
        encrypted_flg = EncryptedFlag(encrypted_flg)
        fields = {
            "cust_code": customer_id,
            "sps_cust_info_return_flg": cust_info_return_flg.value,
            "response_info_type": response_info_type.value,
            "pay_option_manage": {
                "cardbrand_return_flg": cardbrand_return_flg.value,
            },
            "encrypted_flg": encrypted_flg.value,
            "request_date": request_date,
        }
        signed = [
            customer_id,
            cust_info_return_flg.value,
            response_info_type.value,
            cardbrand_return_flg.value,
            encrypted_flg.value,
            request_date,
        ]
        return await self.client.send(RequestId.GET_CUSTOMER.value, fields, signed)

    async def delete_customer(
        self,
        customer_id: str,
        request_date: str,
        encrypted_flg: EncryptedFlag | str = EncryptedFlag.NONE,
    ) -> ResponseEnvelope:
        """
        Remove the card stored for a customer.

        The signed field order (customer_id, encrypted_flg, request_date)
        follows get_customer() without the return flags and has not been
        verified against the gateway documentation.
        """
        encrypted_flg = EncryptedFlag(encrypted_flg)
        fields = {
            "cust_code": customer_id,
            "encrypted_flg": encrypted_flg.value,
            "request_date": request_date,
        }
        signed = [customer_id, encrypted_flg.value, request_date]
        return await self.client.send(RequestId.DELETE_CUSTOMER.value, fields, signed)

    async def create_transaction(
        self,
        customer_id: str,
        order_id: str,
        item_id: str,
        amount: str,
        request_date: str,
        cust_info_return_flg: CustomerInfoReturnFlag | str = CustomerInfoReturnFlag.RETURNED,
        encrypted_flg: EncryptedFlag | str = EncryptedFlag.NONE,
        item_name: str = "",
    ) -> ResponseEnvelope:
        """
        Create an authorization against the customer's stored card.

        The signature covers the raw ``item_name``; the wire value is its
        base64 encoding (Shift_JIS bytes for the ja locale, UTF-8 otherwise).
        The ``item_name`` element is omitted when the name is empty.

        Returns:
            Envelope whose transaction_id, tracking_id and process_date feed
            confirm_transaction(), purchase() and refund()
        """
        cust_info_return_flg = CustomerInfoReturnFlag(cust_info_return_flg)
        encrypted_flg = EncryptedFlag(encrypted_flg)
        fields = {
            "cust_code": customer_id,
            "order_id": order_id,
            "item_id": item_id,
            "amount": amount,
            "sps_cust_info_return_flg": cust_info_return_flg.value,
            "encrypted_flg": encrypted_flg.value,
            "request_date": request_date,
        }
        if item_name:
            fields["item_name"] = self.encode_item_name(item_name)

        signed = [
            customer_id,
            order_id,
            item_id,
            item_name,
            amount,
            cust_info_return_flg.value,
            encrypted_flg.value,
            request_date,
        ]
        return await self.client.send(RequestId.CREATE_TRANSACTION.value, fields, signed)

    async def confirm_transaction(
        self,
        transaction_id: str,
        tracking_id: str,
        request_date: str,
    ) -> ResponseEnvelope:
        """Confirm a transaction created by create_transaction()."""
        fields = {
            "request_date": request_date,
            "sps_transaction_id": transaction_id,
            "tracking_id": tracking_id,
        }
        signed = [transaction_id, tracking_id, request_date]
        return await self.client.send(RequestId.CONFIRM_TRANSACTION.value, fields, signed)

    async def purchase(
        self,
        transaction_id: str,
        tracking_id: str,
        processing_datetime: str,
        request_date: str,
    ) -> ResponseEnvelope:
        """Capture (sales-confirm) a confirmed transaction."""
        return await self._settle(
            RequestId.PURCHASE, transaction_id, tracking_id, processing_datetime, request_date
        )

    async def refund(
        self,
        transaction_id: str,
        tracking_id: str,
        processing_datetime: str,
        request_date: str,
    ) -> ResponseEnvelope:
        """Refund a captured transaction."""
        return await self._settle(
            RequestId.REFUND, transaction_id, tracking_id, processing_datetime, request_date
        )

    async def _settle(
        self,
        operation: RequestId,
        transaction_id: str,
        tracking_id: str,
        processing_datetime: str,
        request_date: str,
    ) -> ResponseEnvelope:
        fields = {
            "request_date": request_date,
            "sps_transaction_id": transaction_id,
            "tracking_id": tracking_id,
            "processing_datetime": processing_datetime,
        }
        signed = [transaction_id, tracking_id, processing_datetime, request_date]
        return await self.client.send(operation.value, fields, signed)

    def encode_item_name(self, item_name: str) -> str:
        """Base64 wire form of an item name for the client's locale."""
        if self.client.locale == Locale.JA:
            # Characters outside Shift_JIS become "?"
            raw = item_name.encode("shift_jis", errors="replace")
        else:
            raw = item_name.encode("utf-8")
        return base64.b64encode(raw).decode("ascii")
