"""
Example usage of CreditCardOperations against the SBPS sandbox.

Reads SPS_* settings from the environment (or .env) and runs a
create-transaction request for a test customer, printing the outcome.
"""

import asyncio
import uuid
from datetime import datetime

from sps_client.client import ProtocolClient
from sps_client.config import settings
from sps_client.logging_config import configure_logging
from sps_client.operations import CreditCardOperations, CustomerInfoReturnFlag


async def example_create_transaction():
    """Create a transaction for the sandbox test customer."""
    print("=== Create transaction ===\n")

    async with ProtocolClient.from_settings(settings) as client:
        operations = CreditCardOperations(client)

        result = await operations.create_transaction(
            customer_id="Merchant_TestUser_999999",
            order_id=uuid.uuid4().hex,
            item_id="1",
            amount="10",
            request_date=datetime.now().strftime("%Y%m%d%H%M%S"),
            cust_info_return_flg=CustomerInfoReturnFlag.RETURNED,
            item_name="年払い初期費用10万円プラン",
        )

    print(f"Result: {result.result}")
    print(f"Date: {result.date}")
    if result.ok:
        print(f"Transaction ID: {result.transaction_id}")
        print(f"Tracking ID: {result.tracking_id}")
    else:
        print(f"Error code: {result.err_code}")
        print(f"Error message: {result.error_message}")


if __name__ == "__main__":
    configure_logging(log_level=settings.log_level, format_as_json=settings.log_json)
    asyncio.run(example_create_transaction())
