"""Pytest configuration and shared fixtures for all tests.

This module provides:
- Merchant identity constants matching the SBPS sandbox format
- A ProtocolClient bound to a fake endpoint
- Builders for canned gateway answers (XML bodies and httpx responses)
"""

import httpx
import pytest
import pytest_asyncio

from sps_client import codec
from sps_client.client import ProtocolClient
from sps_client.models import Document
from tests.helpers import (
    TEST_ENDPOINT,
    TEST_HASH_KEY,
    TEST_MERCHANT_ID,
    TEST_SERVICE_ID,
)


@pytest_asyncio.fixture
async def client():
    """Create a ProtocolClient with the English catalog."""
    client = ProtocolClient(
        endpoint=TEST_ENDPOINT,
        merchant_id=TEST_MERCHANT_ID,
        service_id=TEST_SERVICE_ID,
        hash_key=TEST_HASH_KEY,
    )
    yield client
    await client.close()


@pytest_asyncio.fixture
async def ja_client():
    """Create a ProtocolClient with the Japanese catalog."""
    client = ProtocolClient(
        endpoint=TEST_ENDPOINT,
        merchant_id=TEST_MERCHANT_ID,
        service_id=TEST_SERVICE_ID,
        hash_key=TEST_HASH_KEY,
        locale="ja",
    )
    yield client
    await client.close()


@pytest.fixture
def response_xml():
    """
    Helper fixture to build an ``sps-api-response`` body.

    Usage:
        def test_something(response_xml):
            body = response_xml("NG", err_code="10103003")

    Returns:
        Callable: Function returning Shift_JIS encoded XML bytes
    """

    def _response_xml(
        result: str = "OK",
        err_code: str | None = None,
        date: str = "20220923184630",
        extra: str = "",
        root: str = "sps-api-response",
    ) -> bytes:
        err = f"<res_err_code>{err_code}</res_err_code>" if err_code is not None else ""
        text = (
            '<?xml version="1.0" encoding="Shift_JIS"?>'
            f'<{root} id="ST01-00131-101">'
            f"<res_result>{result}</res_result>"
            f"{extra}"
            f"{err}"
            f"<res_date>{date}</res_date>"
            f"</{root}>"
        )
        return text.encode("shift_jis")

    return _response_xml


@pytest.fixture
def http_response():
    """
    Helper fixture to build a real httpx.Response for a mocked POST.

    Returns:
        Callable: Function (content, status_code) -> httpx.Response
    """

    def _http_response(content: bytes, status_code: int = 200) -> httpx.Response:
        return httpx.Response(
            status_code,
            content=content,
            headers={"Content-Type": "text/xml; charset=Shift_JIS"},
            request=httpx.Request("POST", TEST_ENDPOINT),
        )

    return _http_response


@pytest.fixture
def sent_document():
    """
    Helper fixture to decode the request body given to a mocked POST.

    Usage:
        with patch.object(client.http_client, "post", ...) as post:
            await client.execute(document)
        request = sent_document(post)

    Returns:
        Callable: Function (post_mock) -> Document
    """

    def _sent_document(post_mock) -> Document:
        return codec.decode(post_mock.call_args.kwargs["content"])

    return _sent_document
