"""Unit tests for the XML document codec."""

import pytest

from sps_client import codec
from sps_client.models import (
    Document,
    DocumentDecodeError,
    DocumentEncodeError,
    Element,
    Text,
)


@pytest.fixture
def request_document() -> Document:
    """A create-customer style request tree."""
    return Document(
        root_tag="sps-api-request",
        root=Element(
            attributes={"id": "MG02-00101-101"},
            children={
                "merchant_id": Text("30132"),
                "service_id": Text("103"),
                "cust_code": Text("Merchant_TestUser_999999"),
                "pay_method_info": Element(
                    children={
                        "cc_number": Text("4111111111111111"),
                        "cc_expiration": Text("202512"),
                        "security_code": Text("123"),
                    }
                ),
                "sps_hashcode": Text("a9993e364706816aba3e25717850c26c9cd0d89d"),
            },
        ),
    )


class TestEncode:
    """Tests for tree -> XML serialization."""

    def test_declaration_uses_shift_jis(self, request_document):
        """The declaration names version 1.0 and the Shift_JIS charset."""
        payload = codec.encode(request_document)
        declaration = payload.split(b"?>")[0]

        assert payload.startswith(b"<?xml")
        assert b"1.0" in declaration
        assert b"Shift_JIS" in declaration

    def test_root_attribute_and_tags(self, request_document):
        """Root tag, id attribute and hyphenated/underscored tags are literal."""
        payload = codec.encode(request_document)

        assert b'<sps-api-request id="MG02-00101-101">' in payload
        assert b"<cust_code>Merchant_TestUser_999999</cust_code>" in payload
        assert b"<pay_method_info><cc_number>4111111111111111</cc_number>" in payload

    def test_child_order_preserved(self, request_document):
        """Children are written in mapping order."""
        payload = codec.encode(request_document)

        positions = [
            payload.index(f"<{tag}>".encode())
            for tag in ("merchant_id", "service_id", "cust_code", "pay_method_info", "sps_hashcode")
        ]
        assert positions == sorted(positions)

    def test_japanese_text_encoded_as_shift_jis(self):
        """Non-ASCII text is written as Shift_JIS bytes."""
        document = Document(
            root_tag="sps-api-request",
            root=Element(children={"free1": Text("年払い初期費用")}),
        )

        payload = codec.encode(document)

        assert "年払い初期費用".encode("shift_jis") in payload

    def test_special_characters_escaped(self):
        """Markup characters in text are escaped."""
        document = Document(
            root_tag="sps-api-request",
            root=Element(children={"free1": Text("a<b&c")}),
        )

        payload = codec.encode(document)

        assert b"a&lt;b&amp;c" in payload

    def test_invalid_tag_raises(self):
        """A tag that is not a valid XML name cannot be encoded."""
        document = Document(
            root_tag="sps-api-request",
            root=Element(children={"bad tag": Text("x")}),
        )

        with pytest.raises(DocumentEncodeError):
            codec.encode(document)


class TestDecode:
    """Tests for XML -> tree parsing."""

    def test_decode_response(self, response_xml):
        """A gateway answer decodes into leaves under the response root."""
        document = codec.decode(response_xml("NG", err_code="10103003"))

        assert document.root_tag == "sps-api-response"
        assert document.root.attributes == {"id": "ST01-00131-101"}
        assert document.root.text("res_result") == "NG"
        assert document.root.text("res_err_code") == "10103003"
        assert document.root.text("res_date") == "20220923184630"
        assert document.encoding.lower() in ("shift_jis", "shift-jis")

    def test_decode_nested_block(self, response_xml):
        """Nested blocks decode as elements with leaf children."""
        extra = (
            "<res_pay_method_info>"
            "<cc_number>************1111</cc_number>"
            "<cc_expiration>202512</cc_expiration>"
            "<cardbrand_code>V</cardbrand_code>"
            "</res_pay_method_info>"
        )

        document = codec.decode(response_xml(extra=extra))

        block = document.root.get("res_pay_method_info")
        assert isinstance(block, Element)
        assert document.root.text("res_pay_method_info", "cardbrand_code") == "V"

    def test_decode_japanese_text(self, response_xml):
        """Shift_JIS encoded text decodes to the original characters."""
        document = codec.decode(response_xml(extra="<free1>年払い</free1>"))

        assert document.root.text("free1") == "年払い"

    def test_empty_element_is_empty_text(self):
        """<x/> reads as an empty leaf."""
        document = codec.decode(b"<sps-api-response><res_err_code/></sps-api-response>")

        assert document.root.get("res_err_code") == Text("")

    def test_any_root_tag_accepted(self, response_xml):
        """Decoding does not enforce the protocol root."""
        document = codec.decode(response_xml(root="html"))

        assert document.root_tag == "html"

    @pytest.mark.parametrize(
        "data",
        [
            b"",
            b"not xml at all",
            b"<sps-api-response><res_result>OK</sps-api-response>",
        ],
    )
    def test_malformed_xml_raises(self, data):
        """Malformed bodies raise DocumentDecodeError, never a parser error."""
        with pytest.raises(DocumentDecodeError):
            codec.decode(data)

    def test_repeated_child_raises(self):
        """The tree maps tags to single nodes, so repeats are rejected."""
        data = b"<sps-api-response><a>1</a><a>2</a></sps-api-response>"

        with pytest.raises(DocumentDecodeError, match="Repeated element"):
            codec.decode(data)


class TestRoundTrip:
    """decode(encode(tree)) reproduces the tree."""

    def test_round_trip_request(self, request_document):
        """Every tag, attribute and text value survives."""
        decoded = codec.decode(codec.encode(request_document))

        assert decoded.root_tag == request_document.root_tag
        assert decoded.root == request_document.root
        assert decoded.version == "1.0"

    def test_round_trip_attributes_on_nested_element(self):
        """Attributes on nested containers survive."""
        document = Document(
            root_tag="sps-api-request",
            root=Element(
                attributes={"id": "ST02-00201-101"},
                children={
                    "pay_option_manage": Element(
                        attributes={"type": "token"},
                        children={"token": Text("tok"), "token_key": Text("key")},
                    ),
                    "free1": Text("年払い初期費用10万円プラン"),
                },
            ),
        )

        decoded = codec.decode(codec.encode(document))

        assert decoded.root == document.root
