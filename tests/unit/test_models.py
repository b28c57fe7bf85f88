"""Unit tests for document and envelope models."""

import dataclasses

import pytest

from sps_client.models import (
    Element,
    Identity,
    Locale,
    ResponseEnvelope,
    Text,
    to_node,
)


class TestToNode:
    def test_string_becomes_text(self):
        assert to_node("30132") == Text("30132")

    def test_mapping_becomes_element(self):
        node = to_node({"token": "t", "inner": {"flag": "1"}})

        assert node == Element(
            children={"token": Text("t"), "inner": Element(children={"flag": Text("1")})}
        )

    def test_nodes_pass_through(self):
        element = Element(attributes={"id": "x"})

        assert to_node(element) is element

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="int"):
            to_node(10)


class TestElementText:
    def test_walks_nested_path(self):
        element = to_node({"res_pay_method_info": {"cc_number": "************1111"}})

        assert element.text("res_pay_method_info", "cc_number") == "************1111"

    def test_missing_step_is_none(self):
        element = to_node({"res_result": "OK"})

        assert element.text("res_pay_method_info", "cc_number") is None
        assert element.text("res_result", "deeper") is None

    def test_container_is_not_text(self):
        element = to_node({"block": {"leaf": "x"}})

        assert element.text("block") is None


class TestResponseEnvelope:
    def test_transport_failure_envelope(self):
        envelope = ResponseEnvelope.transport_failure("Undefined Undefined Undefined")

        assert envelope.result == "NG"
        assert envelope.err_code == "0000000"
        assert envelope.error_message == "Undefined Undefined Undefined"
        assert envelope.date is None

    def test_ng_requires_error_message(self):
        with pytest.raises(ValueError, match="error_message required"):
            ResponseEnvelope(body=to_node({"res_result": "NG", "res_err_code": "10103003"}))

    def test_ok_rejects_error_message(self):
        with pytest.raises(ValueError, match="only allowed for NG"):
            ResponseEnvelope(body=to_node({"res_result": "OK"}), error_message="x")

    def test_pay_method_info_absent(self):
        envelope = ResponseEnvelope(body=to_node({"res_result": "OK"}))

        assert envelope.pay_method_info == {}


class TestIdentity:
    def test_immutable(self):
        identity = Identity("30132", "103", "secret")

        with pytest.raises(dataclasses.FrozenInstanceError):
            identity.merchant_id = "other"

    def test_basic_auth_username(self):
        assert Identity("30132", "103", "secret").basic_auth_username == "30132103"

    def test_default_locale(self):
        assert Identity("30132", "103", "secret").locale == Locale.EN
