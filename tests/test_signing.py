"""Tests for parameter canonicalization and HMAC signatures."""

from __future__ import annotations

from decimal import Decimal

from payment_assist.core.signing import (
    canonicalize,
    generate_signature,
    remove_empty_params,
    sign,
    stringify,
)

EMPTY_MESSAGE_SIGNATURE = (
    "883a1369fa89dbc40b32496dbec4174276f9899e88cdfdbf1b6327c2ebc7ffcb"
)


class TestStringify:
    def test_none_is_empty(self) -> None:
        assert stringify(None) == ""

    def test_scalars(self) -> None:
        assert stringify("test") == "test"
        assert stringify(5) == "5"
        assert stringify(True) == "true"
        assert stringify(False) == "false"

    def test_decimal_and_float_stay_positional(self) -> None:
        assert stringify(Decimal("5.555")) == "5.555"
        assert stringify(Decimal("1E+2")) == "100"
        assert stringify(5.555) == "5.555"


class TestRemoveEmptyParams:
    def test_drops_empty_and_absent_values(self) -> None:
        params = [("addr1", "1 Road"), ("addr2", None), ("county", ""), ("amount", 100)]
        assert remove_empty_params(params) == [("addr1", "1 Road"), ("amount", "100")]

    def test_false_is_kept(self) -> None:
        assert remove_empty_params([("send_sms", False)]) == [("send_sms", "false")]


class TestCanonicalize:
    def test_uppercases_names_and_appends_separator(self) -> None:
        params = [("test1", "test test"), ("test2", "test")]
        assert canonicalize(params) == "TEST1=test test&TEST2=test&"

    def test_empty_input_is_empty_string(self) -> None:
        assert canonicalize([]) == ""

    def test_values_are_not_escaped(self) -> None:
        params = [("filedata", "YQ=="), ("url", "https://x.test/?a=1&b=2")]
        assert canonicalize(params) == "FILEDATA=YQ==&URL=https://x.test/?a=1&b=2&"

    def test_order_is_preserved(self) -> None:
        assert canonicalize([("b", "1"), ("a", "2")]) == "B=1&A=2&"


class TestSignature:
    def test_known_signature(self) -> None:
        params = [("test", "test"), ("test2", "test2")]
        assert (
            generate_signature(params, "secret")
            == "7eba7f616af343d16ff09e242362345e6cfb09d24b78a73c81d267f049fc47c2"
        )

    def test_known_signature_with_demo_secret(self) -> None:
        params = [("test1", "test"), ("test2", "test2")]
        assert (
            generate_signature(params, "demo_2ec4449ac4a7a86e2f79c4794e8")
            == "8226de39365226038be9598213e480d22f4dfe7147f50d977087a8d4eb124f52"
        )

    def test_sign_is_deterministic(self) -> None:
        canonical = "TEST=test&TEST2=test2&"
        assert sign(canonical, "secret") == sign(canonical, "secret")

    def test_sign_output_is_lowercase_hex(self) -> None:
        signature = sign("TOKEN=abc&", "testsecret")
        assert len(signature) == 64
        assert signature == signature.lower()
        int(signature, 16)

    def test_empty_params_sign_empty_message(self) -> None:
        assert generate_signature([], "testsecret") == EMPTY_MESSAGE_SIGNATURE
        assert sign("", "testsecret") == EMPTY_MESSAGE_SIGNATURE
