"""Basic Credentials — tests for Authorization header decoding.

Tests cover:
    - well-formed headers decode to (identifier, secret)
    - secrets may contain ':'
    - absent, foreign-scheme and undecodable headers yield None
"""

import base64

import pytest

from scholarlog.core.basic_credentials import (
    decode_basic_authorization, encode_basic_authorization,
)


def test_decode_roundtrips_encoded_header():
    header = encode_basic_authorization("a@x.com", "password1")
    assert decode_basic_authorization(header) == ("a@x.com", "password1")


def test_scheme_is_case_insensitive():
    token = base64.b64encode(b"a@x.com:pw").decode()
    assert decode_basic_authorization(f"basic {token}") == ("a@x.com", "pw")


def test_secret_may_contain_separator():
    header = encode_basic_authorization("a@x.com", "pa:ss:word")
    assert decode_basic_authorization(header) == ("a@x.com", "pa:ss:word")


@pytest.mark.parametrize("header", [
    None,
    "",
    "Bearer abc.def",
    "Basic",
    "Basic !!!not-base64!!!",
    "Basic " + base64.b64encode(b"no-separator").decode(),
    "Basic " + base64.b64encode(b":secret-only").decode(),
    "Basic " + base64.b64encode(b"\xff\xfe:bad-utf8").decode(),
])
def test_malformed_headers_yield_none(header):
    assert decode_basic_authorization(header) is None
