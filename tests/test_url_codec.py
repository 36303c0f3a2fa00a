from __future__ import annotations

import pytest

from eddyctl.core.errors import InvalidSchemeError, MalformedURLError, TruncatedFrameError, UrlEncodeError
from eddyctl.core.url_codec import URL_ENCODINGS, URL_SCHEMES, decode_url, encode_url


def test_tables_match_eddystone_url_codes() -> None:
    assert URL_SCHEMES == ("http://www.", "https://www.", "http://", "https://")
    assert len(URL_ENCODINGS) == 14
    assert URL_ENCODINGS[0x00] == ".com/"
    assert URL_ENCODINGS[0x06] == ".gov/"
    assert URL_ENCODINGS[0x07] == ".com"
    assert URL_ENCODINGS[0x0D] == ".gov"


def test_decode_expands_suffix() -> None:
    data = bytes([0x10, 0x00, 0x02]) + b"example" + bytes([0x00])
    assert decode_url(data) == "http://example.com/"


def test_decode_mixes_suffixes_and_text() -> None:
    data = bytes([0x10, 0x00, 0x00]) + b"python" + bytes([0x08]) + b"/doc"
    assert decode_url(data) == "http://www.python.org/doc"


def test_decode_empty_body_yields_scheme() -> None:
    assert decode_url(bytes([0x10, 0x00, 0x01])) == "https://www."


def test_decode_invalid_scheme() -> None:
    assert isinstance(decode_url(bytes([0x10, 0x00, 0x05])), InvalidSchemeError)


def test_decode_truncated() -> None:
    assert isinstance(decode_url(bytes([0x10, 0x00])), TruncatedFrameError)


@pytest.mark.parametrize("body", [b"bad url", b"ex\x0eample", b"\x7f", b"a\x80", b"\xff", b"[abc"])
def test_decode_malformed_url(body: bytes) -> None:
    assert isinstance(decode_url(bytes([0x10, 0x00, 0x02]) + body), MalformedURLError)


def test_encode_then_decode_reproduces_url() -> None:
    encoded = encode_url("https://www.example.com/")
    assert encoded == bytes([0x01]) + b"example" + bytes([0x00])
    assert decode_url(bytes([0x10, 0x00]) + encoded) == "https://www.example.com/"


def test_encode_prefers_longest_matches() -> None:
    assert encode_url("http://example.org") == bytes([0x02]) + b"example" + bytes([0x08])
    assert encode_url("https://a.info/x") == bytes([0x03]) + b"a" + bytes([0x04]) + b"x"


def test_encode_rejects_unknown_scheme() -> None:
    with pytest.raises(UrlEncodeError):
        encode_url("ftp://example.com")


def test_encode_rejects_long_body() -> None:
    with pytest.raises(UrlEncodeError):
        encode_url("https://" + "a" * 18)
    assert len(encode_url("https://" + "a" * 18, max_body=None)) == 19


def test_encode_rejects_spaces() -> None:
    with pytest.raises(UrlEncodeError):
        encode_url("https://a b")
