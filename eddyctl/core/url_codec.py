"""Eddystone-URL scheme and suffix compression."""

from __future__ import annotations

from urllib.parse import urlsplit

from eddyctl.core.errors import (
    DecodeError,
    InvalidSchemeError,
    MalformedURLError,
    TruncatedFrameError,
    UrlEncodeError,
)

URL_SCHEMES: tuple[str, ...] = (
    "http://www.",
    "https://www.",
    "http://",
    "https://",
)

URL_ENCODINGS: tuple[str, ...] = (
    ".com/",
    ".org/",
    ".edu/",
    ".net/",
    ".info/",
    ".biz/",
    ".gov/",
    ".com",
    ".org",
    ".edu",
    ".net",
    ".info",
    ".biz",
    ".gov",
)

URL_SCHEME_OFFSET = 2
MAX_URL_BODY_BYTES = 17

_GRAPHIC_MIN = 0x21
_GRAPHIC_MAX = 0x7E


def _is_graphic(text: str) -> bool:
    return all(_GRAPHIC_MIN <= ord(char) <= _GRAPHIC_MAX for char in text)


def _expand(code: int) -> str:
    if code < len(URL_ENCODINGS):
        return URL_ENCODINGS[code]
    return chr(code)


def decode_url_body(scheme_byte: int, body: bytes) -> str | DecodeError:
    if scheme_byte >= len(URL_SCHEMES):
        return InvalidSchemeError(f"Undefined URL scheme byte 0x{scheme_byte:02x}")

    url = URL_SCHEMES[scheme_byte] + "".join(_expand(code) for code in body)
    if not _is_graphic(url):
        return MalformedURLError(f"URL contains non-printable characters: {url!r}")
    try:
        urlsplit(url)
    except ValueError as exc:
        return MalformedURLError(f"URL {url!r} cannot be parsed: {exc}")
    return url


def decode_url(service_data: bytes) -> str | DecodeError:
    """Rebuild the URL carried by an Eddystone-URL frame."""
    if len(service_data) <= URL_SCHEME_OFFSET:
        return TruncatedFrameError(
            f"URL frame needs at least {URL_SCHEME_OFFSET + 1} bytes, got {len(service_data)}"
        )
    return decode_url_body(
        service_data[URL_SCHEME_OFFSET],
        service_data[URL_SCHEME_OFFSET + 1 :],
    )


def _longest_prefix(text: str, candidates: tuple[str, ...]) -> int | None:
    best: int | None = None
    for code, candidate in enumerate(candidates):
        if not text.startswith(candidate):
            continue
        if best is None or len(candidate) > len(candidates[best]):
            best = code
    return best


def encode_url(url: str, *, max_body: int | None = MAX_URL_BODY_BYTES) -> bytes:
    """Compress a URL into a scheme byte followed by an encoded body.

    The result is what follows the frame type and tx power bytes of an
    Eddystone-URL frame.
    """
    if not _is_graphic(url):
        raise UrlEncodeError(f"URL contains characters that cannot be encoded: {url!r}")

    scheme = _longest_prefix(url, URL_SCHEMES)
    if scheme is None:
        raise UrlEncodeError(f"URL {url!r} does not start with an encodable scheme")

    body = bytearray()
    position = len(URL_SCHEMES[scheme])
    while position < len(url):
        code = _longest_prefix(url[position:], URL_ENCODINGS)
        if code is None:
            body.append(ord(url[position]))
            position += 1
        else:
            body.append(code)
            position += len(URL_ENCODINGS[code])

    if max_body is not None and len(body) > max_body:
        raise UrlEncodeError(
            f"Encoded URL body is {len(body)} bytes, exceeds limit of {max_body}"
        )
    return bytes([scheme, *body])
