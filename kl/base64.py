"""Base64 and base64url encoding with strict decoding rules."""

from __future__ import annotations

import base64 as _stdlib_base64

__all__ = [
    "base64_encode",
    "base64url_encode",
    "base64_decode",
    "base64url_decode",
]

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_URL_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

_LOOKUP = {char: index for index, char in enumerate(_ALPHABET)}
_URL_LOOKUP = {char: index for index, char in enumerate(_URL_ALPHABET)}


def base64_encode(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes as standard base64, padded with '='."""
    return _stdlib_base64.b64encode(bytes(data)).decode("ascii")


def base64url_encode(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes as URL-safe base64 without padding."""
    encoded = _stdlib_base64.urlsafe_b64encode(bytes(data)).decode("ascii")
    return encoded.rstrip("=")


def _decode(text: str | bytes, lookup: dict[str, int], url_variant: bool) -> bytes:
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("latin-1")

    # The standard variant insists on complete quadruples, so "SGVsbG8=="
    # is rejected for its superfluous second '='.
    if not url_variant and len(text) % 4:
        raise ValueError("base64 input length must be a multiple of 4")

    stripped = text.rstrip("=")
    if len(text) - len(stripped) > 2:
        raise ValueError("too many '=' padding characters")

    if len(stripped) % 4 == 1:
        raise ValueError("truncated base64 input")

    try:
        sextets = [lookup[char] for char in stripped]
    except KeyError as exc:
        raise ValueError(f"invalid base64 character {exc.args[0]!r}") from None

    out = bytearray()
    for start in range(0, len(sextets), 4):
        chunk = sextets[start:start + 4]
        acc = 0
        for sextet in chunk:
            acc = (acc << 6) | sextet
        num_bytes = 3 if len(chunk) == 4 else len(chunk) - 1
        acc >>= 6 * len(chunk) - 8 * num_bytes
        out += acc.to_bytes(num_bytes, "big")
    return bytes(out)


def base64_decode(text: str | bytes) -> bytes:
    """Decode standard base64; raise ValueError on malformed input."""
    return _decode(text, _LOOKUP, url_variant=False)


def base64url_decode(text: str | bytes) -> bytes:
    """Decode URL-safe base64, padding optional; raise ValueError on malformed input."""
    return _decode(text, _URL_LOOKUP, url_variant=True)