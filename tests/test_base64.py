import pytest

from kl.base64 import base64_decode, base64_encode, base64url_decode, base64url_encode

ENCODE_CASES = [
    (b"Hello", "SGVsbG8="),
    (b"Hello ", "SGVsbG8g"),
    (b"Hello W", "SGVsbG8gVw=="),
    (b"Hello Wo", "SGVsbG8gV28="),
    (b"Hello Wor", "SGVsbG8gV29y"),
    (b"Hello Worl", "SGVsbG8gV29ybA=="),
    (b"Hello World", "SGVsbG8gV29ybGQ="),
    (b"Hello World!", "SGVsbG8gV29ybGQh"),
    (b"<<!_??_!>>", "PDwhXz8/XyE+Pg=="),
]

URL_ENCODE_CASES = [
    (b"Hello", "SGVsbG8"),
    (b"Hello ", "SGVsbG8g"),
    (b"Hello W", "SGVsbG8gVw"),
    (b"Hello Wo", "SGVsbG8gV28"),
    (b"Hello Wor", "SGVsbG8gV29y"),
    (b"Hello Worl", "SGVsbG8gV29ybA"),
    (b"Hello World", "SGVsbG8gV29ybGQ"),
    (b"Hello World!", "SGVsbG8gV29ybGQh"),
    (b"<<!_??_!>>", "PDwhXz8_XyE-Pg"),
]


@pytest.mark.parametrize("raw, encoded", ENCODE_CASES)
def test_encode(raw, encoded):
    assert base64_encode(raw) == encoded


@pytest.mark.parametrize("raw, encoded", ENCODE_CASES[:-1])
def test_decode(raw, encoded):
    assert base64_decode(encoded) == raw


def test_decode_rejects_extra_padding():
    with pytest.raises(ValueError):
        base64_decode("SGVsbG8==")


def test_range_above_127_roundtrip():
    sps = "Z0KAH5ZSAUB7YCoQAAADABAAAAMDzgYABJPgABGMP8Y4wMAAknwAAjGH+McO0KFSQA=="
    pps = "aMuNSA=="
    assert base64_encode(base64_decode(sps)) == sps
    assert base64_encode(base64_decode(pps)) == pps


@pytest.mark.parametrize("text", ["a", "aa=a", "a===", "a!==", "a@!=", "aa-a"])
def test_malformed(text):
    with pytest.raises(ValueError):
        base64_decode(text)


@pytest.mark.parametrize("text", ["aaaa", "aa+a"])
def test_well_formed_odd_inputs(text):
    assert len(base64_decode(text)) == 3


@pytest.mark.parametrize("raw, encoded", URL_ENCODE_CASES)
def test_url_encode(raw, encoded):
    assert base64url_encode(raw) == encoded


@pytest.mark.parametrize("raw, encoded", URL_ENCODE_CASES[:-1])
def test_url_decode(raw, encoded):
    assert base64url_decode(encoded) == raw


def test_url_ignores_trailing_padding():
    assert base64url_decode("SGVsbG8gVw==") == b"Hello W"
    assert base64url_decode("SGVsbG8gVw=") == b"Hello W"
    assert base64url_decode("SGVsbG8gVw") == b"Hello W"
    with pytest.raises(ValueError):
        base64url_decode("SGVsbG8gVw===")


def test_url_range_above_127_roundtrip():
    sps = "Z0KAH5ZSAUB7YCoQAAADABAAAAMDzgYABJPgABGMP8Y4wMAAknwAAjGH-McO0KFSQA=="
    pps = "aMuNSA=="
    assert base64url_encode(base64url_decode(sps)) == sps[:-2]
    assert base64url_encode(base64url_decode(pps)) == pps[:-2]


@pytest.mark.parametrize("text", ["a", "aa=a", "a===", "a!==", "a@!=", "aa+a"])
def test_url_malformed(text):
    with pytest.raises(ValueError):
        base64url_decode(text)


@pytest.mark.parametrize("text", ["aaaa", "aa-a"])
def test_url_well_formed_odd_inputs(text):
    assert len(base64url_decode(text)) == 3


def test_decode_accepts_bytes():
    assert base64_decode(b"SGVsbG8=") == b"Hello"