import base64
import hashlib

import pytest


@pytest.fixture()
def digest_bytes() -> bytes:
    """MD5 of a known payload."""
    return hashlib.md5(b"hello world").digest()


@pytest.fixture()
def digest_hex(digest_bytes: bytes) -> str:
    return digest_bytes.hex()


@pytest.fixture()
def digest_base64(digest_bytes: bytes) -> str:
    return base64.b64encode(digest_bytes).decode("ascii")


@pytest.fixture()
def http_response(digest_base64: str) -> str:
    """A HEAD-style response with the Content-MD5 header among others."""
    return (
        "HTTP/1.1 200 OK\r\n"
        "Content-Type: application/octet-stream\r\n"
        f"Content-MD5: {digest_base64}\r\n"
        "Content-Length: 11\r\n"
        "\r\n"
    )
