"""Shared constants and helpers for EWWW client tests."""

import httpx

BASE_URL = "https://optimize.exactlywww.com"
CONVERT_URL = f"{BASE_URL}/v2/"
VERIFY_URL = f"{BASE_URL}/verify/"
QUOTA_URL = f"{BASE_URL}/quota/"

# Minimal JPEG and WebP payloads; the backend is mocked so they are never decoded
JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"
WEBP_BYTES = (
    b"RIFF\x1a\x00\x00\x00WEBPVP8L\x0d\x00\x00\x00/\x00\x00\x00\x10\x07\x10\x11\x11\x88\x88\xfe\x07\x00"
)


def form_field(name: str, value: str) -> bytes:
    """Bytes of a plain multipart form field as httpx encodes it."""
    return f'name="{name}"\r\n\r\n{value}\r\n'.encode()


class CountingTransport(httpx.MockTransport):
    """Mock transport that records every request it handles."""

    def __init__(self, body: bytes = b'{"status":"great"}'):
        self.requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return httpx.Response(200, content=body)

        super().__init__(handler)
