"""Transport encoding for file content sent to the contents API."""

import base64


def encode_transport(text: str) -> str:
    """Encode Unicode text as base64 over its UTF-8 bytes."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_transport(blob: str) -> str:
    """Inverse of ``encode_transport``. Line breaks in the blob are ignored."""
    return base64.b64decode(blob).decode("utf-8")
