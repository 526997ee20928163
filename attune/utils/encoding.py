"""Base64 helpers for binary payloads carried inside JSON."""

from __future__ import annotations

import base64
import re

_DATA_URL_PREFIX = re.compile(r"^data:image/[a-z]+;base64,")


def strip_data_url_prefix(value: str) -> str:
    """Remove a leading ``data:image/<type>;base64,`` header when present."""

    return _DATA_URL_PREFIX.sub("", value, count=1)


def encode_base64(data: bytes) -> str:
    """Encode raw bytes as ASCII base64 text."""

    return base64.b64encode(data).decode("ascii")


__all__ = ["encode_base64", "strip_data_url_prefix"]
