"""Utility helpers for the Attune backend."""

from .encoding import encode_base64, strip_data_url_prefix

__all__ = [
    "encode_base64",
    "strip_data_url_prefix",
]
