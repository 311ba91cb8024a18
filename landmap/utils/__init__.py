"""Utility functions for the landmark map."""

from .image_utils import (
    decode_data_url,
    encode_data_url,
    image_to_bytes,
    probe_image,
)

__all__ = [
    "decode_data_url",
    "encode_data_url",
    "image_to_bytes",
    "probe_image",
]
