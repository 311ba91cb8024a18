"""Image processing utilities."""

import base64
from io import BytesIO

from PIL import Image


def probe_image(data: bytes) -> str:
    """Verify image bytes and return the detected format (e.g. 'PNG').

    Raises whatever Pillow raises for unreadable data.
    """
    with Image.open(BytesIO(data)) as image:
        image.verify()
        return image.format or ""


def encode_data_url(data: bytes, mime_type: str) -> str:
    """Encode raw bytes as a base64 data URL."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def decode_data_url(url: str) -> tuple[str, bytes]:
    """Split a base64 data URL into (mime_type, bytes)."""
    header, _, payload = url.partition(",")
    if not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Not a base64 data URL")
    return header[len("data:"):-len(";base64")], base64.b64decode(payload)


def image_to_bytes(image: Image.Image, format: str = "PNG") -> bytes:
    """Serialize a PIL image."""
    buffer = BytesIO()
    if format.upper() in ("JPG", "JPEG") and image.mode == "RGBA":
        # Convert to RGB for JPEG
        background = Image.new("RGB", image.size, (255, 255, 255))
        background.paste(image, mask=image.split()[3])
        image = background
    image.save(buffer, format=format)
    return buffer.getvalue()

