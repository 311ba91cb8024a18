"""Image loading for landmark popups."""

import asyncio
import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

from ..models.form import ImageUpload
from ..utils.image_utils import encode_data_url, probe_image

logger = logging.getLogger(__name__)


class ImageLoadError(OSError):
    """A selected image could not be read."""


class ImageLoader:
    """Turns uploaded image files into data URLs."""

    def __init__(self, max_bytes: int = 10 * 1024 * 1024):
        """
        Initialize image loader.

        Args:
            max_bytes: Largest accepted upload in bytes
        """
        self.max_bytes = max_bytes

    def read(self, upload: ImageUpload) -> str:
        """
        Verify an upload and encode it.

        Args:
            upload: Uploaded file

        Returns:
            Data URL for the image

        Raises:
            ImageLoadError: If the file is empty, too large or not an image
        """
        if not upload.data:
            raise ImageLoadError(f"Image file '{upload.filename}' is empty")
        if len(upload.data) > self.max_bytes:
            raise ImageLoadError(
                f"Image file '{upload.filename}' exceeds {self.max_bytes} bytes"
            )

        try:
            image_format = probe_image(upload.data)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as e:
            raise ImageLoadError(f"Failed to read image file '{upload.filename}': {e}") from e

        mime_type = Image.MIME.get(image_format) or upload.content_type or "application/octet-stream"
        return encode_data_url(upload.data, mime_type)

    async def load(self, upload: Optional[ImageUpload]) -> Optional[str]:
        """
        Read an upload off the event loop.

        Returns:
            Data URL, or None if no file was chosen
        """
        if upload is None:
            return None

        return await asyncio.to_thread(self.read, upload)
