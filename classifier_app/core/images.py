"""Checks on images chosen for upload."""

import io
import logging
from typing import Optional

from PIL import Image, ImageOps, UnidentifiedImageError

from ..constants import ALLOWED_IMAGE_TYPES, Messages
from .exceptions import ValidationError
from .models import UploadedImage

logger = logging.getLogger(__name__)


def load_uploaded_image(
    filename: str,
    content: bytes,
    declared_type: Optional[str] = None,
    max_bytes: Optional[int] = None,
) -> UploadedImage:
    """
    Wrap uploaded bytes as an UploadedImage after checking they are an image.

    The content type comes from what Pillow detects, not from the browser.

    Raises:
        ValidationError: If the file is empty, too large, or not a supported image
    """
    if not filename:
        raise ValidationError("Filename missing.")
    if not content:
        raise ValidationError(Messages.INVALID_IMAGE)
    if max_bytes is not None and len(content) > max_bytes:
        logger.warning(f"Image file too large: {len(content)} bytes (max: {max_bytes}) for file {filename}")
        raise ValidationError(f"File too large. Max {max_bytes // (1024 * 1024)}MB allowed.")

    try:
        with Image.open(io.BytesIO(content)) as img:
            img_format = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        logger.warning(f"Rejected upload '{filename}': {e}")
        raise ValidationError(Messages.INVALID_IMAGE) from e

    content_type = Image.MIME.get(img_format or "", declared_type or "")
    if content_type not in ALLOWED_IMAGE_TYPES:
        logger.warning(f"Invalid image type: {content_type} for file {filename}")
        raise ValidationError(Messages.INVALID_IMAGE)

    return UploadedImage(filename=filename, content=content, content_type=content_type)


def preview_image(image: UploadedImage) -> Image.Image:
    """Decode an upload for display with EXIF orientation applied."""
    with Image.open(io.BytesIO(image.content)) as img:
        img = ImageOps.exif_transpose(img)
        return img.copy()
