# uploader.py
import logging
import mimetypes
from typing import Callable, Optional

from image_asset import ImageAsset

logger = logging.getLogger(__name__)

FALLBACK_MIME_TYPE = "application/octet-stream"


def guess_mime_type(filename: Optional[str], content_type: Optional[str]) -> str:
    if content_type:
        return content_type
    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            return guessed
    return FALLBACK_MIME_TYPE


def is_image_type(mime_type: str) -> bool:
    """Same filter a browser file picker applies with accept="image/*"."""
    return mime_type.startswith("image/")


def read_upload(
    filename: Optional[str],
    content: bytes,
    content_type: Optional[str] = None,
) -> ImageAsset:
    mime_type = guess_mime_type(filename, content_type)
    return ImageAsset.from_bytes(content, mime_type)


class Uploader:
    """
    Turns a user-selected file into an ImageAsset and hands it on.
    """

    def __init__(self, on_upload: Callable[[ImageAsset], None]):
        self.on_upload = on_upload

    def upload(
        self,
        filename: Optional[str],
        content: bytes,
        content_type: Optional[str] = None,
    ) -> ImageAsset:
        asset = read_upload(filename, content, content_type)
        logger.info(
            "Uploaded %s (%s, %d bytes)", filename or "<unnamed>", asset.mime_type, len(content)
        )
        self.on_upload(asset)
        return asset
