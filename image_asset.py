# image_asset.py
import base64
import binascii
from dataclasses import dataclass

DATA_URI_PREFIX = "data:"
BASE64_MARKER = ";base64,"


@dataclass(frozen=True)
class ImageAsset:
    """
    An image carried as a data URI: ``data:<mime>;base64,<payload>``.
    """

    mime_type: str
    payload: str

    @classmethod
    def parse(cls, data_uri: str) -> "ImageAsset":
        """
        Split a data URI on its first ':', ';' and ',' delimiters.
        """
        if not data_uri or not data_uri.startswith(DATA_URI_PREFIX):
            raise ValueError("Image is not a data URI.")
        if BASE64_MARKER not in data_uri:
            raise ValueError("Image data URI is not base64 encoded.")

        header, payload = data_uri.split(",", 1)
        mime_type = header.split(";", 1)[0].split(":", 1)[1]
        return cls(mime_type=mime_type, payload=payload)

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str) -> "ImageAsset":
        return cls(mime_type=mime_type, payload=base64.b64encode(data).decode("ascii"))

    @classmethod
    def png(cls, payload: str) -> "ImageAsset":
        # Model output is always rendered as PNG, whatever it reports.
        return cls(mime_type="image/png", payload=payload)

    @property
    def data(self) -> bytes:
        payload = self.payload

        # Fix base64 padding
        missing_padding = len(payload) % 4
        if missing_padding:
            payload += "=" * (4 - missing_padding)

        try:
            return base64.b64decode(payload)
        except binascii.Error as exc:
            raise ValueError("Image payload is not valid base64.") from exc

    def to_data_uri(self) -> str:
        return f"{DATA_URI_PREFIX}{self.mime_type}{BASE64_MARKER}{self.payload}"

    def __str__(self) -> str:
        return self.to_data_uri()
