import base64
import logging
from typing import Optional

from google import genai
from google.genai import types

from config import get_api_key
from errors import NoImageReturned
from image_asset import ImageAsset

logger = logging.getLogger(__name__)

MODEL_NAME = "gemini-2.5-flash-image"

TRANSFORM_PROMPT = (
    "Please transform this image to have a clean, solid white background and "
    "change all text, symbols, and foreground elements to solid black. Ensure "
    "high contrast and maintain the original layout and proportions. The result "
    "should look professional, like a scanned document or a high-quality "
    "print-ready version."
)


# -----------------------------
# Request
# -----------------------------

def build_contents(asset: ImageAsset) -> types.Content:
    """
    One user turn: the image first, then the fixed instruction.
    """
    return types.Content(
        role="user",
        parts=[
            types.Part.from_bytes(data=asset.data, mime_type=asset.mime_type),
            types.Part.from_text(text=TRANSFORM_PROMPT),
        ],
    )


def make_client() -> genai.Client:
    return genai.Client(api_key=get_api_key())


async def request_transformation(
    asset: ImageAsset,
    client: Optional[genai.Client] = None
) -> types.GenerateContentResponse:
    """
    Send a single generate_content call for the image.
    The client is built per call so the credential is read at call time.
    """
    client = client or make_client()

    logger.info("Requesting transformation from %s (%s)", MODEL_NAME, asset.mime_type)
    return await client.aio.models.generate_content(
        model=MODEL_NAME,
        contents=build_contents(asset)
    )


# -----------------------------
# Response
# -----------------------------

def extract_image_payload(response: types.GenerateContentResponse) -> str:
    """
    Return the base64 payload of the first part carrying inline image data.
    Later parts are ignored.
    """
    candidates = response.candidates or []
    content = candidates[0].content if candidates else None
    parts = (content.parts if content else None) or []

    for part in parts:
        inline_data = part.inline_data
        if inline_data is not None and inline_data.data:
            return base64.b64encode(inline_data.data).decode("ascii")

    raise NoImageReturned()
