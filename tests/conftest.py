import base64
import io

import pytest
from google.genai import types
from PIL import Image

from image_asset import ImageAsset
from pipeline import TransformationController


def make_response(*parts: types.Part) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


def image_part(payload: str, mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(data=base64.b64decode(payload), mime_type=mime_type))


def text_part(text: str) -> types.Part:
    return types.Part(text=text)


class FakeModel:
    """Stands in for the remote call; records what it was asked."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.on_call = None

    async def __call__(self, asset):
        self.calls.append(asset)
        if self.on_call is not None:
            self.on_call(asset)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def red_png() -> bytes:
    """A 10x10 red PNG."""
    img = Image.new("RGB", (10, 10), color="red")
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def red_asset(red_png) -> ImageAsset:
    return ImageAsset.from_bytes(red_png, "image/png")


@pytest.fixture
def fake_model() -> FakeModel:
    return FakeModel(response=make_response(image_part("AAAA")))


@pytest.fixture
def controller(fake_model) -> TransformationController:
    return TransformationController(request_fn=fake_model)
