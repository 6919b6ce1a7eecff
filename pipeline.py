import logging
from typing import Awaitable, Callable, Optional

from google.genai import types

from errors import error_message
from image_asset import ImageAsset
from llm import extract_image_payload, request_transformation
from schemas import TransformationState

logger = logging.getLogger(__name__)

RequestFn = Callable[[ImageAsset], Awaitable[types.GenerateContentResponse]]


class TransformationController:
    """
    Owns the input/output/error state and the single transform operation.

    Idle -> Loading -> Success | Failed. Only a new upload goes back to idle.
    """

    def __init__(self, request_fn: Optional[RequestFn] = None):
        self.state = TransformationState()
        self._request = request_fn or request_transformation

    @property
    def loading(self) -> bool:
        return self.state.loading

    def set_input(self, asset: ImageAsset) -> None:
        self.state.input = asset.to_data_uri()
        self.state.output = None
        self.state.error = None

    def _set_output(self, data_uri: str) -> None:
        self.state.output = data_uri
        self.state.error = None

    def _set_error(self, message: str) -> None:
        self.state.error = message
        self.state.output = None

    async def transform(self) -> Optional[str]:
        """
        Run one transformation of the current input.

        Failures never propagate: their message lands in ``state.error``.
        Returns the output data URI, or None when there was nothing to do
        or the call failed.
        """
        if not self.state.input:
            return None

        # The in-flight call keeps this input even if a new upload lands.
        source = self.state.input

        self.state.loading = True
        self.state.error = None

        try:
            asset = ImageAsset.parse(source)
            response = await self._request(asset)
            payload = extract_image_payload(response)
            self._set_output(ImageAsset.png(payload).to_data_uri())
            logger.info("Transformation succeeded")
        except Exception as exc:
            logger.exception("Transformation Error")
            self._set_error(error_message(exc))
        finally:
            self.state.loading = False

        return self.state.output
