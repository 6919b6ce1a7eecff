# errors.py

NO_IMAGE_MESSAGE = "The model did not return a transformed image. Please try again."
GENERIC_ERROR_MESSAGE = "An unexpected error occurred during the transformation."


class NoImageReturned(Exception):
    """
    The remote call succeeded but none of the returned parts carried
    inline image data.
    """

    def __init__(self, message: str = NO_IMAGE_MESSAGE):
        super().__init__(message)


def error_message(exc: BaseException) -> str:
    # Whatever failed, the user only ever sees one string.
    return str(exc) or GENERIC_ERROR_MESSAGE
