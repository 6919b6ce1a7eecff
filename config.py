# config.py
import logging
import os

from dotenv import load_dotenv

load_dotenv()

API_KEY_ENV = "GEMINI_API_KEY"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))


def get_api_key() -> str:
    """
    Read the model credential from the environment.

    Called on every transform so a key exported after startup is still
    picked up.
    """
    return os.getenv(API_KEY_ENV, "")


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
