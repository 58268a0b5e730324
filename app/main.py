"""ASGI entry point: ``uvicorn main:app``."""

from dotenv import load_dotenv

load_dotenv()

from server.server import handler as app  # noqa: E402

__all__ = ["app"]
