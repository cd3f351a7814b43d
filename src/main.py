"""ASGI module for ``uvicorn src.main:app``; settings are read on import."""

from src.application import create_app

app = create_app()
