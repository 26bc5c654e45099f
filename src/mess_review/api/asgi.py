"""ASGI entrypoint: ``uvicorn mess_review.api.asgi:app``."""

from mess_review.api.app import create_app
from mess_review.containers import build_container

container = build_container()
app = create_app(container)
