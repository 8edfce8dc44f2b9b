"""ASGI entrypoint for the sugar tracker API."""

from sugar_tracker.api.app import create_app
from sugar_tracker.containers import build_container

app = create_app(build_container())
