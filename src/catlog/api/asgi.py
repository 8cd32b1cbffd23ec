"""ASGI entrypoint for the catlog API."""

from catlog.api.app import create_app
from catlog.containers import build_container

app = create_app(build_container())
