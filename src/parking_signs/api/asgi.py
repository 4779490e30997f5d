"""ASGI entrypoint for the parking sign gateway."""

from parking_signs.api.app import create_app
from parking_signs.containers import build_container

app = create_app(build_container())
