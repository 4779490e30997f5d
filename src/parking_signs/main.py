"""Local server entrypoint."""

import uvicorn

from parking_signs.api.app import create_app
from parking_signs.config import Settings
from parking_signs.containers import build_container


def main() -> None:
    """Run the gateway with uvicorn on the configured host and port."""
    settings = Settings()
    app = create_app(build_container(settings))
    print(f"Parking Sign Checker running on port {settings.port}")  # noqa: T201
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
