"""Command-line client that checks parking sign photos against the gateway."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx
from pydantic import ValidationError

from parking_signs.app_logging import configure_logging
from parking_signs.capture.files import load_data_url, select_image_files
from parking_signs.capture.gateway_client import (
    DEFAULT_GATEWAY_URL,
    GatewayClient,
    HttpxGatewayClient,
)
from parking_signs.capture.render import render_verdict
from parking_signs.capture.state import (
    AnalysisFailed,
    AnalysisStarted,
    AnalysisSucceeded,
    CaptureState,
    ImagesAdded,
    Phase,
    is_busy,
    reduce,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_NO_IMAGES = 2


async def check_images(paths: list[Path], client: GatewayClient) -> CaptureState:
    """Run one capture-and-analyze pass over image files."""
    state = CaptureState()
    for path in select_image_files(paths):
        state = reduce(state, ImagesAdded(images=(load_data_url(path),)))
    state = reduce(state, AnalysisStarted())
    if not is_busy(state):
        return state
    try:
        verdict = await client.analyze(list(state.images))
    except (httpx.HTTPError, ValidationError, ValueError) as exc:
        logger.warning("Gateway analysis failed: %s", exc)
        return reduce(state, AnalysisFailed())
    return reduce(state, AnalysisSucceeded(verdict=verdict))


def format_state(state: CaptureState) -> list[str]:
    """Return the lines the CLI prints for a finished capture pass."""
    if state.phase == Phase.RESULT_SHOWN and state.verdict is not None:
        return render_verdict(state.verdict)
    if state.phase == Phase.ERROR_SHOWN and state.error:
        return [state.error]
    return []


async def _run(paths: list[Path], url: str) -> CaptureState:
    client = HttpxGatewayClient.create(url)
    try:
        return await check_images(paths, client)
    finally:
        await client.close()


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for checking parking sign photos."""
    parser = argparse.ArgumentParser(
        description="Ask the parking sign gateway whether you can park here now.",
    )
    parser.add_argument("files", nargs="+", help="Photos of the parking signs.")
    parser.add_argument(
        "--url",
        default=DEFAULT_GATEWAY_URL,
        help=f"Gateway base URL (default: {DEFAULT_GATEWAY_URL}).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log request errors.")
    args = parser.parse_args(argv)
    configure_logging(logging.INFO if args.verbose else logging.ERROR)

    state = asyncio.run(_run([Path(name) for name in args.files], args.url))
    if state.phase == Phase.IDLE:
        print("No image files to analyze.", file=sys.stderr)  # noqa: T201
        return EXIT_NO_IMAGES
    for line in format_state(state):
        print(line)  # noqa: T201
    return EXIT_OK if state.phase == Phase.RESULT_SHOWN else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
