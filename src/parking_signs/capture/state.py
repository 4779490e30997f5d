"""View state and transitions for the image capture flow.

The capture flow moves through ``idle -> imagesSelected -> analyzing ->
resultShown | errorShown``. Any image edit from ``resultShown`` or
``errorShown`` returns to ``imagesSelected`` (or ``idle`` when the last
image is removed). State is immutable and only changes through ``reduce``.
"""

from dataclasses import dataclass, replace
from enum import StrEnum

from parking_signs.domain.verdict import AnalysisVerdict

ANALYSIS_ERROR_MESSAGE = "Failed to analyze parking signs. Please try again."


class Phase(StrEnum):
    """Phases of the capture flow."""

    IDLE = "idle"
    IMAGES_SELECTED = "imagesSelected"
    ANALYZING = "analyzing"
    RESULT_SHOWN = "resultShown"
    ERROR_SHOWN = "errorShown"


@dataclass(frozen=True)
class CaptureState:
    """Client view state for one capture session."""

    images: tuple[str, ...] = ()
    phase: Phase = Phase.IDLE
    verdict: AnalysisVerdict | None = None
    error: str | None = None


@dataclass(frozen=True)
class ImagesAdded:
    images: tuple[str, ...]


@dataclass(frozen=True)
class ImageRemoved:
    index: int


@dataclass(frozen=True)
class AnalysisStarted:
    pass


@dataclass(frozen=True)
class AnalysisSucceeded:
    verdict: AnalysisVerdict


@dataclass(frozen=True)
class AnalysisFailed:
    pass


Action = (
    ImagesAdded | ImageRemoved | AnalysisStarted | AnalysisSucceeded | AnalysisFailed
)


def can_analyze(state: CaptureState) -> bool:
    """Return true when the analyze action should be enabled."""
    return bool(state.images) and state.phase != Phase.ANALYZING


def is_busy(state: CaptureState) -> bool:
    """Return true while an analysis call is outstanding."""
    return state.phase == Phase.ANALYZING


def reduce(state: CaptureState, action: Action) -> CaptureState:  # noqa: PLR0911
    """Apply an action and return the next state."""
    if isinstance(action, ImagesAdded):
        return _edit_images(state, state.images + tuple(action.images))
    if isinstance(action, ImageRemoved):
        if not 0 <= action.index < len(state.images):
            return state
        images = state.images[: action.index] + state.images[action.index + 1 :]
        return _edit_images(state, images)
    if isinstance(action, AnalysisStarted):
        if not can_analyze(state):
            return state
        return replace(state, phase=Phase.ANALYZING, verdict=None, error=None)
    if isinstance(action, AnalysisSucceeded):
        if state.phase != Phase.ANALYZING:
            return state
        return replace(state, phase=Phase.RESULT_SHOWN, verdict=action.verdict)
    if isinstance(action, AnalysisFailed):
        if state.phase != Phase.ANALYZING:
            return state
        return replace(state, phase=Phase.ERROR_SHOWN, error=ANALYSIS_ERROR_MESSAGE)
    return state


def _edit_images(state: CaptureState, images: tuple[str, ...]) -> CaptureState:
    if state.phase == Phase.ANALYZING:
        return replace(state, images=images)
    phase = Phase.IMAGES_SELECTED if images else Phase.IDLE
    return replace(state, images=images, phase=phase, verdict=None, error=None)
