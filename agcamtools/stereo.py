"""Stereo backend selection, StereoSGBM parameters and depth conversion."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class StereoBackend(enum.Enum):
    """Disparity computation backend."""

    SGBM = "sgbm"
    ONNX = "onnx"


_BACKEND_ALIASES = {
    "sgbm": StereoBackend.SGBM,
    "onnx": StereoBackend.ONNX,
    "igev": StereoBackend.ONNX,
    "rt-igev": StereoBackend.ONNX,
    "foundation": StereoBackend.ONNX,
}

_DEFAULT_MODEL_PATHS = {
    "igev": "models/igev_plusplus.onnx",
    "rt-igev": "models/rt_igev_plusplus.onnx",
    "foundation": "models/foundation_stereo.onnx",
}


def parse_backend(name: str) -> StereoBackend:
    """Parse a backend name; the ONNX model aliases map to ONNX.

    Raises ValueError for an unrecognised name.
    """
    try:
        return _BACKEND_ALIASES[name]
    except KeyError:
        raise ValueError(f"unknown stereo backend: {name!r}") from None


def default_model_path(name: str) -> str | None:
    """Return the default model file for a named ONNX alias, or None."""
    return _DEFAULT_MODEL_PATHS.get(name)


def backend_name(backend: StereoBackend) -> str:
    """Return the human-readable name of a backend."""
    return backend.value


@dataclass
class SgbmParams:
    """StereoSGBM matcher parameters; zero penalties mean derive from block size."""

    min_disparity: int = 0
    num_disparities: int = 128
    block_size: int = 5
    p1: int = 0
    p2: int = 0
    disp12_max_diff: int = 1
    pre_filter_cap: int = 63
    uniqueness_ratio: int = 10
    speckle_window_size: int = 100
    speckle_range: int = 32
    mode: int = 2

    def resolved_penalties(self) -> tuple[int, int]:
        """Return ``(p1, p2)``, deriving unset ones from the block size."""
        area = self.block_size * self.block_size
        p1 = self.p1 if self.p1 != 0 else 8 * area
        p2 = self.p2 if self.p2 != 0 else 32 * area
        return p1, p2


@dataclass
class OnnxParams:
    """Parameters for a neural stereo model run through ONNX Runtime."""

    model_path: str


def disparity_to_depth(disp_q4: int, focal_length_px: float, baseline: float) -> float:
    """Convert a Q4.4 disparity to depth in the units of ``baseline``.

    Non-positive disparity is invalid and gives 0.0.
    """
    d = disp_q4 / 16.0
    if d <= 0.0:
        return 0.0
    return (focal_length_px * baseline) / d