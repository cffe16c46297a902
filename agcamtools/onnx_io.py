"""Tensor layout helpers for running neural stereo models.

Stereo networks take two ``[1, 3, H, W]`` float32 inputs in the ``[0, 255]``
range, with ``H`` and ``W`` padded up to multiples of 32.  They produce a
float disparity map of rank 2 to 4.  That map is cropped back to the image
size and converted to Q4.4 fixed point, the format the rest of the
disparity pipeline uses.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

PAD_MULTIPLE = 32
_Q4_SCALE = 16.0
_Q4_MIN = -32768.0
_Q4_MAX = 32767.0


def pad32(value: int) -> int:
    """Round ``value`` up to the nearest multiple of 32."""
    if value < 0:
        raise ValueError(f"dimension must be non-negative, got {value}")
    return ((value + PAD_MULTIPLE - 1) // PAD_MULTIPLE) * PAD_MULTIPLE


def pack_gray_to_nchw3_padded(src, width: int, height: int, pad_w: int, pad_h: int) -> np.ndarray:
    """Pack a grayscale image into a ``[1, 3, pad_h, pad_w]`` float32 tensor.

    The gray value is copied into all three channels.  Columns to the right
    of the image repeat its last column, and rows below it repeat its last
    row.  ``src`` may be flat or two-dimensional; it must hold exactly
    ``width * height`` pixels.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    if pad_w < width or pad_h < height:
        raise ValueError(
            f"padded size {pad_w}x{pad_h} is smaller than image {width}x{height}"
        )
    pixels = np.asarray(src)
    if pixels.size != width * height:
        raise ValueError(
            f"expected {width * height} pixels for {width}x{height}, got {pixels.size}"
        )
    image = pixels.reshape(height, width).astype(np.float32)
    padded = np.pad(image, ((0, pad_h - height), (0, pad_w - width)), mode="edge")
    planes = np.broadcast_to(padded, (3, pad_h, pad_w))
    return np.ascontiguousarray(planes[np.newaxis, ...], dtype=np.float32)


def output_stride(shape: Sequence[int], width: int, height: int) -> int:
    """Validate a model output shape and return its row stride (last dimension).

    The output rank must be 2 to 4 and its two trailing dimensions must be
    at least as large as the image.
    """
    dims = tuple(int(d) for d in shape)
    if not 2 <= len(dims) <= 4:
        raise ValueError(f"unsupported output rank {len(dims)}")
    out_h, out_w = dims[-2], dims[-1]
    if out_h < height or out_w < width:
        raise ValueError(f"output shape too small: {out_w}x{out_h}")
    return out_w


def output_to_q4(output, width: int, height: int) -> np.ndarray:
    """Crop a float disparity output to ``height x width`` and convert to Q4.4.

    Values are scaled by 16, clamped to the int16 range and truncated
    toward zero.  Returns an int16 array of shape ``(height, width)``.
    """
    data = np.asarray(output, dtype=np.float32)
    stride = output_stride(data.shape, width, height)
    rows = data.reshape(-1)[: height * stride].reshape(height, stride)[:, :width]
    q4 = np.clip(rows * np.float32(_Q4_SCALE), _Q4_MIN, _Q4_MAX)
    return q4.astype(np.int16)