import numpy as np
import pytest

from agcamtools.onnx_io import (
    output_stride,
    output_to_q4,
    pack_gray_to_nchw3_padded,
    pad32,
)


# ---------------------------------------------------------------- pad32


@pytest.mark.parametrize("value,expected", [(0, 0), (1, 32), (32, 32), (33, 64)])
def test_pad32_pinned(value, expected):
    assert pad32(value) == expected


@pytest.mark.parametrize("value", [5, 31, 100, 1079, 1080, 1440, 4097])
def test_pad32_invariants(value):
    padded = pad32(value)
    assert padded % 32 == 0
    assert value <= padded < value + 32


def test_pad32_negative_rejected():
    with pytest.raises(ValueError):
        pad32(-1)


# ---------------------------------------------------------------- packing


def _gray(width, height):
    return (np.arange(width * height) * 7 % 256).astype(np.uint8).reshape(height, width)


def test_pack_shape_and_dtype():
    img = _gray(5, 3)
    out = pack_gray_to_nchw3_padded(img, 5, 3, pad32(5), pad32(3))
    assert out.shape == (1, 3, 32, 32)
    assert out.dtype == np.float32


def test_pack_channels_identical():
    img = _gray(10, 7)
    out = pack_gray_to_nchw3_padded(img, 10, 7, 32, 32)
    assert np.array_equal(out[0, 0], out[0, 1])
    assert np.array_equal(out[0, 1], out[0, 2])


def test_pack_image_region_preserved():
    img = _gray(10, 7)
    out = pack_gray_to_nchw3_padded(img, 10, 7, 32, 32)
    assert np.array_equal(out[0, 0, :7, :10], img.astype(np.float32))


def test_pack_right_padding_repeats_last_column():
    img = _gray(10, 7)
    out = pack_gray_to_nchw3_padded(img, 10, 7, 32, 32)
    for col in range(10, 32):
        assert np.array_equal(out[0, 0, :7, col], img[:, 9].astype(np.float32))


def test_pack_bottom_padding_repeats_last_row():
    img = _gray(10, 7)
    out = pack_gray_to_nchw3_padded(img, 10, 7, 32, 32)
    last_row = out[0, 0, 6]
    for row in range(7, 32):
        assert np.array_equal(out[0, 0, row], last_row)


def test_pack_flat_input_matches_2d():
    img = _gray(6, 4)
    flat = pack_gray_to_nchw3_padded(img.reshape(-1), 6, 4, 32, 32)
    two_d = pack_gray_to_nchw3_padded(img, 6, 4, 32, 32)
    assert np.array_equal(flat, two_d)


def test_pack_no_padding_needed():
    img = _gray(32, 32)
    out = pack_gray_to_nchw3_padded(img, 32, 32, 32, 32)
    assert np.array_equal(out[0, 2], img.astype(np.float32))


def test_pack_wrong_pixel_count():
    with pytest.raises(ValueError):
        pack_gray_to_nchw3_padded(np.zeros(10, np.uint8), 4, 4, 32, 32)


def test_pack_pad_smaller_than_image():
    with pytest.raises(ValueError):
        pack_gray_to_nchw3_padded(np.zeros(40 * 2, np.uint8), 40, 2, 32, 32)


# ---------------------------------------------------------------- output stride


@pytest.mark.parametrize(
    "shape", [(64, 96), (1, 64, 96), (1, 1, 64, 96)]
)
def test_output_stride_ranks(shape):
    assert output_stride(shape, 90, 60) == shape[-1]


@pytest.mark.parametrize("shape", [(96,), (1, 1, 1, 64, 96)])
def test_output_stride_bad_rank(shape):
    with pytest.raises(ValueError, match="rank"):
        output_stride(shape, 90, 60)


@pytest.mark.parametrize("shape", [(1, 1, 59, 96), (1, 1, 64, 89)])
def test_output_stride_too_small(shape):
    with pytest.raises(ValueError, match="too small"):
        output_stride(shape, 90, 60)


# ---------------------------------------------------------------- Q4.4 conversion


def test_q4_one_pixel_is_sixteen():
    out = np.ones((1, 1, 32, 32), np.float32)
    q4 = output_to_q4(out, 5, 3)
    assert q4.shape == (3, 5)
    assert q4.dtype == np.int16
    assert np.all(q4 == 16)


def test_q4_clamps_to_int16_range():
    out = np.zeros((4, 4), np.float32)
    out[0, 0] = 1.0e6
    out[0, 1] = -1.0e6
    q4 = output_to_q4(out, 4, 4)
    assert q4[0, 0] == 32767
    assert q4[0, 1] == -32768


def test_q4_crops_using_stride():
    out = np.full((1, 8, 16), -1.0, np.float32)
    out[0, :3, :5] = 2.0
    q4 = output_to_q4(out, 5, 3)
    assert q4.shape == (3, 5)
    assert np.all(q4 == 32)


def test_q4_truncates_toward_zero():
    out = np.zeros((2, 2), np.float32)
    out[0, 0] = 0.03
    out[0, 1] = -0.03
    q4 = output_to_q4(out, 2, 2)
    assert q4[0, 0] == 0
    assert q4[0, 1] == 0


def test_q4_roundtrip_of_exact_values():
    disp = np.arange(12, dtype=np.int16).reshape(3, 4) * 3
    out = np.zeros((1, 1, 32, 32), np.float32)
    out[0, 0, :3, :4] = disp.astype(np.float32) / 16.0
    assert np.array_equal(output_to_q4(out, 4, 3), disp)


def test_q4_output_too_small():
    with pytest.raises(ValueError):
        output_to_q4(np.zeros((2, 2), np.float32), 3, 3)