# agcamtools

Small building blocks for stereo camera tooling:

- **`agcamtools.stereo`**: names and parameters for the stereo disparity
  backends. `sgbm` is classic semi-global block matching and `onnx` is a neural
  model; `igev`, `rt-igev` and `foundation` are aliases for `onnx`. The module
  also converts Q4.4 fixed-point disparity to depth.
- **`agcamtools.onnx_io`**: prepares grayscale images for ONNX stereo networks
  and converts their output back. Images are padded to a multiple of 32 and
  packed as three-channel NCHW float32 tensors. Float disparity output is
  cropped and converted to Q4.4 `int16`.
- **`agcamtools.font`**: a 5×7 bitmap font for drawing overlay text onto numpy
  image arrays.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Stereo backends and depth

```python
from agcamtools.stereo import (
    StereoBackend, SgbmParams, OnnxParams, parse_backend,
    default_model_path, backend_name, disparity_to_depth,
)

backend = parse_backend("rt-igev")          # StereoBackend.ONNX
print(backend_name(backend))                # "onnx"
print(default_model_path("rt-igev"))        # "models/rt_igev_plusplus.onnx"
print(default_model_path("sgbm"))           # None

params = SgbmParams()                        # num_disparities=128, block_size=5, mode=2, ...
p1, p2 = params.resolved_penalties()         # zero penalties derived from block size: (200, 800)

onnx = OnnxParams(model_path="models/igev_plusplus.onnx")

# Q4.4 disparity 160 -> 10 px; depth comes out in the baseline's units
print(disparity_to_depth(160, 875.0, 4.07))  # 356.125
print(disparity_to_depth(0, 875.0, 4.07))    # 0.0 (non-positive disparity is invalid)
```

`parse_backend` raises `ValueError` for an unknown name.

## Preparing ONNX inputs and reading outputs

```python
import numpy as np
from agcamtools.onnx_io import (
    pad32, pack_gray_to_nchw3_padded, output_stride, output_to_q4,
)

gray = np.zeros((1080, 1440), dtype=np.uint8)
pad_w, pad_h = pad32(1440), pad32(1080)      # 1440, 1088
tensor = pack_gray_to_nchw3_padded(gray, 1440, 1080, pad_w, pad_h)
# tensor.shape == (1, 3, 1088, 1440), float32; the last column and last row
# are repeated into the padding

# For a float disparity output in pixels, of rank 2 to 4:
# output_stride(output.shape, 1440, 1080) checks the shape and returns its width
# disparity_q4 = output_to_q4(output, 1440, 1080)  # int16, shape (1080, 1440)
```

`output_to_q4` multiplies by 16, clamps to the `int16` range and truncates
toward zero. Bad sizes, pixel counts or output shapes raise `ValueError`.

## Overlay text

```python
import numpy as np
from agcamtools.font import render_text, iter_glyph_rects, font_index

canvas = np.zeros((40, 200, 3), dtype=np.uint8)
render_text(canvas, "fps: 30.0", 4, 4, 2, (255, 255, 0))
```

`render_text` draws in place, clips at the canvas edges and returns the canvas.
`iter_glyph_rects` yields the `(x, y, width, height)` squares that would be
filled. `font_index` and `glyph_rows` look up single characters. Letters are
case-insensitive. A character the font lacks is skipped but still takes up a
glyph's width, so the text after it stays in place.

## What this package does not do

It does not capture from cameras, and it has no command-line program. It does
not compute disparity itself either: there is no block matcher, and it does not
load or run ONNX models. `SgbmParams` and `OnnxParams` only hold settings, and
`onnx_io` only prepares tensors and converts outputs for whatever runtime you
use.