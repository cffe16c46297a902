"""Stereo backend parameters, disparity-to-depth, ONNX tensor packing and a bitmap overlay font."""

__version__ = "0.1.0"
__all__ = ["font", "stereo", "onnx_io"]