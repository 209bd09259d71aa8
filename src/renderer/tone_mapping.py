# renderer/tone_mapping.py
import numpy as np

def to_rgb8(linear: np.ndarray) -> np.ndarray:
    """
    Convert a linear color buffer to 8-bit channels. Values are clamped to
    [0, 1] before scaling so bright highlights saturate instead of wrapping,
    then truncated.
    """
    return (np.clip(linear, 0.0, 1.0) * 255.0).astype(np.uint8)
