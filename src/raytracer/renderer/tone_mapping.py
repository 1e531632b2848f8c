# renderer/tone_mapping.py
import math

import numpy as np
from numba import njit


@njit(cache=False)
def tone_mapping_kernel(linear_image, output_image):
    height, width, channels = linear_image.shape
    for j in range(height):
        for i in range(width):
            for c in range(channels):
                x = linear_image[j, i, c]
                # Gamma 2; non-positive and NaN channels map to black
                g = math.sqrt(x) if x > 0.0 else 0.0
                if g > 0.999:
                    g = 0.999
                output_image[j, i, c] = int(256.0 * g)


def tone_map(linear: np.ndarray) -> np.ndarray:
    """
    Converts an (height, width, 3) array of linear colors to 8-bit pixels.

    Per channel: gamma correction, clamp to [0, 0.999], scale by 256 and
    truncate. Matches Color.to_rgb() exactly.
    """
    linear = np.ascontiguousarray(linear, dtype=np.float64)
    if linear.ndim != 3 or linear.shape[2] != 3:
        raise ValueError(f"expected an (height, width, 3) array, got shape {linear.shape}")
    output = np.empty(linear.shape, dtype=np.uint8)
    tone_mapping_kernel(linear, output)
    return output
