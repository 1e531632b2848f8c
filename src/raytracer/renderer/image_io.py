# renderer/image_io.py
import logging
import os
from typing import TextIO, Union

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _check_pixels(pixels: np.ndarray) -> np.ndarray:
    pixels = np.asarray(pixels)
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"expected an (height, width, 3) array, got shape {pixels.shape}")
    if pixels.dtype != np.uint8:
        raise ValueError(f"expected uint8 pixels, got {pixels.dtype}")
    return pixels


def format_ppm(pixels: np.ndarray) -> str:
    """
    Formats pixels as a plain PPM (P3) document: a header followed by one
    "R G B" line per pixel, rows top to bottom, pixels left to right.
    """
    pixels = _check_pixels(pixels)
    height, width, _ = pixels.shape
    lines = [f"P3\n{width} {height}\n255\n"]
    lines.extend(f"{r} {g} {b}\n" for r, g, b in pixels.reshape(-1, 3).tolist())
    return "".join(lines)


def write_ppm(pixels: np.ndarray, target: Union[PathLike, TextIO]):
    """
    Writes pixels in plain PPM format to a path or an open text stream.
    """
    document = format_ppm(pixels)
    if hasattr(target, "write"):
        target.write(document)
        return
    with open(target, "w", newline="\n") as f:
        f.write(document)


def save_image(pixels: np.ndarray, path: PathLike):
    """
    Saves pixels to path. ".ppm" files are written as plain PPM; any other
    extension is handed to Pillow.
    """
    if str(path).lower().endswith(".ppm"):
        write_ppm(pixels, path)
    else:
        Image.fromarray(_check_pixels(pixels)).save(path)
    logger.info("Finished writing to %s", path)

