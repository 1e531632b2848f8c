# renderer/raytracer.py
import logging
import time
from typing import Callable, Iterator, Optional, Tuple

import numpy as np

from raytracer.camera.camera import Camera
from raytracer.geometry.hittable import Hittable
from raytracer.renderer.tone_mapping import tone_map

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class RenderCancelled(Exception):
    """Raised when a render is cancelled between scanlines."""

    def __init__(self, rows_completed: int):
        super().__init__(f"render cancelled after {rows_completed} scanlines")
        self.rows_completed = rows_completed


class Renderer:
    """
    Renders a scene through a camera one scanline at a time.

    Every scanline is an independent task with its own random generator,
    derived from the render seed and the row index. The scene and the camera
    are only read, so rows can be rendered in any order, or elsewhere, and
    still produce the same pixels for a given seed.
    """

    def __init__(self, camera: Camera, seed: Optional[int] = None):
        self.camera = camera
        self.width = camera.image_width
        self.height = camera.image_height
        self.seed_sequence = np.random.SeedSequence(seed)
        self.linear_buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        self.rows_completed = 0

    def row_seed(self, j: int) -> np.random.SeedSequence:
        return np.random.SeedSequence(self.seed_sequence.entropy, spawn_key=(j,))

    def scanline_tasks(self) -> Iterator[Tuple[int, np.random.SeedSequence]]:
        """
        Yields (row, seed) for every scanline, top to bottom.
        """
        for j in range(self.height):
            yield j, self.row_seed(j)

    def render_scanline(self, j: int, world: Hittable,
                        seed: Optional[np.random.SeedSequence] = None) -> np.ndarray:
        """
        Renders row j and returns its linear colors as a (width, 3) array.
        """
        rng = np.random.default_rng(seed if seed is not None else self.row_seed(j))
        colors = self.camera.render_scanline(j, world, rng)
        return np.array([tuple(c) for c in colors], dtype=np.float64).reshape(self.width, 3)

    def render(self, world: Hittable,
               should_cancel: Optional[Callable[[], bool]] = None,
               progress: Optional[ProgressCallback] = None) -> np.ndarray:
        """
        Renders the full frame and returns (height, width, 3) uint8 pixels.
        The averaged linear colors stay in linear_buffer.

        should_cancel is polled before each scanline; a True result raises
        RenderCancelled.
        """
        logger.info("Beginning render for %dx%d (%d samples, depth %d)",
                    self.width, self.height,
                    self.camera.config.samples_per_pixel, self.camera.config.max_depth)
        start = time.perf_counter()
        self.rows_completed = 0

        for j, seed in self.scanline_tasks():
            if should_cancel is not None and should_cancel():
                logger.warning("Render cancelled with %d scanlines remaining", self.height - j)
                raise RenderCancelled(self.rows_completed)
            logger.debug("Scanlines remaining: %d", self.height - j)
            self.linear_buffer[j] = self.render_scanline(j, world, seed)
            self.rows_completed = j + 1
            if progress is not None:
                progress(self.rows_completed, self.height)

        logger.info("Finished render in %.2fs", time.perf_counter() - start)
        return tone_map(self.linear_buffer)
