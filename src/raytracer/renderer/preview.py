# renderer/preview.py
import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)


def image_to_surface(pixels: np.ndarray) -> pygame.Surface:
    """
    Converts (height, width, 3) uint8 pixels to a pygame surface.
    """
    # surfarray indexes [x, y]; the frame is stored [row, column].
    return pygame.surfarray.make_surface(np.transpose(pixels, (1, 0, 2)))


def show_image(pixels: np.ndarray, title: str = "Ray Tracer", scale: int = 1):
    """
    Opens a window showing the frame and blocks until it is closed or
    Escape is pressed.
    """
    height, width, _ = pixels.shape
    window_size = (width * scale, height * scale)

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(title)

        surf = image_to_surface(pixels)
        if scale != 1:
            surf = pygame.transform.scale(surf, window_size)

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surf, (0, 0))
            pygame.display.flip()
            clock.tick(30)
        logger.debug("Preview window closed")
    finally:
        pygame.quit()
