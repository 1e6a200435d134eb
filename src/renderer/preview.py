# renderer/preview.py
from typing import Optional, Tuple
import numpy as np
import pygame

def show_image(image: np.ndarray, window_size: Optional[Tuple[int, int]] = None,
               max_frames: Optional[int] = None, caption: str = "Ray Tracer"):
    """
    Shows a rendered (width x height x 3) array in a pygame window until the
    window is closed, or for at most `max_frames` frames.
    Returns the number of frames drawn.
    """
    render_width, render_height = image.shape[0], image.shape[1]
    if window_size is None:
        window_size = (render_width, render_height)

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption(caption)

        # surfarray uses the same [x, y] indexing as the renderer
        surf = pygame.surfarray.make_surface(image)
        surf = pygame.transform.scale(surf, window_size)

        clock = pygame.time.Clock()
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

            screen.blit(surf, (0, 0))
            pygame.display.flip()
            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False
            clock.tick(30)
        return frames
    finally:
        pygame.quit()
