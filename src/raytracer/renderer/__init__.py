from raytracer.renderer.image_io import format_ppm, save_image, write_ppm
from raytracer.renderer.raytracer import RenderCancelled, Renderer
from raytracer.renderer.tone_mapping import tone_map

# The pygame preview is imported on demand (raytracer.renderer.preview).

__all__ = [
    "Renderer",
    "RenderCancelled",
    "tone_map",
    "format_ppm",
    "write_ppm",
    "save_image",
]
