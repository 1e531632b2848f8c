"""Command line entry point.

Usage:
    raytracer [options]
    python -m raytracer [options]

Example:
    raytracer --scene materials --width 400 --samples 50 --output out/glass.png
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from raytracer.camera.camera import Camera
from raytracer.config import QUALITY_LEVELS, CameraConfig, ConfigError
from raytracer.core.utils import make_rng
from raytracer.renderer.image_io import save_image
from raytracer.renderer.raytracer import Renderer
from raytracer.scenes import SCENES, build_scene

logger = logging.getLogger("raytracer")

DEFAULT_FILENAME = "image.ppm"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="raytracer",
        description="Render a scene of spheres with Monte Carlo ray tracing.",
    )
    parser.add_argument("--scene", choices=sorted(SCENES), default="two_spheres",
                        help="Scene to render (default: two_spheres)")
    parser.add_argument("--width", type=int, default=None,
                        help="Image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, default=None,
                        help="Image width over height (default: set by the scene)")
    parser.add_argument("--samples", type=int, default=None,
                        help="Samples per pixel")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Maximum number of ray bounces")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=None,
                        help="Quality preset; --samples and --max-depth override it")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for a reproducible render")
    parser.add_argument("--output", type=str, default=f"output/{DEFAULT_FILENAME}",
                        help="Output file, or a directory to hold image.ppm "
                             f"(default: output/{DEFAULT_FILENAME})")
    parser.add_argument("--preview", action="store_true",
                        help="Show the finished image in a window")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true",
                           help="Log per-scanline progress")
    verbosity.add_argument("--quiet", "-q", action="store_true",
                           help="Only log warnings and errors")
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False, quiet: bool = False):
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def resolve_output_path(output: str) -> Path:
    """
    Returns the file to write. A directory (existing, or given with a
    trailing slash or without an extension) receives image.ppm.
    """
    path = Path(output)
    if output.endswith(("/", "\\")) or path.is_dir() or not path.suffix:
        path = path / DEFAULT_FILENAME
    return path


def build_config(args: argparse.Namespace, scene_settings: dict) -> CameraConfig:
    config = CameraConfig(**scene_settings)
    if args.width is not None:
        config = config.replace(image_width=args.width)
    if args.aspect_ratio is not None:
        config = config.replace(aspect_ratio=args.aspect_ratio)
    if args.quality is not None:
        config = config.with_quality(args.quality)
    if args.samples is not None:
        config = config.replace(samples_per_pixel=args.samples)
    if args.max_depth is not None:
        config = config.replace(max_depth=args.max_depth)
    return config.validate()


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        world, scene_settings = build_scene(args.scene, make_rng(args.seed))
        camera = Camera(build_config(args, scene_settings))
        renderer = Renderer(camera, seed=args.seed)
        pixels = renderer.render(world)

        output_path = resolve_output_path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        save_image(pixels, output_path)
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 1
    except OSError as e:
        logger.error("Failed writing image: %s", e)
        return 1

    if args.preview:
        from raytracer.renderer.preview import show_image
        show_image(pixels, title=f"raytracer: {args.scene}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
