# main.py
import argparse
import logging
import sys

import numpy as np
import pygame
from PIL import Image

from camera.camera import Camera
from core.config import BACKENDS, QUALITY_LEVELS, RenderConfig
from core.logging_config import setup_logging
from geometry.world import SceneError
from renderer.raytracer import Renderer
from scene.demo import create_demo_world
from scene.loader import load_scene

logger = logging.getLogger("mirror_tracer")

def parse_vector_arg(text: str) -> tuple:
    parts = text.replace(",", " ").split()
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected three numbers, got {text!r}")
    try:
        return tuple(float(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid vector {text!r}") from None

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mirror-tracer",
        description="Render spheres and triangles with matte, glossy and mirror materials.",
    )
    parser.add_argument("--res", "--resolution", dest="resolution", type=int,
                        help="pixels per side of the square output image (default 512)")
    parser.add_argument("--ref", "--reflections", dest="reflection_depth", type=int,
                        help="maximum mirror bounces per pixel (default 10)")
    parser.add_argument("-f", "--file", "--input", dest="scene_file",
                        help="scene file to render; the built-in demo scene if omitted")
    parser.add_argument("-o", "--output", default="test.png",
                        help="output image path (default test.png)")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS),
                        help="preset resolution and reflection depth")
    parser.add_argument("--backend", choices=BACKENDS, default="numba")
    parser.add_argument("--light", type=parse_vector_arg, metavar="'X Y Z'",
                        help="light position (default '-3 8 -6')")
    parser.add_argument("--preview", action="store_true",
                        help="show the finished image in a window")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser

def config_from_args(args) -> RenderConfig:
    overrides = {"backend": args.backend}
    if args.resolution is not None:
        overrides["resolution"] = args.resolution
    if args.reflection_depth is not None:
        overrides["reflection_depth"] = args.reflection_depth
    if args.light is not None:
        overrides["light_position"] = args.light
    if args.quality:
        return RenderConfig.from_quality(args.quality, **overrides)
    return RenderConfig(**overrides)

def save_image(image: np.ndarray, path: str) -> None:
    Image.fromarray(image).save(path)
    logger.info("Saved %s", path)

def show_preview(image: np.ndarray, title: str = "mirror-tracer") -> None:
    """
    Display the image in a pygame window until it is closed or Escape is pressed.
    """
    pygame.init()
    try:
        height, width = image.shape[:2]
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # pygame surfaces are indexed [x, y]
        surface = pygame.surfarray.make_surface(image.swapaxes(0, 1))
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "INFO")

    try:
        config = config_from_args(args)
        if args.scene_file:
            world = load_scene(args.scene_file)
        else:
            logger.info("No scene file given, rendering the demo scene")
            world = create_demo_world()
    except (SceneError, ValueError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1

    logger.info("Rendering %d primitives at %dx%d, %d reflections",
                len(world), config.resolution, config.resolution, config.reflection_depth)
    image = Renderer(config).render(world, Camera.from_config(config))
    try:
        save_image(image, args.output)
    except OSError as e:
        logger.error("Could not write %s: %s", args.output, e)
        return 1

    if args.preview:
        show_preview(image)

    logger.info("Done!")
    return 0

if __name__ == "__main__":
    sys.exit(main())
