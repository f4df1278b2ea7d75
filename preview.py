#!/usr/bin/env python3
"""Preview window for square Voronoi diagrams.

Shows a diagram scaled up by a whole-number factor with nearest-neighbour
sampling, so each region stays a crisp block of color.

Usage:
    python preview.py output/forest

Controls:
    ESC / close: Quit
    S: Save a screenshot of the scaled view next to the diagram
"""

import argparse
from datetime import datetime
from pathlib import Path

import numpy as np
import pygame

from diagram_loader import load_diagram

BACKDROP_COLOR = (30, 30, 35)
SCREEN_MARGIN = 100
MAX_WINDOW = (1280, 960)


def diagram_to_surface(pixels: np.ndarray) -> pygame.Surface:
    """Wrap an RGBA pixel buffer in a pygame surface.

    Args:
        pixels: HxWx4 uint8 array.

    Returns:
        Surface of size (W, H) holding a copy of the pixels.
    """
    height, width = pixels.shape[:2]
    data = np.ascontiguousarray(pixels, dtype=np.uint8).tobytes()
    return pygame.image.frombuffer(data, (width, height), "RGBA").copy()


def fit_scale(size: tuple[int, int], screen_size: tuple[int, int]) -> int:
    """Largest whole-number scale that fits the diagram on screen.

    Args:
        size: Diagram (width, height).
        screen_size: Available (width, height).

    Returns:
        Scale factor, at least 1.
    """
    width, height = size
    if width <= 0 or height <= 0:
        return 1
    max_w = screen_size[0] - SCREEN_MARGIN
    max_h = screen_size[1] - SCREEN_MARGIN
    return max(1, min(max_w // width, max_h // height))


def save_screenshot(surface: pygame.Surface, directory: Path) -> Path | None:
    """Save the scaled view as a timestamped PNG.

    Returns:
        Path to the saved image, or None if saving failed.
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filepath = directory / f"preview_{timestamp}.png"
    try:
        pygame.image.save(surface, str(filepath))
        return filepath
    except pygame.error as e:
        print(f"Failed to save screenshot: {e}")
        return None


def run_preview(
    pixels: np.ndarray,
    title: str = "Square Voronoi",
    screenshot_dir: Path | None = None,
) -> None:
    """Open a window showing the diagram until the user closes it.

    Args:
        pixels: HxWx4 uint8 RGBA buffer.
        title: Window caption.
        screenshot_dir: Where S saves screenshots. Defaults to the current
            directory.
    """
    height, width = pixels.shape[:2]
    if width == 0 or height == 0:
        print("Nothing to preview: diagram is empty")
        return

    pygame.init()
    info = pygame.display.Info()
    available = (
        min(info.current_w, MAX_WINDOW[0]) if info.current_w > 0 else MAX_WINDOW[0],
        min(info.current_h, MAX_WINDOW[1]) if info.current_h > 0 else MAX_WINDOW[1],
    )
    scale = fit_scale((width, height), available)
    view_size = (width * scale, height * scale)

    screen = pygame.display.set_mode(
        (view_size[0] + SCREEN_MARGIN // 2, view_size[1] + SCREEN_MARGIN // 2)
    )
    pygame.display.set_caption(title)

    # Point sampling keeps pixel edges sharp
    view = pygame.transform.scale(diagram_to_surface(pixels), view_size)
    view_rect = view.get_rect(center=screen.get_rect().center)

    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_s:
                    saved = save_screenshot(view, screenshot_dir or Path.cwd())
                    if saved:
                        print(f"Saved screenshot to {saved}")

        screen.fill(BACKDROP_COLOR)
        screen.blit(view, view_rect)
        pygame.display.flip()
        clock.tick(30)

    pygame.quit()


def main() -> None:
    """Preview an exported diagram directory."""
    parser = argparse.ArgumentParser(description="Preview an exported square Voronoi diagram")
    parser.add_argument(
        "diagram_dir",
        type=Path,
        help="Directory written by generate_diagram.py",
    )
    args = parser.parse_args()

    diagram = load_diagram(args.diagram_dir)
    seed = diagram.metadata.get("seed", "")
    run_preview(
        diagram.pixels,
        title=f"Square Voronoi - {seed}",
        screenshot_dir=args.diagram_dir,
    )


if __name__ == "__main__":
    main()
