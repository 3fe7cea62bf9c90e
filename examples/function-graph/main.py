"""
funcgrid Function Graph
Interactive pygame host for the three funcgrid variants: curve, height field and UV surface.

Controls:
  1/2/3        Curve / height field / UV surface
  F            Next function
  Space        Toggle animation
  C            Toggle cycling time
  Up/Down      Resolution +/- 10 (rebuilds the grid)
  Left/Right   Range -/+ 1 (rebuilds the grid)
  D            Push a random height-field point sideways
  Esc          Quit
"""

import dataclasses
import logging
import math
import random
import sys

import pygame

from funcgrid import (
    ConfigurationError,
    GridConfig,
    GridEngine,
    GridKind,
    HeightGrid,
    axis_markers,
)
from funcgrid.log import setup_logging

# --- Configuration ---
WIDTH, HEIGHT = 1024, 768
FPS = 60
TITLE = "funcgrid Function Graph"

PIXELS_PER_UNIT = 150.0
YAW_SPEED = 0.25  # radians per second, 2D grids only
PITCH = 0.45

RESOLUTION_STEP = 10
RANGE_STEP = 1.0

BG_COLOR = (26, 26, 46)
HUD_COLOR = (200, 200, 220)
MARKER_COLOR = (90, 90, 120)
MAJOR_MARKER_COLOR = (150, 150, 180)

KEY_KINDS = {
    pygame.K_1: GridKind.CURVE,
    pygame.K_2: GridKind.HEIGHT,
    pygame.K_3: GridKind.SURFACE,
}

logger = logging.getLogger("funcgrid.examples.function_graph")


def project(position, yaw: float) -> tuple[int, int]:
    """Rotate around Y, tilt around X, then drop Z."""
    x, y, z = position
    cos_yaw, sin_yaw = math.cos(yaw), math.sin(yaw)
    x, z = x * cos_yaw - z * sin_yaw, x * sin_yaw + z * cos_yaw
    y = y * math.cos(PITCH) - z * math.sin(PITCH)
    return (
        int(WIDTH / 2 + x * PIXELS_PER_UNIT),
        int(HEIGHT / 2 - y * PIXELS_PER_UNIT),
    )


def point_color(position, span: float) -> tuple[int, int, int]:
    """Colour by position relative to the grid range, clamped for display."""
    half = span / 2.0
    channels = []
    for value in position:
        if not math.isfinite(value):
            value = half if value > 0 else -half
        channels.append(int(255 * min(max(value / span + 0.5, 0.0), 1.0)))
    r, g, b = channels
    return (r, g, b)


def draw_markers(screen, markers) -> None:
    for marker in markers:
        color = MAJOR_MARKER_COLOR if marker.major else MARKER_COLOR
        x, y, _ = marker.position
        sx, sy, _ = marker.scale
        rect = pygame.Rect(0, 0, max(1, int(sx * PIXELS_PER_UNIT)), max(1, int(sy * PIXELS_PER_UNIT)))
        rect.center = (int(WIDTH / 2 + x * PIXELS_PER_UNIT), int(HEIGHT / 2 - y * PIXELS_PER_UNIT))
        pygame.draw.rect(screen, color, rect)


def make_engine(kind: GridKind, config: GridConfig) -> GridEngine:
    engine = GridEngine(kind, config, strict=False)
    engine.on_rebuild(
        lambda grid: logger.info("Bound %d primitives at scale %.3f", len(grid), grid.point_scale)
    )
    engine.create_grid()
    return engine


def main():
    setup_logging(logging.INFO)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    config = GridConfig(resolution=40, span=2.0, cycle=False, cycle_range=2.0)
    engine = make_engine(GridKind.CURVE, config)
    markers = axis_markers()
    yaw = 0.0
    running = True

    while running:
        dt = pg_clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                try:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in KEY_KINDS:
                        config = dataclasses.replace(engine.config, function=None)
                        engine = make_engine(KEY_KINDS[event.key], config)
                    elif event.key == pygame.K_f:
                        engine.next_function()
                    elif event.key == pygame.K_SPACE:
                        engine.set_animate(not engine.config.animate)
                    elif event.key == pygame.K_c:
                        engine.set_cycle(not engine.config.cycle)
                    elif event.key == pygame.K_UP:
                        engine.set_resolution(engine.config.resolution + RESOLUTION_STEP)
                    elif event.key == pygame.K_DOWN:
                        engine.set_resolution(engine.config.resolution - RESOLUTION_STEP)
                    elif event.key == pygame.K_RIGHT:
                        engine.set_range(engine.config.span + RANGE_STEP)
                    elif event.key == pygame.K_LEFT:
                        engine.set_range(engine.config.span - RANGE_STEP)
                    elif event.key == pygame.K_d and isinstance(engine.grid, HeightGrid):
                        point = random.choice(engine.grid.points())
                        x, _, z = point.position
                        engine.grid.displace(point.identity, x + 0.3, z + 0.3)
                except ConfigurationError as exc:
                    logger.warning("%s", exc)

        if engine.rebuild_required:
            engine.create_grid()

        # --- Update ---
        engine.tick(dt)
        if engine.kind is not GridKind.CURVE and engine.config.animate:
            yaw += YAW_SPEED * dt

        # --- Draw ---
        screen.fill(BG_COLOR)
        view_yaw = 0.0 if engine.kind is GridKind.CURVE else yaw
        if engine.kind is GridKind.CURVE:
            draw_markers(screen, markers)

        grid = engine.grid
        size = max(2, int(grid.point_scale * PIXELS_PER_UNIT))
        for point in grid:
            if not all(math.isfinite(v) for v in point.position):
                continue
            sx, sy = project(point.position, view_yaw)
            if -size <= sx <= WIDTH + size and -size <= sy <= HEIGHT + size:
                rect = pygame.Rect(0, 0, size, size)
                rect.center = (sx, sy)
                pygame.draw.rect(screen, point_color(point.position, grid.span), rect)

        # --- HUD ---
        cfg = engine.config
        mode = f"cycle +/-{cfg.cycle_range:g}" if cfg.cycle else "free-running"
        paused = "" if cfg.animate else "  [PAUSED]"
        hud_lines = [
            f"{engine.kind.value}: {cfg.function.value}   N={cfg.resolution}   R={cfg.span:g}   "
            f"t={engine.clock.time:.2f} ({mode})   FPS: {pg_clock.get_fps():.0f}{paused}",
            "1/2/3=Variant  F=Function  Space=Animate  C=Cycle  Up/Down=N  Left/Right=R  D=Push  Esc=Quit",
        ]
        for i, line in enumerate(hud_lines):
            surf = font.render(line, True, HUD_COLOR)
            screen.blit(surf, (10, 8 + i * 20))

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
