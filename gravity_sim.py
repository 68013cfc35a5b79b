#!/usr/bin/env python3
"""
Gravity Simulator application entry point and viewport.

What this module does
- Builds a scenario from the preset catalog and wraps it in a SimulationController.
- Runs a Pygame loop on the main thread: input handling, one controller advance
  per frame, then drawing. The model step always completes before drawing, so
  the renderer never reads a half-updated state.

Controls
- Mouse wheel: zoom
- + / - (keypad or main row): faster / slower simulated time
- Tab / Shift+Tab: follow next / previous body
- Space: pause / resume
- Escape or closing the window: quit

Units and conventions
- SI units throughout: meters [m], kilograms [kg], seconds [s]. Camera stores meters-per-pixel.
- Body display tags are RGB tuples in 0..255.

Running
1) Install dependencies: `pip install pygame`
2) Run this module: `python gravity_sim.py --preset solar-system`
"""

import argparse
import logging
import sys

import pygame
from pygame import gfxdraw

from gravsim.camera import Camera2D
from gravsim.constants import (
    BACKGROUND_COLOR,
    DEFAULT_BODY_COLOR,
    DEFAULT_TIME_SCALE,
    FPS,
    FRAME_DURATION,
    HUD_COLOR,
    MAX_DELTA_TIME,
    SAFE_COORD_LIMIT,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from gravsim.controller import SimulationController
from gravsim.errors import DegenerateConfigurationError
from gravsim.presets import PRESETS, load_preset

logger = logging.getLogger("gravity_sim")


class PygameRenderer:
    """
    Pygame loop: draws bodies and the HUD, handles zoom, time scale and anchor keys.
    """
    def __init__(self, sim: SimulationController):
        self.sim = sim
        self.camera = Camera2D(center=(0.0, 0.0))
        self.surface = None
        self.clock = None
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption("Gravity Simulator")
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT), pygame.RESIZABLE)
        self.camera.set_viewport_size(VIEW_WIDTH, VIEW_HEIGHT)
        self.clock = pygame.time.Clock()

        try:
            while self.running:
                self.handle_events()
                # fixed frame time: a stalled frame slows the simulation down
                self.sim.advance(FRAME_DURATION)
                self.draw()

                self.clock.tick(FPS)
        finally:
            pygame.quit()

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.camera.set_viewport_size(event.w, event.h)

            elif event.type == pygame.MOUSEWHEEL:
                self.camera.zoom(event.y * 10)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_TAB:
                    self.sim.change_anchor(forward=not event.mod & pygame.KMOD_SHIFT)
                elif event.key in (pygame.K_KP_PLUS, pygame.K_PLUS, pygame.K_EQUALS):
                    self.sim.speed_up()
                elif event.key in (pygame.K_KP_MINUS, pygame.K_MINUS):
                    self.sim.slow_down()
                elif event.key == pygame.K_SPACE:
                    self.sim.toggle_pause()

    def project(self, pos, anchor_position):
        # non-finite state (degenerate configuration) is simply not drawn
        try:
            return _safe_point(self.camera.world_to_screen(pos, anchor_position))
        except (ValueError, OverflowError):
            return None

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        bodies = self.sim.bodies
        anchor = self.sim.anchor
        anchor_position = anchor.position if anchor is not None else None

        if bodies:
            minimal_radius = min(b.radius for b in bodies)
            for b in bodies:
                screen_pos = self.project(b.position, anchor_position)
                if screen_pos is None:
                    continue
                vis_r = self.camera.display_radius(b.radius, minimal_radius, b.visual_scale)
                vis_r = int(min(vis_r, SAFE_COORD_LIMIT))
                color = b.display_tag if b.display_tag is not None else DEFAULT_BODY_COLOR
                gfxdraw.filled_circle(surf, screen_pos[0], screen_pos[1], vis_r, color)
                gfxdraw.aacircle(surf, screen_pos[0], screen_pos[1], vis_r, color)

        days_per_second = self.sim.time_scale / 86400.0
        state = "Paused" if self.sim.paused else "Playing"
        draw_text(surf, "Wheel: zoom | +/-: time scale | Tab/Shift+Tab: anchor | Space: Pause/Play", 10, 10, HUD_COLOR)
        draw_text(surf, f"Speed: {self.sim.time_scale:.0f}x ({days_per_second:.1f} days/s)  "
                        f"Anchor: {anchor if anchor is not None else '-'}  [{state}]", 10, 30, HUD_COLOR)

        pygame.display.flip()

_cached_font = None

def draw_text(surface, text, x, y, color):
    global _cached_font
    if _cached_font is None:
        if not pygame.font.get_init():
            pygame.font.init()
        _cached_font = pygame.font.SysFont("consolas", 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))

def _safe_point(pt):
    x, y = pt
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None

# ============================================================
# Application Entry
# ============================================================

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="2D Newtonian gravity simulator")
    parser.add_argument("--preset", choices=sorted(PRESETS), default="solar-system",
                        help="scenario to load")
    parser.add_argument("--time-scale", type=float, default=DEFAULT_TIME_SCALE,
                        help="simulated seconds per real second")
    parser.add_argument("--max-step", type=float, default=MAX_DELTA_TIME,
                        help="longest single integration step, in simulated seconds")
    parser.add_argument("--strict", action="store_true",
                        help="fail on degenerate configurations instead of propagating NaN")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    model = load_preset(args.preset, strict=args.strict)
    sim = SimulationController(model, time_scale=args.time_scale, max_delta_time=args.max_step)
    logger.info("loaded %s: %s", args.preset, ", ".join(str(b) for b in model.bodies))

    renderer = PygameRenderer(sim)
    try:
        renderer.run()
    except DegenerateConfigurationError as exc:
        logger.error("simulation stopped: %s", exc)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
