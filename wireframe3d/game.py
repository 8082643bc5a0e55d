"""The interactive viewer: game state and the window loop."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Collection, Optional, Sequence

from .geometry import Matrix, Mesh, example_cube, rotation_x, rotation_z
from .objfile import ObjFormatError, load_obj
from .raster import fill_triangle
from .render import Camera, RenderSettings, ScreenTriangle, render_mesh

DEFAULT_MODEL = "SpaceShip.obj"


@dataclass
class Game:
    """A mesh viewed through a movable camera."""

    mesh: Mesh
    settings: RenderSettings = field(default_factory=RenderSettings)
    camera: Camera = field(default_factory=Camera)
    spin_rate: float = 0.0
    theta: float = 0.0

    @property
    def world(self) -> Matrix:
        return rotation_x(self.theta) @ rotation_z(self.theta)

    def update(self, keys: Collection[str], delta: float) -> None:
        """Advance the model spin and move the camera for ``delta`` ms."""
        self.theta += self.spin_rate * delta
        self.camera.move(keys, delta)

    def frame(self) -> list[ScreenTriangle]:
        """The triangles to draw this frame, back to front."""
        return render_mesh(self.mesh, self.camera, self.settings, self.world)


def _draw(surface, triangles: Sequence[ScreenTriangle]) -> None:
    import pygame

    surface.fill((0, 0, 0))
    for item in triangles:
        level = min(item.shade, 255)
        a, b, c = item.triangle
        for span in fill_triangle(a.x, a.y, b.x, b.y, c.x, c.y):
            pygame.draw.line(
                surface, (level, level, level), (span.x_start, span.y), (span.x_end, span.y)
            )
        for start, end in ((a, b), (b, c), (c, a)):
            pygame.draw.line(surface, (255, 0, 0), (start.x, start.y), (end.x, end.y))


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="wireframe3d", description="View an OBJ mesh.")
    parser.add_argument("model", nargs="?", default=DEFAULT_MODEL, help="OBJ file to show")
    parser.add_argument("--cube", action="store_true", help="show the built-in cube instead")
    parser.add_argument("--width", type=int, default=1920)
    parser.add_argument("--height", type=int, default=1080)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.cube:
        mesh = example_cube()
    else:
        try:
            mesh = load_obj(args.model)
        except (OSError, ObjFormatError) as error:
            print(f"wireframe3d: cannot load {args.model}: {error}", file=sys.stderr)
            return 1

    game = Game(mesh, RenderSettings(width=args.width, height=args.height))

    import pygame

    key_codes = {
        "w": pygame.K_w,
        "s": pygame.K_s,
        "a": pygame.K_a,
        "d": pygame.K_d,
        "q": pygame.K_q,
        "e": pygame.K_e,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("wireframe3d")
        last = pygame.time.get_ticks()
        running = True
        while running:
            now = pygame.time.get_ticks()
            delta, last = now - last, now
            pressed = pygame.key.get_pressed()
            keys = {name for name, code in key_codes.items() if pressed[code]}
            game.update(keys, delta)
            _draw(screen, game.frame())
            pygame.display.flip()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())