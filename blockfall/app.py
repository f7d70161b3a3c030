"""The game world and the window that shows it."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from blockfall.block import BLOCK_SIZE
from blockfall.control import Key, rotate_active_piece, toggle_game_state
from blockfall.debug import DEBUG_LINE_COLOR, DebugLines
from blockfall.game import GameState
from blockfall.gravity import Gravity
from blockfall.grid import Grid
from blockfall.piece import Piece, shape_t, spawn_piece

log = logging.getLogger(__name__)

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
_COLORS = {"red": (255, 0, 0)}


@dataclass
class World:
    """Everything the game keeps track of between frames."""

    grid: Grid
    piece: Piece | None
    block_size: float = BLOCK_SIZE
    game_state: GameState = field(default_factory=GameState)
    gravity: Gravity = field(default_factory=Gravity)
    debug: DebugLines = field(default_factory=DebugLines)

    @classmethod
    def create(cls, window_width: float, block_size: float = BLOCK_SIZE) -> World:
        """A fresh world with a centred grid and a T piece at the spawn point."""
        log.info("Spawning T")
        return cls(
            grid=Grid.centered(window_width, block_size),
            piece=spawn_piece(shape_t()),
            block_size=block_size,
        )

    def handle_key(self, key: Key) -> None:
        """React to a key having just been pressed."""
        if key is Key.SPACE:
            rotate_active_piece(self.piece, self.grid, self.block_size)
        elif key is Key.ENTER:
            toggle_game_state(self.game_state)
        elif key is Key.ARROW_DOWN:
            self.gravity.increase()
        elif key is Key.F1:
            self.debug.toggle()

    def update(self, dt: float) -> bool:
        """Let ``dt`` seconds pass; returns whether the piece moved."""
        return self.gravity.apply(self.piece, self.grid, self.game_state, dt)


def _draw(screen, world: World) -> None:
    import pygame

    # Canvas y grows upwards with the origin at the window's top-left corner.
    def to_screen(x: float, y: float) -> tuple[int, int]:
        return round(x), round(-y)

    screen.fill((0, 0, 0))
    left, top, width, height = world.grid.outline(world.block_size)
    pygame.draw.rect(
        screen, (255, 255, 255), pygame.Rect(*to_screen(left, top), round(width), round(height)), 2
    )
    for start, end in world.debug.lines(world.grid, world.block_size):
        pygame.draw.line(screen, DEBUG_LINE_COLOR, to_screen(*start), to_screen(*end))
    if world.piece is not None:
        size = round(world.block_size)
        fill = _COLORS.get(world.piece.color, (255, 0, 0))
        for x, y, _ in world.piece.block_positions(world.grid, world.block_size):
            rect = pygame.Rect(*to_screen(x, y), size, size)
            pygame.draw.rect(screen, fill, rect)
            pygame.draw.rect(screen, (0, 0, 0), rect, 1)
    pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="blockfall", description="A falling-block game.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--fps", type=int, default=60)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    import pygame

    keymap = {
        pygame.K_SPACE: Key.SPACE,
        pygame.K_RETURN: Key.ENTER,
        pygame.K_DOWN: Key.ARROW_DOWN,
        pygame.K_F1: Key.F1,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("blockfall")
        clock = pygame.time.Clock()
        world = World.create(args.width)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in keymap:
                    world.handle_key(keymap[event.key])
            world.update(clock.tick(args.fps) / 1000.0)
            _draw(screen, world)
    finally:
        pygame.quit()
    return 0