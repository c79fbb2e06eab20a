"""Drawing the game with pygame and running it from the command line."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import pygame

from solong.game import HEADER_HEIGHT, TILE_SIZE, Direction, Game, MoveResult
from solong.mapfile import COLLECTIBLE, EXIT, WALL, MapError, check_arguments, load_map

IMAGE_DIR = Path("images")
WINDOW_TITLE = "./so_long"
FRAMES_PER_SECOND = 60

HEADER_COLOR = pygame.Color(0x11, 0x0A, 0x60)
TEXT_COLOR = pygame.Color(0xFF, 0xFF, 0xFF)
TEXT_TOP = 4

IMAGE_NAMES = (
    "back",
    "wall",
    "gate",
    "coin",
    "open_gate",
    "player",
    "player_2",
    "player_3",
    "player_4",
    "en_1",
    "en_4",
)

# Solid colours used for a tile whose image file cannot be loaded.
FALLBACK_COLORS = {
    "back": pygame.Color(40, 40, 40),
    "wall": pygame.Color(110, 80, 50),
    "gate": pygame.Color(120, 0, 0),
    "coin": pygame.Color(230, 200, 30),
    "open_gate": pygame.Color(0, 160, 60),
    "player": pygame.Color(50, 120, 230),
    "player_2": pygame.Color(60, 135, 235),
    "player_3": pygame.Color(70, 150, 240),
    "player_4": pygame.Color(80, 165, 245),
    "en_1": pygame.Color(200, 30, 200),
    "en_4": pygame.Color(150, 20, 150),
}

_KEY_DIRECTIONS = {
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
}


def _load_image(name: str) -> pygame.Surface:
    try:
        return pygame.image.load(str(IMAGE_DIR / f"{name}.xpm"))
    except (pygame.error, OSError):
        tile = pygame.Surface((TILE_SIZE, TILE_SIZE))
        tile.fill(FALLBACK_COLORS[name])
        return tile


class Renderer:
    """Draws a :class:`Game` onto a pygame surface, one frame per call."""

    def __init__(self, game: Game, surface: pygame.Surface) -> None:
        self.game = game
        self.surface = surface
        self.images = {name: _load_image(name) for name in IMAGE_NAMES}
        self.offset = HEADER_HEIGHT if game.bonus else 0
        self._font: pygame.font.Font | None = None
        if game.bonus:
            try:
                pygame.font.init()
                self._font = pygame.font.Font(None, 20)
            except (pygame.error, OSError):
                self._font = None

    def _position(self, row: int, col: int) -> tuple[int, int]:
        return col * TILE_SIZE, row * TILE_SIZE + self.offset

    def _draw_tiles(self) -> None:
        gate = "open_gate" if self.game.gate_open() else "gate"
        for row_index, row in enumerate(self.game.grid):
            for col_index, tile in enumerate(row):
                position = self._position(row_index, col_index)
                if tile == WALL:
                    self.surface.blit(self.images["wall"], position)
                    continue
                self.surface.blit(self.images["back"], position)
                if tile == EXIT:
                    self.surface.blit(self.images[gate], position)
                elif tile == COLLECTIBLE:
                    self.surface.blit(self.images["coin"], position)

    def _draw_header(self) -> None:
        width = self.game.width * TILE_SIZE
        self.surface.fill(HEADER_COLOR, pygame.Rect(0, 0, width, HEADER_HEIGHT))
        if self._font is not None:
            text = self._font.render(str(self.game.moves), True, TEXT_COLOR)
            self.surface.blit(text, ((self.game.width // 2) * TILE_SIZE, TEXT_TOP))

    def draw(self) -> None:
        """Draw the current frame and advance the game's animation."""
        if self.game.bonus:
            self._draw_header()
        self._draw_tiles()
        if self.game.bonus:
            enemy_image = self.images[self.game.enemy_frame()]
            for enemy in self.game.enemies:
                self.surface.blit(enemy_image, self._position(enemy.row, enemy.col))
        player_image = self.images[self.game.player_frame()]
        self.surface.blit(player_image, self._position(*self.game.player))
        self.game.tick()


def _print_counter(game: Game) -> None:
    if not game.bonus:
        print(f"counter: {game.moves}", flush=True)


def _handle_key(game: Game, key: int) -> int | None:
    """Apply a key press; return an exit status when the game ends."""
    if key == pygame.K_ESCAPE:
        return 1
    direction = _KEY_DIRECTIONS.get(key)
    if direction is None:
        return None
    result = game.move(direction)
    if result is MoveResult.BLOCKED:
        return None
    _print_counter(game)
    if result in (MoveResult.WON, MoveResult.CAUGHT):
        return 0
    return None


def run(path: str | Path, bonus: bool = False) -> int:
    """Load the map at ``path`` and play it in a window; return the exit status."""
    game = Game(load_map(path), bonus=bonus)
    pygame.init()
    try:
        height = game.height * TILE_SIZE + (HEADER_HEIGHT if bonus else 0)
        screen = pygame.display.set_mode((game.width * TILE_SIZE, height))
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(game, screen)
        _print_counter(game)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    status = _handle_key(game, event.key)
                    if status is not None:
                        return status
            renderer.draw()
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()


def _start(argv: Sequence[str] | None, bonus: bool) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = check_arguments(args)
        load_map(path)
    except MapError as exc:
        sys.stderr.write(f"Error:\n{exc}\n")
        return 1
    try:
        return run(path, bonus)
    except pygame.error as exc:
        sys.stderr.write(f"Error:\n{exc}\n")
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line."""
    return _start(argv, bonus=False)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line with enemies, animation and a header."""
    return _start(argv, bonus=True)