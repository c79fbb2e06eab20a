"""Game state and rules: movement, collectibles, the exit gate and enemies."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from solong.mapfile import COLLECTIBLE, EMPTY, EXIT, PLAYER, WALL

LEFT_KEY = 0
DOWN_KEY = 1
RIGHT_KEY = 2
UP_KEY = 13
ESC_KEY = 53

TILE_SIZE = 32
HEADER_HEIGHT = 30

ENEMY_CYCLE = 10


class Direction(Enum):
    """A step on the grid as a (row, column) offset."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)


class MoveResult(Enum):
    """What happened when the player tried to move."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    CAUGHT = "caught"


_KEY_DIRECTIONS = {
    LEFT_KEY: Direction.LEFT,
    RIGHT_KEY: Direction.RIGHT,
    UP_KEY: Direction.UP,
    DOWN_KEY: Direction.DOWN,
}


def direction_for_key(keycode: int) -> Direction | None:
    """Return the direction bound to ``keycode``, or None if there is none."""
    return _KEY_DIRECTIONS.get(keycode)


@dataclass(frozen=True)
class Enemy:
    """An enemy standing on a tile."""

    row: int
    col: int


class Game:
    """The state of one game on a validated map."""

    def __init__(
        self,
        grid: Sequence[str],
        bonus: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        self.grid: list[list[str]] = [list(row) for row in grid]
        self.height = len(self.grid)
        self.width = len(self.grid[0]) if self.grid else 0
        self.bonus = bonus
        self._rng = rng if rng is not None else random.Random()
        self.player = self._find_player()
        self.moves = 0
        self.frame_count = 0
        self.enemy_counter = ENEMY_CYCLE
        self.enemies: list[Enemy] = []
        if bonus:
            self.spawn_enemies()

    def _find_player(self) -> tuple[int, int]:
        for row_index, row in enumerate(self.grid):
            if PLAYER in row:
                return row_index, row.index(PLAYER)
        raise ValueError("the map has no player")

    @property
    def rows(self) -> list[str]:
        """The grid as strings, one per row."""
        return ["".join(row) for row in self.grid]

    def collectibles_left(self) -> int:
        """Number of collectibles still on the map."""
        return sum(row.count(COLLECTIBLE) for row in self.grid)

    def gate_open(self) -> bool:
        """True once every collectible has been taken."""
        return not any(COLLECTIBLE in row for row in self.grid)

    def enemy_at(self, row: int, col: int) -> bool:
        """True if an enemy stands on the tile at ``row``, ``col``."""
        return any(enemy.row == row and enemy.col == col for enemy in self.enemies)

    def spawn_enemies(self) -> list[Enemy]:
        """Place enemies on random empty tiles, one attempt per collectible plus one."""
        self.enemy_counter = ENEMY_CYCLE
        self.enemies = []
        for _ in range(self.collectibles_left() + 1):
            self._try_place_enemy()
        return list(self.enemies)

    def _try_place_enemy(self) -> None:
        if self.height == 0 or self.width == 0:
            return
        row = self._rng.randrange(self.height)
        if row == 0:
            return
        line = self.grid[row]
        col = 0
        while col < self.width:
            col = self._rng.randrange(self.width)
            if line[col] == EMPTY:
                self.enemies.append(Enemy(row, col))
                return
            col += 1

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one tile in ``direction``."""
        row, col = self.player
        drow, dcol = direction.value
        target_row, target_col = row + drow, col + dcol
        target = self.grid[target_row][target_col]
        if target == WALL:
            return MoveResult.BLOCKED
        if target == COLLECTIBLE:
            self.grid[target_row][target_col] = EMPTY
            target = EMPTY
        if target == EXIT and self.gate_open():
            self.moves += 1
            return MoveResult.WON
        if self.bonus and self.enemy_at(target_row, target_col):
            self.moves += 1
            return MoveResult.CAUGHT
        if target == EXIT:
            return MoveResult.BLOCKED
        self.grid[row][col] = EMPTY
        self.grid[target_row][target_col] = PLAYER
        self.player = (target_row, target_col)
        self.moves += 1
        return MoveResult.MOVED

    def player_frame(self) -> str:
        """Name of the player image for the current frame."""
        if not self.bonus or self.frame_count <= 5:
            return "player"
        if self.frame_count <= 10:
            return "player_2"
        if self.frame_count <= 20:
            return "player_3"
        return "player_4"

    def enemy_frame(self) -> str:
        """Name of the enemy image for the current frame."""
        return "en_1" if self.enemy_counter > 0 else "en_4"

    def tick(self) -> None:
        """Advance the animation counters by one frame."""
        if not self.bonus:
            return
        if self.frame_count <= 20:
            self.frame_count += 1
        else:
            self.frame_count = 0
        if self.enemies:
            self.enemy_counter -= 1
            if self.enemy_counter == -ENEMY_CYCLE:
                self.enemy_counter = ENEMY_CYCLE