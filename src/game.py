"""
core game logic and mechanics
"""
import random

from tile import Tile
from game_status import GameStatus


DEFAULT_WIDTH = 4
DEFAULT_HEIGHT = 4
WIN_TILE = 2048
# 90% chance for 2 and 10% chance for 4
SPAWN_FOUR_PROBABILITY = 0.1
DIRECTIONS = ('up', 'down', 'left', 'right')

EMPTY = Tile()


class Board:
    """
    2048 board of width x height tiles stored row-major (row * width + col)

    rng is any object with random() and choice(seq), e.g. the random module,
    random.Random or numpy.random.Generator
    """

    def __init__(self, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT, rng=None, target=WIN_TILE):
        """initialize an empty board with one starting tile"""
        self._setup(width, height, rng, target)
        self.spawn()

    def _setup(self, width, height, rng, target):
        if width < 1 or height < 1:
            raise ValueError(f"board must be at least 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self.rng = rng if rng is not None else random
        self.target = target
        self.tiles = [EMPTY] * (width * height)
        self.score = 0

    @classmethod
    def from_values(cls, values, width, height, rng=None, target=WIN_TILE):
        """build a board from row-major values without spawning"""
        board = cls.__new__(cls)
        board._setup(width, height, rng, target)
        values = list(values)
        if len(values) != width * height:
            raise ValueError(f"expected {width * height} values, got {len(values)}")
        board.tiles = [Tile(v) for v in values]
        return board

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def values(self):
        """all cell values in row-major order"""
        return tuple(t.value() for t in self.tiles)

    def rows(self):
        w = self._width
        return [[t.value() for t in self.tiles[r * w:(r + 1) * w]] for r in range(self._height)]

    def tile(self, row, col):
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(f"cell ({row}, {col}) outside {self._width}x{self._height} board")
        return self.tiles[row * self._width + col]

    def max_tile(self):
        return max(t.value() for t in self.tiles)

    def reset(self):
        """reset the game"""
        self.tiles = [EMPTY] * (self._width * self._height)
        self.score = 0
        self.spawn()

    def spawn(self):
        """add a random tile (2 or 4) to an empty space, returns its index"""
        empty_cells = [i for i, t in enumerate(self.tiles) if t.is_empty()]
        if not empty_cells:
            return None

        index = int(self.rng.choice(empty_cells))
        self.tiles[index] = Tile(4 if self.rng.random() < SPAWN_FOUR_PROBABILITY else 2)
        return index

    def _lines(self, direction):
        """
        flat indices of every line, each ordered from the edge tiles are
        pulled toward to the opposite edge
        """
        w, h = self._width, self._height
        if direction == 'left':
            return [[r * w + c for c in range(w)] for r in range(h)]
        if direction == 'right':
            return [[r * w + c for c in reversed(range(w))] for r in range(h)]
        if direction == 'up':
            return [[r * w + c for r in range(h)] for c in range(w)]
        if direction == 'down':
            return [[r * w + c for r in reversed(range(h))] for c in range(w)]
        raise ValueError(f"Unknown direction: {direction}")

    @staticmethod
    def _slide_line(tiles, line):
        """compact and merge one line in place"""
        changed = False
        points = 0
        i = 0
        while i < len(line) - 1:
            cur = line[i]
            nxt = next((j for j in line[i + 1:] if not tiles[j].is_empty()), None)
            if nxt is None:
                break

            if tiles[cur].is_empty():
                # pull the tile in and look at the same cell again
                tiles[cur] = tiles[nxt]
                tiles[nxt] = EMPTY
                changed = True
                continue

            if tiles[cur] == tiles[nxt]:
                tiles[cur] = tiles[cur].merge_with(tiles[nxt])
                tiles[nxt] = EMPTY
                points += tiles[cur].value()
                changed = True

            # cells behind i are never revisited, so each merges at most once
            i += 1

        return changed, points

    def _slide(self, tiles, direction):
        moved = False
        points = 0
        for line in self._lines(direction):
            changed, gained = self._slide_line(tiles, line)
            moved = moved or changed
            points += gained
        return moved, points

    def preview(self, direction):
        """
        afterstate of a move: values after sliding but before the random
        tile, without touching the board
        """
        tiles = list(self.tiles)
        moved, points = self._slide(tiles, direction)
        return tuple(t.value() for t in tiles), points, moved

    def make_move(self, direction):
        """
        make a move in the specified direction

        returns (moved, points); a new tile only appears if something moved
        """
        moved, points = self._slide(self.tiles, direction)
        if moved:
            self.score += points
            self.spawn()
        return moved, points

    def move(self, direction):
        self.make_move(direction)
        return self.status()

    def up(self):
        return self.move('up')

    def down(self):
        return self.move('down')

    def left(self):
        return self.move('left')

    def right(self):
        return self.move('right')

    def can_move(self):
        """check for empty cells or adjacent equal tiles"""
        w, h = self._width, self._height
        tiles = self.tiles
        if any(t.is_empty() for t in tiles):
            return True

        # check for possible merges horizontally
        for r in range(h):
            for c in range(w - 1):
                if tiles[r * w + c] == tiles[r * w + c + 1]:
                    return True

        # check for possible merges vertically
        for r in range(h - 1):
            for c in range(w):
                if tiles[r * w + c] == tiles[(r + 1) * w + c]:
                    return True

        return False

    def has_won(self):
        return any(t.value() >= self.target for t in self.tiles)

    def is_game_over(self):
        """check if game is over (no more moves possible)"""
        return not self.can_move()

    def status(self):
        # a stuck board is over even if it holds the target tile
        if self.is_game_over():
            return GameStatus.OVER
        if self.has_won():
            return GameStatus.WON
        return GameStatus.PLAYING

    def print_board(self):
        """print the board to console (for testing)"""
        cell_width = max(4, len(str(self.max_tile())))
        line = "-" * (self._width * (cell_width + 1) + 1)
        print(f"Score: {self.score}")
        print(line)
        for row in self.rows():
            print("|", end="")
            for cell in row:
                if cell == 0:
                    print(" " * cell_width + "|", end="")
                else:
                    print(f"{cell:{cell_width}}|", end="")
            print()
        print(line)
        status = self.status()
        if status is not GameStatus.PLAYING:
            print(str(status))
        print()
