"""A 3x3 cube with face turns, whole-cube rotations and move bookkeeping."""

from __future__ import annotations

import random
from typing import Callable, Optional, Sequence, TypeVar

from .moves import (
    FULL_ROTATIONS,
    LAYERS_NUMBER,
    ORIENTATIONS,
    PERMUTATIONS,
    SINGLE_MOVES,
    Side,
    rotate_matrix,
)

Grid = list[list[str]]
Position = tuple[Side, int, int]
T = TypeVar("T")

_LAST = LAYERS_NUMBER - 1
_CENTER = LAYERS_NUMBER // 2

_COLOURS = {
    Side.FRONT: "G",
    Side.LEFT: "O",
    Side.RIGHT: "R",
    Side.TOP: "W",
    Side.BOTTOM: "Y",
    Side.BACK: "B",
}

_SUFFIX_TURNS = {"": 1, "'": 3, "2": 2}

F, L, R, U, D, B = Side.FRONT, Side.LEFT, Side.RIGHT, Side.TOP, Side.BOTTOM, Side.BACK


def _rotated(grid: Grid, turns: int) -> Grid:
    for _ in range(turns):
        grid = rotate_matrix(grid)
    return grid


def _choose(rng: Optional[random.Random], options: Sequence[T]) -> T:
    return (rng or random).choice(options)


class Cube:
    """Sticker state of a cube together with the moves applied to it."""

    def __init__(self) -> None:
        self.sides: dict[Side, Grid] = {
            side: [[colour] * LAYERS_NUMBER for _ in range(LAYERS_NUMBER)]
            for side, colour in _COLOURS.items()
        }
        self.moves: list[str] = []
        self.fitness = 0

    def copy(self) -> "Cube":
        """Return an independent copy, fitness included."""
        clone = Cube()
        clone.copy_state_from(self)
        clone.fitness = self.fitness
        return clone

    def copy_state_from(self, other: "Cube") -> None:
        """Take over the stickers and the move list of another cube."""
        self.moves = list(other.moves)
        self.sides = {side: [row[:] for row in grid] for side, grid in other.sides.items()}

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cube):
            return NotImplemented
        return self.fitness < other.fitness

    def __str__(self) -> str:
        def row(side: Side, i: int) -> str:
            return "".join(f"{colour}  " for colour in self.sides[side][i])

        indent = " " * 9
        lines = [indent + row(U, i) for i in range(LAYERS_NUMBER)]
        lines += [
            "".join(row(side, i) for side in (L, F, R, B)) for i in range(LAYERS_NUMBER)
        ]
        lines += [indent + row(D, i) for i in range(LAYERS_NUMBER)]
        return "\n".join(lines) + "\n"

    def _cycle(self, positions: list[Position]) -> None:
        values = [self.sides[side][r][c] for side, r, c in positions]
        for (side, r, c), value in zip(positions[1:] + positions[:1], values):
            self.sides[side][r][c] = value

    def _turn(self, face: Side, ring: Callable[[int], list[Position]]) -> None:
        self.sides[face] = rotate_matrix(self.sides[face])
        for i in range(LAYERS_NUMBER):
            self._cycle(ring(i))

    def right(self) -> None:
        self._turn(R, lambda i: [(F, i, _LAST), (U, i, _LAST), (B, _LAST - i, 0), (D, i, _LAST)])

    def left(self) -> None:
        self._turn(L, lambda i: [(F, i, 0), (D, i, 0), (B, _LAST - i, _LAST), (U, i, 0)])

    def front(self) -> None:
        self._turn(F, lambda i: [(L, _LAST - i, _LAST), (U, _LAST, i), (R, i, 0), (D, 0, _LAST - i)])

    def back(self) -> None:
        self._turn(B, lambda i: [(R, _LAST - i, _LAST), (U, 0, _LAST - i), (L, i, 0), (D, _LAST, i)])

    def top(self) -> None:
        self._turn(U, lambda i: [(L, 0, i), (B, 0, i), (R, 0, i), (F, 0, i)])

    def bottom(self) -> None:
        self._turn(D, lambda i: [(L, _LAST, i), (F, _LAST, i), (R, _LAST, i), (B, _LAST, i)])

    def x_rotate(self) -> None:
        s = self.sides
        s[R] = rotate_matrix(s[R])
        s[L] = _rotated(s[L], LAYERS_NUMBER)
        front, top, back, bottom = s[F], s[U], s[B], s[D]
        s[U] = front
        s[B] = _rotated(top, 2)
        s[D] = _rotated(back, 2)
        s[F] = bottom

    def y_rotate(self) -> None:
        s = self.sides
        s[U] = rotate_matrix(s[U])
        s[D] = _rotated(s[D], LAYERS_NUMBER)
        front, left, back, right = s[F], s[L], s[B], s[R]
        s[L] = front
        s[B] = left
        s[R] = back
        s[F] = right

    def z_rotate(self) -> None:
        s = self.sides
        s[F] = rotate_matrix(s[F])
        s[B] = _rotated(s[B], LAYERS_NUMBER)
        top, right, bottom, left = s[U], s[R], s[D], s[L]
        s[R] = rotate_matrix(top)
        s[D] = rotate_matrix(right)
        s[L] = rotate_matrix(bottom)
        s[U] = rotate_matrix(left)

    def middle(self) -> None:
        for _ in range(LAYERS_NUMBER):
            self.x_rotate()
            self.left()
        self.right()

    def generate_fitness(self) -> int:
        """Count stickers that differ from their face's centre; store and return it."""
        self.fitness = sum(
            colour != grid[_CENTER][_CENTER]
            for grid in self.sides.values()
            for row in grid
            for colour in row
        )
        return self.fitness

    def random_single_move(self, rng: Optional[random.Random] = None) -> None:
        self.rotate(_choose(rng, SINGLE_MOVES))

    def random_permutation(self, rng: Optional[random.Random] = None) -> None:
        for move in _choose(rng, PERMUTATIONS):
            self.rotate(move)

    def random_full_rotation(self, rng: Optional[random.Random] = None) -> None:
        self.rotate(_choose(rng, FULL_ROTATIONS))

    def random_orientation(self, rng: Optional[random.Random] = None) -> None:
        self.rotate(_choose(rng, ORIENTATIONS))

    def _action(self, face: str) -> Optional[Callable[[], None]]:
        return {
            "F": self.front,
            "R": self.right,
            "U": self.top,
            "B": self.back,
            "L": self.left,
            "D": self.bottom,
            "x": self.x_rotate,
            "y": self.y_rotate,
            "z": self.z_rotate,
            "M": self.middle,
        }.get(face)

    def rotate(self, move: str) -> None:
        """Record a move in standard notation and apply it."""
        action = self._action(move[:1]) if move else None
        turns = _SUFFIX_TURNS.get(move[1:])
        if action is None or turns is None:
            raise ValueError(f"unknown move: {move!r}")
        self.moves.append(move)
        self.correct_last_move()
        for _ in range(turns):
            action()

    def correct_last_move(self) -> None:
        """Merge the last recorded move with the one before it where possible."""
        if len(self.moves) < 2:
            return
        previous, last = self.moves[-2], self.moves[-1]
        if previous == last:
            if last.endswith("2"):
                del self.moves[-2:]
            else:
                self.moves.pop()
                self.moves[-1] = previous[0] + "2"
        elif previous[0] == last[0]:
            if (len(last) == 1 and previous.endswith("'")) or (
                len(previous) == 1 and last.endswith("'")
            ):
                del self.moves[-2:]
            elif (len(last) == 1 and previous.endswith("2")) or (
                len(previous) == 1 and last.endswith("2")
            ):
                self.moves.pop()
                self.moves[-1] = previous[0] + "'"