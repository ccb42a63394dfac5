"""Cube geometry constants, move tables and scramble generation."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Optional, Sequence, TypeVar

LAYERS_NUMBER = 3
SCRAMBLE_COUNT = 20

T = TypeVar("T")


class Side(IntEnum):
    """The six faces of the cube."""

    FRONT = 0
    LEFT = 1
    RIGHT = 2
    TOP = 3
    BOTTOM = 4
    BACK = 5


PERMUTATIONS: tuple[tuple[str, ...], ...] = (
    ("F'", "L'", "B'", "R'", "U'", "R", "U'", "B", "L", "F", "R", "U", "R'", "U"),
    ("F", "R", "B", "L", "U", "L'", "U", "B'", "R'", "F'", "L'", "U'", "L", "U'"),
    ("U2", "B", "U2", "B'", "R2", "F", "R'", "F'", "U2", "F'", "U2", "F", "R'"),
    ("U2", "R", "U2", "R'", "F2", "L", "F'", "L'", "U2", "L'", "U2", "L", "F'"),
    ("U'", "B2", "D2", "L'", "F2", "D2", "B2", "R'", "U'"),
    ("U", "B2", "D2", "R", "F2", "D2", "B2", "L", "U"),
    ("D'", "R'", "D", "R2", "U'", "R", "B2", "L", "U'", "L'", "B2", "U", "R2"),
    ("D", "L", "D'", "L2", "U", "L'", "B2", "R'", "U", "R", "B2", "U'", "L2"),
    ("R'", "U", "L'", "U2", "R", "U'", "L", "R'", "U", "L'", "U2", "R", "U'", "L", "U'"),
    ("L", "U'", "R", "U2", "L'", "U", "R'", "L", "U'", "R", "U2", "L'", "U", "R'", "U"),
    ("F'", "U", "B", "U'", "F", "U", "B'", "U'"),
    ("F", "U'", "B'", "U", "F'", "U'", "B", "U"),
    ("L'", "U2", "L", "R'", "F2", "R"),
    ("R'", "U2", "R", "L'", "B2", "L"),
    ("M2", "U", "M2", "U2", "M2", "U", "M2"),
)

ORIENTATIONS: tuple[str, ...] = ("z", "z'", "z2")

FULL_ROTATIONS: tuple[str, ...] = ("x", "x'", "x2", "y", "y'", "y2")

SINGLE_MOVES: tuple[str, ...] = (
    "F", "F2", "F'",
    "R", "R2", "R'",
    "U", "U2", "U'",
    "B", "B2", "B'",
    "L", "L2", "L'",
    "D", "D2", "D'",
)


def rotate_matrix(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Return the square matrix turned a quarter turn clockwise."""
    return [list(row) for row in zip(*reversed(matrix))]


def generate_scramble(rng: Optional[random.Random] = None) -> list[str]:
    """Return SCRAMBLE_COUNT face turns, no face turned twice in a row."""
    if rng is None:
        rng = random.Random()
    faces = len(SINGLE_MOVES) // 3
    sequence = [rng.randrange(faces)]
    while len(sequence) < SCRAMBLE_COUNT:
        face = rng.randrange(faces)
        if face != sequence[-1]:
            sequence.append(face)
    return [SINGLE_MOVES[face * 3 + rng.randrange(3)] for face in sequence]