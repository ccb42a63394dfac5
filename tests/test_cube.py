import random
from collections import Counter

import pytest

from cubegenetic.cube import Cube
from cubegenetic.moves import (
    FULL_ROTATIONS,
    ORIENTATIONS,
    PERMUTATIONS,
    SINGLE_MOVES,
    Side,
    generate_scramble,
)

BASIC = ["F", "R", "U", "B", "L", "D"]


def _solved_sides():
    return Cube().sides


def _sticker_counts(cube):
    return Counter(c for grid in cube.sides.values() for row in grid for c in row)


def _inverse(move):
    if move.endswith("'"):
        return move[0]
    if move.endswith("2"):
        return move
    return move + "'"


def test_new_cube_is_solved():
    cube = Cube()
    assert cube.generate_fitness() == 0
    assert cube.moves == []
    assert cube.sides[Side.FRONT][1][1] == "G"
    assert cube.sides[Side.TOP][0][0] == "W"


def test_single_right_turn_fitness():
    cube = Cube()
    cube.rotate("R")
    assert cube.generate_fitness() == 12
    assert cube.fitness == 12


@pytest.mark.parametrize("face", BASIC)
def test_four_quarter_turns_are_identity(face):
    cube = Cube()
    for _ in range(4):
        cube.rotate(face)
    assert cube.sides == _solved_sides()


@pytest.mark.parametrize("face", BASIC + ["x", "y", "z", "M"])
def test_turn_then_inverse_restores(face):
    cube = Cube()
    cube.rotate("R")
    cube.rotate("U")
    before = cube.copy().sides
    cube.rotate(face)
    cube.rotate(face + "'")
    assert cube.sides == before


@pytest.mark.parametrize("move", ["x", "y", "z", "x'", "y2", "z'"])
def test_whole_cube_rotation_keeps_solved_fitness(move):
    cube = Cube()
    cube.rotate(move)
    assert cube.generate_fitness() == 0


@pytest.mark.parametrize("rotation", ["x_rotate", "y_rotate", "z_rotate"])
def test_whole_cube_rotation_order_four(rotation):
    cube = Cube()
    cube.rotate("F")
    cube.rotate("D")
    before = cube.copy().sides
    for _ in range(4):
        getattr(cube, rotation)()
    assert cube.sides == before


@pytest.mark.parametrize("move", list(SINGLE_MOVES) + ["M", "M2", "x2", "z"])
def test_moves_preserve_sticker_counts(move):
    cube = Cube()
    cube.rotate(move)
    assert _sticker_counts(cube) == _sticker_counts(Cube())


@pytest.mark.parametrize("seed", [3, 11, 2024])
def test_scramble_and_inverse_return_to_solved(seed):
    cube = Cube()
    scramble = generate_scramble(random.Random(seed))
    for move in scramble:
        cube.rotate(move)
    for move in reversed(scramble):
        cube.rotate(_inverse(move))
    assert cube.sides == _solved_sides()
    assert cube.moves == []


def test_repeated_move_merges_to_double():
    cube = Cube()
    cube.rotate("R")
    cube.rotate("R")
    assert cube.moves == ["R2"]


def test_repeated_prime_merges_to_double():
    cube = Cube()
    cube.rotate("U'")
    cube.rotate("U'")
    assert cube.moves == ["U2"]


@pytest.mark.parametrize("pair", [("R", "R'"), ("R'", "R"), ("R2", "R2")])
def test_cancelling_moves_are_removed(pair):
    cube = Cube()
    cube.rotate("F")
    for move in pair:
        cube.rotate(move)
    assert cube.moves == ["F"]


@pytest.mark.parametrize("pair", [("L", "L2"), ("L2", "L")])
def test_quarter_and_half_merge_to_prime(pair):
    cube = Cube()
    for move in pair:
        cube.rotate(move)
    assert cube.moves == ["L'"]


def test_prime_and_half_stay_separate():
    cube = Cube()
    cube.rotate("R'")
    cube.rotate("R2")
    assert cube.moves == ["R'", "R2"]


def test_different_faces_are_not_merged():
    cube = Cube()
    cube.rotate("R")
    cube.rotate("U")
    assert cube.moves == ["R", "U"]


@pytest.mark.parametrize("move", ["", "Q", "R3", "F''", "r"])
def test_unknown_move_raises(move):
    cube = Cube()
    cube.rotate("R")
    with pytest.raises(ValueError):
        cube.rotate(move)
    assert cube.moves == ["R"]


def test_copy_is_independent():
    cube = Cube()
    cube.rotate("R")
    cube.generate_fitness()
    clone = cube.copy()
    assert clone.sides == cube.sides
    assert clone.moves == cube.moves
    assert clone.fitness == cube.fitness
    clone.rotate("U")
    assert cube.moves == ["R"]
    assert clone.sides != cube.sides


def test_copy_state_from_takes_stickers_and_moves():
    source = Cube()
    source.rotate("F")
    source.rotate("D2")
    target = Cube()
    target.fitness = 5
    target.copy_state_from(source)
    assert target.sides == source.sides
    assert target.moves == ["F", "D2"]
    assert target.fitness == 5
    target.rotate("L")
    assert source.moves == ["F", "D2"]


def test_ordering_by_fitness():
    solved = Cube()
    solved.generate_fitness()
    turned = Cube()
    turned.rotate("B")
    turned.generate_fitness()
    assert solved < turned
    assert not turned < solved
    assert sorted([turned, solved])[0] is solved


def test_str_layout_of_solved_cube():
    lines = str(Cube()).split("\n")
    assert len(lines) == 10 and lines[-1] == ""
    assert lines[0] == " " * 9 + "W  W  W  "
    assert lines[3] == "O  O  O  G  G  G  R  R  R  B  B  B  "
    assert lines[8] == " " * 9 + "Y  Y  Y  "


def test_random_single_move_records_known_move():
    cube = Cube()
    cube.random_single_move(random.Random(5))
    assert len(cube.moves) == 1
    assert cube.moves[0] in SINGLE_MOVES


@pytest.mark.parametrize("seed", range(5))
def test_random_orientation_and_full_rotation(seed):
    rng = random.Random(seed)
    cube = Cube()
    cube.random_orientation(rng)
    assert cube.moves[0] in ORIENTATIONS
    other = Cube()
    other.random_full_rotation(rng)
    assert other.moves[0] in FULL_ROTATIONS
    assert cube.generate_fitness() == 0
    assert other.generate_fitness() == 0


@pytest.mark.parametrize("seed", range(5))
def test_random_permutation_preserves_stickers(seed):
    cube = Cube()
    cube.random_permutation(random.Random(seed))
    allowed = {move for sequence in PERMUTATIONS for move in sequence} | {"M'", "U'", "L", "R"}
    assert _sticker_counts(cube) == _sticker_counts(Cube())
    assert set(cube.moves) <= allowed | {m[0] + "2" for m in allowed} | {m[0] + "'" for m in allowed} | {m[0] for m in allowed}


def test_random_moves_deterministic_for_seed():
    first, second = Cube(), Cube()
    first.random_permutation(random.Random(8))
    second.random_permutation(random.Random(8))
    assert first.sides == second.sides
    assert first.moves == second.moves