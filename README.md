# cubegenetic

A 3x3 Rubik's cube model together with a genetic-algorithm solver.

The solver begins from a scrambled cube and evolves a population of
candidate cubes. A candidate's fitness is the number of stickers that do
not match the centre of their face. Each generation, the candidates are
sorted by fitness. Every candidate past the first `elitism_num + 1` is
rebuilt from a random one of the best `elitism_num`. It is then mutated by
one of six strategies. Each strategy combines a known permutation sequence
with, in some cases, a whole-cube rotation (`x`, `y`) or an orientation
turn (`z`). The search ends when a candidate reaches fitness 0, or when
the generation limit runs out.

## Command line

```
cubegenetic
```

The same command can be run as `python -m cubegenetic.cli`. It does three
things:

1. Generates a random 20-move scramble, in which the same face is never
   turned twice in a row, and prints it.
2. Prints an unfolded picture of the scrambled cube. The top face is shown
   first, then the left, front, right and back faces side by side, then
   the bottom face.
3. Prints either `Solution found: ` followed by the moves, or
   `Solution not found`.

Options:

| Option | Default | Meaning |
|--------|---------|---------|
| `--seed N` | none | seed for the random generator, so that a run can be repeated |
| `--population-size N` | 500 | candidates per reset |
| `--max-generations N` | 300 | generations to try before giving up |
| `--max-resets N` | 10 | the initial population is `max-resets × population-size` cubes |
| `--elitism N` | 50 | number of best candidates that others are rebuilt from |

A negative size, generation or reset count is rejected, and so is an
elitism value that is not positive.

## Library use

```python
import random

from cubegenetic.cube import Cube
from cubegenetic.moves import generate_scramble
from cubegenetic.solver import Solver

rng = random.Random(1)
cube = Cube()
for move in generate_scramble(rng):
    cube.rotate(move)

print(cube)
print(Solver(rng=rng).solve(cube))
```

### `cubegenetic.cube.Cube`

- `sides`: a dict from `Side` to a 3x3 grid of colour letters. A solved
  cube has front `G`, left `O`, right `R`, top `W`, bottom `Y` and back `B`.
- `moves`: the list of moves recorded so far.
- `fitness`: the last value computed by `generate_fitness()`.
- `rotate(move)` accepts moves in standard notation:
  - the face turns `F R U B L D`
  - the slice move `M`
  - the whole-cube rotations `x y z`

  Any of these can be followed by `'` for the inverse or by `2` for a half
  turn. Any other move raises `ValueError`. When a move is recorded,
  `correct_last_move()` merges it with the previous move on the same face
  or cancels the two against each other. For example, `R R` becomes `R2`,
  `R R'` cancels out, and `R R2` becomes `R'`.
- `front()`, `back()`, `left()`, `right()`, `top()`, `bottom()`,
  `x_rotate()`, `y_rotate()`, `z_rotate()` and `middle()` apply a single
  quarter turn without recording it.
- `random_single_move(rng)`, `random_permutation(rng)`,
  `random_full_rotation(rng)` and `random_orientation(rng)` apply a random
  choice from the tables in `cubegenetic.moves`.
- `copy()` returns an independent copy, and `copy_state_from(other)` takes
  over another cube's stickers and moves.
- `str(cube)` gives the unfolded picture that the command prints.
- Cubes compare by `fitness` with `<`.

### `cubegenetic.moves`

- `Side`: an enum of the six faces.
- Move tables: `SINGLE_MOVES`, `PERMUTATIONS`, `FULL_ROTATIONS` and
  `ORIENTATIONS`.
- `rotate_matrix(matrix)` returns a square matrix turned a quarter turn
  clockwise.
- `generate_scramble(rng)` returns a 20-move scramble.

### `cubegenetic.solver.Solver`

`Solver` takes these parameters:

| Parameter | Default |
|-----------|---------|
| `population_size` | 500 |
| `max_generations` | 300 |
| `max_resets` | 10 |
| `elitism_num` | 50 |
| `rng` | a new `random.Random` instance |

`solve(cube)` leaves the given cube unchanged and returns a string. The
solution it lists holds only the moves made after the ones already
recorded on the cube.

## What it does not do

The package does not read a cube state or a scramble from the user. The
command always solves a cube it has scrambled itself. The solver is a
random search, so it is not guaranteed to find a solution, and the moves
it finds are not the shortest ones.

## Tests

```
pip install -e ".[test]"
pytest
```