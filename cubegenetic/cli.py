"""Command line entry point: scramble a cube and try to solve it."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

from .cube import Cube
from .moves import generate_scramble
from .solver import Solver


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cubegenetic",
        description="Scramble a cube at random and search for a solution.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument("--population-size", type=int, default=500)
    parser.add_argument("--max-generations", type=int, default=300)
    parser.add_argument("--max-resets", type=int, default=10)
    parser.add_argument("--elitism", type=int, default=50)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _parser()
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    try:
        solver = Solver(
            population_size=args.population_size,
            max_generations=args.max_generations,
            max_resets=args.max_resets,
            elitism_num=args.elitism,
            rng=rng,
        )
    except ValueError as error:
        parser.error(str(error))

    cube = Cube()
    scramble = generate_scramble(rng)
    for move in scramble:
        cube.rotate(move)

    print("".join(f"{move} " for move in scramble))
    print(cube)
    print(solver.solve(cube))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())