"""Genetic search for a move sequence that solves a scrambled cube."""

from __future__ import annotations

import random
from operator import attrgetter
from typing import Callable, Optional

from .cube import Cube

_Mutation = Callable[[Cube, random.Random], None]

_STRATEGIES: tuple[tuple[_Mutation, ...], ...] = (
    (Cube.random_permutation,),
    (Cube.random_permutation, Cube.random_permutation),
    (Cube.random_full_rotation, Cube.random_permutation),
    (Cube.random_orientation, Cube.random_permutation),
    (Cube.random_full_rotation, Cube.random_permutation, Cube.random_orientation),
    (Cube.random_orientation, Cube.random_full_rotation, Cube.random_permutation),
)

SOLUTION_FOUND = "Solution found: "
SOLUTION_NOT_FOUND = "Solution not found"


class Solver:
    """Evolves a population of cube copies until one of them is solved."""

    def __init__(
        self,
        population_size: int = 500,
        max_generations: int = 300,
        max_resets: int = 10,
        elitism_num: int = 50,
        rng: Optional[random.Random] = None,
    ) -> None:
        for name, value in (
            ("population_size", population_size),
            ("max_generations", max_generations),
            ("max_resets", max_resets),
        ):
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")
        if elitism_num <= 0:
            raise ValueError(f"elitism_num must be positive, got {elitism_num}")
        self.population_size = population_size
        self.max_generations = max_generations
        self.max_resets = max_resets
        self.elitism_num = elitism_num
        self._rng = rng if rng is not None else random.Random()

    def _seed_population(self, cube: Cube) -> list[Cube]:
        population = []
        for _ in range(self.max_resets * self.population_size):
            candidate = cube.copy()
            candidate.random_single_move(self._rng)
            candidate.random_single_move(self._rng)
            population.append(candidate)
        return population

    def _mutate(self, candidate: Cube) -> None:
        for mutation in self._rng.choice(_STRATEGIES):
            mutation(candidate, self._rng)

    def solve(self, cube: Cube) -> str:
        """Search for a solution of ``cube`` and describe the outcome.

        The input cube is left untouched. The returned text lists the moves
        made after the ones already recorded on ``cube``.
        """
        scramble_moves = len(cube.moves)
        population = self._seed_population(cube)

        for _ in range(self.max_generations):
            for candidate in population:
                candidate.generate_fitness()
            population.sort(key=attrgetter("fitness"))

            for i, candidate in enumerate(population):
                if candidate.fitness == 0:
                    solution = "".join(f"{move} " for move in candidate.moves[scramble_moves:])
                    return SOLUTION_FOUND + solution
                if i > self.elitism_num:
                    elite = population[self._rng.randrange(self.elitism_num)]
                    candidate.copy_state_from(elite)
                    self._mutate(candidate)

        return SOLUTION_NOT_FOUND