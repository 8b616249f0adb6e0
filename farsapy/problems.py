"""Optimization problems that the solver works on."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class Problem(ABC):
    """An objective with gradient and Hessian-vector products over grouped variables.

    ``groups`` lists, for each group, the indices of the variables in it.
    """

    def __init__(self, number_of_variables: int, groups: list[list[int]]) -> None:
        self.number_of_variables = number_of_variables
        self.groups = groups

    @abstractmethod
    def initial_point(self) -> list[float]:
        """Return the starting point."""

    @abstractmethod
    def evaluate_objective(self, x: Sequence[float]) -> float:
        """Return the objective value at ``x``."""

    @abstractmethod
    def evaluate_gradient(self, x: Sequence[float]) -> list[float]:
        """Return the gradient at ``x``."""

    @abstractmethod
    def evaluate_hessian_vector_product(
        self, x: Sequence[float], groups: Sequence[int], v: Sequence[float]
    ) -> list[float]:
        """Return the product of the Hessian at ``x`` with ``v``."""

    def finalize_solution(self, x: Sequence[float], f: float, g: Sequence[float]) -> None:
        """Receive the final iterate, objective and gradient."""

    def _check_length(self, vector: Sequence[float], what: str) -> None:
        if len(vector) != self.number_of_variables:
            raise ValueError(
                f"{what} has length {len(vector)}, expected {self.number_of_variables}"
            )


class SimpleQuadratic(Problem):
    """The objective f(x) = sum_i (i+1) * x_i**2, starting from all ones.

    Its optimal value is 0.0, reached at the origin.
    """

    def __init__(self, n: int) -> None:
        super().__init__(n, [[i] for i in range(n)])

    def initial_point(self) -> list[float]:
        return [1.0] * self.number_of_variables

    def evaluate_objective(self, x: Sequence[float]) -> float:
        self._check_length(x, "x")
        return sum((i + 1) * xi**2 for i, xi in enumerate(x))

    def evaluate_gradient(self, x: Sequence[float]) -> list[float]:
        self._check_length(x, "x")
        return [(i + 1) * 2.0 * xi for i, xi in enumerate(x)]

    def evaluate_hessian_vector_product(
        self, x: Sequence[float], groups: Sequence[int], v: Sequence[float]
    ) -> list[float]:
        self._check_length(v, "v")
        return [(i + 1) * 2.0 * vi for i, vi in enumerate(v)]

    def finalize_solution(self, x: Sequence[float], f: float, g: Sequence[float]) -> None:
        return None