r""" Splittings `A = Q - P` of the stationary methods.

Each method turns `A @ x = b` into the fixed-point problem
```
          P                  R
    /-----------\       /--------\
x = Q^{-1} (Q - A) x  +  Q^{-1} b
```
and reports whether the iteration matrix `I - Q^{-1} A` is contractive.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from scipy import linalg

from StationaryLab.linear_system.builders import (
    keep_diagonal, keep_lower, keep_upper,
)
from StationaryLab.linear_system.convergence import (
    iteration_matrix, spectral_radius_below_one,
)
from StationaryLab.linear_system.utils import LinearSystem


class SingularSplittingError(RuntimeError):
    pass


@dataclass(frozen=True)
class Splitting:
    propagator: NDArray
    offset: NDArray
    iteration_matrix: NDArray
    converges: bool


def invert_splitting(q: NDArray, method_name: str) -> NDArray:
    """ Q is diagonal or triangular here, so a zero on its diagonal means
    it is singular. Anything whose 1-norm condition number reaches
    1/machine-epsilon is treated the same way. """
    if np.any(np.diag(q) == 0):
        raise SingularSplittingError(
            f"{method_name}: Q has a zero on its diagonal"
        )
    condition = np.linalg.cond(q, p=1)
    if not condition < 1.0 / np.finfo(q.dtype).eps:
        raise SingularSplittingError(
            f"{method_name}: Q is numerically singular (cond={condition:.3e})"
        )
    return linalg.inv(q)


class Method(ABC):
    name: str

    @abstractmethod
    def split(self, ls: LinearSystem) -> Splitting:
        """ P, R and the convergence flag for `ls` """


class Jacobi(Method):
    name = "Jacobi"

    def split(self, ls: LinearSystem) -> Splitting:
        # Q = D
        matrix = ls.matrix
        diagonal = keep_diagonal(matrix)
        inv_diagonal = invert_splitting(diagonal, self.name)
        jacobi = iteration_matrix(inv_diagonal, matrix)

        return Splitting(
            propagator=inv_diagonal @ (diagonal - matrix),
            offset=inv_diagonal @ ls.rhs,
            iteration_matrix=jacobi,
            converges=spectral_radius_below_one(jacobi),
        )


class GaussSeidel(Method):
    name = "GS"

    def split(self, ls: LinearSystem) -> Splitting:
        # Q = L + D
        matrix = ls.matrix
        lower = keep_lower(matrix)
        diagonal = keep_diagonal(matrix)
        upper = keep_upper(matrix)

        inv_lower_diagonal = invert_splitting(lower + diagonal, self.name)
        gauss_seidel = iteration_matrix(inv_lower_diagonal, matrix)

        return Splitting(
            propagator=inv_lower_diagonal @ (-upper),
            offset=inv_lower_diagonal @ ls.rhs,
            iteration_matrix=gauss_seidel,
            converges=spectral_radius_below_one(gauss_seidel),
        )


# in the order they are reported
METHODS: tuple[Method, ...] = (Jacobi(), GaussSeidel())
